from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from api.domain.schemas import UserSignIn, UserSignup
from api.services.auth_service import AuthService
from api.services.session_service import (
    Principal,
    clear_session_cookie,
    current_principal,
    issue_session,
    set_session_cookie,
)

router = APIRouter(tags=["auth"])
auth_service = AuthService()


@router.post("/signup")
def signup(body: UserSignup):
    auth_service.signup(body)
    return Response(status_code=200)


@router.post("/signin")
def signin(request: Request, body: UserSignIn):
    user_id = auth_service.signin(body)
    if user_id is None:
        return PlainTextResponse("invalid credentials", status_code=403)
    response = PlainTextResponse("connected", status_code=200)
    set_session_cookie(response, issue_session(request, user_id))
    return response


@router.post("/signout")
def signout():
    response = PlainTextResponse("logged out", status_code=200)
    clear_session_cookie(response)
    return response


@router.get("/userinfo")
def userinfo(principal: Principal = Depends(current_principal)):
    user = auth_service.get_user(principal.user_id)
    if user is None:
        return Response(status_code=404)
    return JSONResponse(user)
