from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.domain.schemas import AddLoyalty
from api.services.card_service import LoyaltyService
from api.services.session_service import Principal, current_principal

router = APIRouter(prefix="/loyalties", tags=["loyalties"])
loyalty_service = LoyaltyService()


@router.put("")
def add_loyalty(body: AddLoyalty, principal: Principal = Depends(current_principal)):
    return loyalty_service.create(principal.user_id, body)


@router.get("")
def get_loyalties(
    limit: Optional[str] = None,
    offset: Optional[str] = None,
    principal: Principal = Depends(current_principal),
):
    return loyalty_service.list_cards(principal.user_id, limit, offset)


# No session or ownership check: any caller may delete any card by id.
@router.delete("/{loyalty_id}")
def delete_loyalty(loyalty_id: str):
    loyalty_service.delete(loyalty_id)
    return PlainTextResponse("loyalty deleted", status_code=200)
