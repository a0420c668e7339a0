"""Request payloads accepted by the HTTP surface."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api.domain.validation import is_valid_color, is_valid_email


class UserSignup(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(min_length=1)
    name: str = Field(min_length=1)
    password: str = Field(min_length=1, alias="pass")

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        if not is_valid_email(value):
            raise ValueError("invalid email")
        return value


class UserSignIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: str
    password: str = Field(alias="pass")


class AddLoyalty(BaseModel):
    name: str = Field(min_length=1)
    color: Optional[str] = None
    code: str = Field(min_length=1)

    @field_validator("color")
    @classmethod
    def _color_shape(cls, value: Optional[str]) -> Optional[str]:
        if not is_valid_color(value):
            raise ValueError("invalid color")
        return value
