"""Pydantic request/response schemas for Users API."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class UserCreateIn(BaseModel):
    # id, code and created_at may be sent but are never trusted.
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    phone_number: str = ""
    password: str = Field(default="", json_schema_extra={"writeOnly": True})

    @field_validator("name", "email", "phone_number", "password", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        # JSON null binds to the zero value, same as an absent key.
        return "" if value is None else value


class UserCreatedOut(BaseModel):
    id: int
    code: str
    name: str
    email: str
    phone_number: str


class UserOut(UserCreatedOut):
    created_at: Optional[datetime] = None

    @field_serializer("created_at")
    def _render_created_at(self, value: Optional[datetime]) -> Optional[str]:
        return value.strftime("%Y-%m-%d %H:%M:%S") if value else None


class ErrorOut(BaseModel):
    error: str
