"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ayesha Khan",
                    "email": "ayesha@example.com",
                    "password": "s3cret-pass",
                    "address": "House 12, Street 4, F-7/2, Islamabad",
                }
            ]
        }
    }

    name: str = Field(..., min_length=2, max_length=50)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=6, max_length=128)
    address: str | None = Field(None, max_length=200)


class UserIdResponse(BaseModel):
    user_id: str


class UserResponse(BaseModel):
    user_id: str
    name: str
    email: str
    address: str | None = None
    is_admin: bool
