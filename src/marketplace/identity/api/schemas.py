"""Pydantic request/response schemas for the Account API."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from marketplace.shared.access import Role


class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    role: Role

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "jane",
                    "email": "jane@example.com",
                    "password": "Secret123!",
                    "role": "Buyer",
                }
            ]
        }
    }


class LoginRequest(BaseModel):
    username: str
    password: str


class UpdateMeRequest(BaseModel):
    username: str | None = Field(default=None, min_length=3, max_length=50)
    email: EmailStr | None = None


class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(min_length=6, max_length=128)


class AccountResponse(BaseModel):
    id: str
    username: str
    email: str
    role: str
    registered_at: datetime | None = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account_id: str
    username: str
    role: str


class StatusResponse(BaseModel):
    status: str = "ok"
