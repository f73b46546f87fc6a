# --- File: app/schemas/auth/login.py ---
"""
Login request and the token payload handed back on success.
"""

from __future__ import annotations

from pydantic import EmailStr, Field, field_validator

from app.schemas.common.base import BaseCreateSchema, BaseSchema, PasswordStr

__all__ = [
    "LoginRequest",
    "LoginResult",
]


class LoginRequest(BaseCreateSchema):
    """Credentials checked against the stored bcrypt hash."""

    email: EmailStr = Field(..., examples=["guest@example.com"])
    password: PasswordStr = Field(..., max_length=128)

    @field_validator("password")
    @classmethod
    def reject_blank_password(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Password cannot be blank")
        return v


class LoginResult(BaseSchema):
    """Signed access token, the account's role and a readable token lifetime ("7 Days")."""

    token: str
    role: str
    expiration_time: str
