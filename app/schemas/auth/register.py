# --- File: app/schemas/auth/register.py ---
"""
Registration schemas.
Pydantic v2 compliant.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from app.models.base.enums import UserRole
from app.schemas.common.base import BaseCreateSchema, PasswordStr

__all__ = [
    "RegisterRequest",
]


class RegisterRequest(BaseCreateSchema):
    """
    User registration request.

    ``role`` is optional; a missing or blank role registers a regular user.
    """

    email: EmailStr = Field(
        ...,
        description="Email address (must be unique)",
        examples=["guest@example.com"],
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Full name",
        examples=["Jane Doe"],
    )
    phone_number: Optional[str] = Field(
        default=None,
        max_length=30,
        description="Contact phone number",
    )
    password: PasswordStr = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (min 8 chars)",
    )
    role: Optional[str] = Field(
        default=None,
        description="USER or ADMIN",
    )

    @field_validator("password", mode="after")
    @classmethod
    def validate_password_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Password cannot be empty or whitespace")
        return v

    @field_validator("role", mode="after")
    @classmethod
    def validate_role(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        role = v.strip().upper()
        if role not in UserRole.values():
            raise ValueError(f"Role must be one of {', '.join(UserRole.values())}")
        return role
