# --- File: app/schemas/user/user_base.py ---
"""
User update schemas.
"""

from __future__ import annotations

from pydantic import Field

from app.models.base.enums import UserRole
from app.schemas.common.base import BaseUpdateSchema

__all__ = [
    "RoleUpdate",
]


class RoleUpdate(BaseUpdateSchema):
    """Change the role of an account."""

    role: UserRole = Field(..., description="New role")
