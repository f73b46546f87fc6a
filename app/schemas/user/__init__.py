"""
User schemas package.
"""

from app.schemas.user.user_base import RoleUpdate
from app.schemas.user.user_response import UserDetailResponse, UserResponse

__all__ = [
    "RoleUpdate",
    "UserResponse",
    "UserDetailResponse",
]
