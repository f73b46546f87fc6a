"""
Enumerations shared by the ORM models and schemas.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account roles recognised by the authorization dependencies."""

    USER = "USER"
    ADMIN = "ADMIN"

    @classmethod
    def values(cls) -> list:
        return [role.value for role in cls]
