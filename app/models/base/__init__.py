"""
Base models package.

Provides the abstract base classes and enums for all database models.
"""

from app.models.base.base_model import BaseModel, TimestampModel
from app.models.base.enums import UserRole

__all__ = [
    "BaseModel",
    "TimestampModel",
    "UserRole",
]
