"""
User service layer.
"""

from app.services.user.user_service import UserService

__all__ = ["UserService"]
