"""
User repositories package initialization.
"""

from app.repositories.user.user_repository import UserRepository

__all__ = ["UserRepository"]
