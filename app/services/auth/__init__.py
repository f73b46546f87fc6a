"""
Authentication service layer.
"""

from app.services.auth.auth_service import AuthService

__all__ = ["AuthService"]
