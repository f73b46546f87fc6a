"""
Authentication schemas package.
"""

from app.schemas.auth.login import LoginRequest, LoginResult
from app.schemas.auth.register import RegisterRequest

__all__ = [
    "LoginRequest",
    "LoginResult",
    "RegisterRequest",
]
