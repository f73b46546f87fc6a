"""
Application exceptions.

These are raised outside the service layer: by the auth dependencies,
the token helpers and the repositories. Services catch repository
errors and return ``ServiceResult`` failures; auth errors travel up to
the exception handlers in ``app.core.middleware``, which render them
with ``to_dict``.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Codes carried by exceptions that reach the HTTP layer"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    DATABASE_ERROR = "DATABASE_ERROR"


class BaseAppException(Exception):
    """
    Root of the application's exception tree.

    Subclasses set ``default_code``, ``default_status`` and
    ``default_message``; callers override only the message and details.
    """

    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    default_status: int = 500
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[ErrorCode] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.error_code = error_code or self.default_code
        self.status_code = status_code or self.default_status
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Body in the API response envelope shape"""
        return {
            "statusCode": self.status_code,
            "message": self.message,
            "errorCode": self.error_code.value,
            "details": self.details or None,
        }

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.error_code.value}: {self.message}"


# Authentication and authorization

class AuthenticationError(BaseAppException):
    """Missing, unusable or stale credentials (401)"""
    default_code = ErrorCode.AUTHENTICATION_FAILED
    default_status = 401
    default_message = "Authentication failed"


class AuthorizationError(BaseAppException):
    """Authenticated, but the account's role is not allowed (403)"""
    default_code = ErrorCode.AUTHORIZATION_FAILED
    default_status = 403
    default_message = "Access denied"

    def __init__(self, message: Optional[str] = None, required_roles: Optional[List[str]] = None):
        super().__init__(message, {"required_roles": required_roles} if required_roles else None)
        self.required_roles = required_roles or []


class TokenError(AuthenticationError):
    default_code = ErrorCode.TOKEN_INVALID
    default_message = "Invalid token"


class TokenExpiredError(TokenError):
    default_code = ErrorCode.TOKEN_EXPIRED
    default_message = "Token has expired"


class InvalidTokenError(TokenError):
    """Malformed token, bad signature, wrong token type or missing subject"""

    def __init__(self, message: Optional[str] = None, reason: Optional[str] = None):
        super().__init__(message, {"reason": reason} if reason else None)


# Persistence

class DatabaseError(BaseAppException):
    default_code = ErrorCode.DATABASE_ERROR
    default_message = "Database operation failed"


class RepositoryError(DatabaseError):
    """A repository call could not be completed; the session was rolled back"""
    default_message = "Repository operation failed"


class EntityAlreadyExistsError(RepositoryError):
    """Insert rejected by a uniqueness constraint"""
    default_message = "Entity already exists"
