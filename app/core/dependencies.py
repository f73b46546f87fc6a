"""
FastAPI Dependencies

This module contains dependency functions used by the routers for
database sessions, authentication and role-based authorization.
"""

from typing import List, Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.user.user import User
from app.repositories.user import UserRepository
from .exceptions import AuthenticationError, AuthorizationError
from .logging import get_logger
from .security import decode_token

logger = get_logger(__name__)

# Security scheme; missing credentials are reported by get_current_user
security = HTTPBearer(auto_error=False)


# Authentication dependencies
def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the account behind the bearer token.

    Raises:
        AuthenticationError: No token, an invalid or expired token, or a
            token whose account no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated")

    # TokenExpiredError / InvalidTokenError are AuthenticationErrors already
    payload = decode_token(credentials.credentials)

    user = UserRepository(db).find_by_email(payload["sub"])
    if user is None:
        logger.warning("Token subject no longer exists", extra={"user_id": payload.get("uid")})
        raise AuthenticationError("User no longer exists")
    return user


# Authorization dependency class
class RoleChecker:
    """Dependency allowing only accounts whose role is in ``allowed_roles``"""

    def __init__(self, allowed_roles: List[str]):
        self.allowed_roles = [role.upper() for role in allowed_roles]

    def __call__(self, current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in self.allowed_roles:
            logger.info(
                f"Access denied for role {current_user.role}",
                extra={"user_id": current_user.id, "required_roles": self.allowed_roles},
            )
            raise AuthorizationError(
                f"At least one of these roles required: {', '.join(self.allowed_roles)}",
                required_roles=self.allowed_roles,
            )
        return current_user


def require_roles(*roles: str) -> RoleChecker:
    """
    Create a dependency that requires one of the given roles

    Usage:
        @router.get("/all", dependencies=[Depends(require_roles("ADMIN"))])
    """
    return RoleChecker(list(roles))


require_admin = require_roles("ADMIN")
require_user_or_admin = require_roles("ADMIN", "USER")
