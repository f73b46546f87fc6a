"""
Security utilities for authentication.

Provides password hashing with bcrypt and JWT token management
with validation and error handling.
"""
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.config.settings import settings
from app.core.exceptions import InvalidTokenError, TokenExpiredError


# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

_pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_BCRYPT_ROUNDS,
)


@dataclass(frozen=True)
class JWTSettings:
    """JWT configuration settings."""
    secret_key: str
    algorithm: str = "HS256"
    access_token_expires_days: int = 7

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ValueError("JWT secret_key cannot be empty")
        if self.access_token_expires_days <= 0:
            raise ValueError("access_token_expires_days must be positive")

    @classmethod
    def from_settings(cls) -> "JWTSettings":
        return cls(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            access_token_expires_days=settings.ACCESS_TOKEN_EXPIRE_DAYS,
        )


# ------------------------------------------------------------------ #
# Password hashing
# ------------------------------------------------------------------ #

def _prepare_password_for_bcrypt(password: str) -> str:
    """
    Prepare a password for bcrypt by handling the 72-byte limit.

    Longer passwords are replaced by their SHA-256 hex digest, which
    fits well under the limit.
    """
    if len(password.encode('utf-8')) > 71:
        return hashlib.sha256(password.encode('utf-8')).hexdigest()
    return password


def hash_password(password: str) -> str:
    """
    Hash a plaintext password using bcrypt.

    Raises:
        ValueError: If password is empty
    """
    if not password:
        raise ValueError("Password cannot be empty")
    return _pwd_context.hash(_prepare_password_for_bcrypt(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a stored hash."""
    if not plain_password or not hashed_password:
        return False

    try:
        return _pwd_context.verify(_prepare_password_for_bcrypt(plain_password), hashed_password)
    except (ValueError, TypeError):
        # Malformed or foreign hash
        return False


# ------------------------------------------------------------------ #
# JWT utilities
# ------------------------------------------------------------------ #

def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def create_access_token(
    *,
    subject: str,
    user_id: int,
    role: str,
    jwt_settings: Optional[JWTSettings] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        subject: User email
        user_id: User primary key
        role: User role
        jwt_settings: JWT configuration (defaults to application settings)
        expires_delta: Custom expiry (overrides default)

    Returns:
        Encoded JWT token string
    """
    jwt_settings = jwt_settings or JWTSettings.from_settings()
    now = _utcnow()

    if expires_delta is None:
        expires_delta = timedelta(days=jwt_settings.access_token_expires_days)

    payload: dict[str, Any] = {
        "sub": subject,
        "uid": user_id,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        "type": "access",
    }

    return jwt.encode(payload, jwt_settings.secret_key, algorithm=jwt_settings.algorithm)


def decode_token(token: str, jwt_settings: Optional[JWTSettings] = None) -> dict[str, Any]:
    """
    Decode and validate a JWT access token.

    Raises:
        TokenExpiredError: If token has expired
        InvalidTokenError: If token is malformed, badly signed or not an access token
    """
    jwt_settings = jwt_settings or JWTSettings.from_settings()

    try:
        payload = jwt.decode(token, jwt_settings.secret_key, algorithms=[jwt_settings.algorithm])
    except ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except JWTError as exc:
        raise InvalidTokenError("Invalid or malformed token", reason=str(exc)) from exc

    if payload.get("type") != "access":
        raise InvalidTokenError("Invalid token type", reason=f"got {payload.get('type')}")
    if not payload.get("sub"):
        raise InvalidTokenError("Token missing subject")

    return payload


def describe_expiration(jwt_settings: Optional[JWTSettings] = None) -> str:
    """Human readable token lifetime returned to clients at login."""
    jwt_settings = jwt_settings or JWTSettings.from_settings()
    days = jwt_settings.access_token_expires_days
    return f"{days} Day" if days == 1 else f"{days} Days"
