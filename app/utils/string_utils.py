"""
String generation utilities
"""

import secrets
import string
from typing import Optional

from app.config.settings import settings

# 62 symbols: digits plus upper- and lower-case ASCII letters
CONFIRMATION_CODE_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase


class CodeGenerator:
    """Random identifier generation"""

    @staticmethod
    def random_string(length: int, charset: str = CONFIRMATION_CODE_ALPHABET) -> str:
        """Draw ``length`` characters uniformly from ``charset``"""
        if length <= 0:
            raise ValueError("length must be positive")
        if not charset:
            raise ValueError("charset cannot be empty")
        return ''.join(secrets.choice(charset) for _ in range(length))

    @staticmethod
    def confirmation_code(length: Optional[int] = None) -> str:
        """
        Generate a booking confirmation code.

        Codes are not checked against existing bookings; with 62**10
        possible values collisions are not expected at hotel scale.
        """
        if length is None:
            length = settings.CONFIRMATION_CODE_LENGTH
        return CodeGenerator.random_string(length)


class StringHelper:
    """General string manipulation utilities"""

    @staticmethod
    def mask_email(email: str) -> str:
        """Hide most of the local part of an email for log output"""
        if not email or '@' not in email:
            return email or ""
        local, domain = email.split('@', 1)
        visible = local[:2] if len(local) > 2 else local[:1]
        return f"{visible}{'*' * max(len(local) - len(visible), 1)}@{domain}"


def generate_confirmation_code(length: Optional[int] = None) -> str:
    """Module-level shortcut for :meth:`CodeGenerator.confirmation_code`."""
    return CodeGenerator.confirmation_code(length)
