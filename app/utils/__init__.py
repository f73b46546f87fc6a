"""
Utility package initialization and exports
"""

# Date range helpers
from .date_utils import (
    is_valid_stay,
    ranges_overlap,
    room_is_available,
    today_utc,
)

# String utilities
from .string_utils import (
    CONFIRMATION_CODE_ALPHABET,
    CodeGenerator,
    StringHelper,
    generate_confirmation_code,
)

__all__ = [
    "is_valid_stay",
    "ranges_overlap",
    "room_is_available",
    "today_utc",
    "CONFIRMATION_CODE_ALPHABET",
    "CodeGenerator",
    "StringHelper",
    "generate_confirmation_code",
]
