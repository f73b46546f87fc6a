# --- File: app/schemas/common/base.py ---
"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "PasswordStr",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    Fields are snake_case in Python and camelCase on the wire; both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for create operations."""
    pass


class BaseUpdateSchema(BaseSchema):
    """
    Base schema for update operations.

    Note:
        Subclasses intended for partial updates declare their fields as
        Optional[...] with ``None`` defaults.
    """
    pass


class BaseResponseSchema(BaseSchema):
    """Base schema for API responses."""

    id: int = Field(..., description="Unique identifier")


# Passwords are compared byte for byte; leading and trailing spaces are kept
PasswordStr = Annotated[str, StringConstraints(strip_whitespace=False)]
