# --- File: app/schemas/common/response.py ---
"""
Standard API response envelope.

Every endpoint answers with an ``ApiResponse``: the HTTP status is
repeated in ``statusCode`` and only the payload fields relevant to the
call are populated.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from app.schemas.booking.booking_response import BookingResponse
from app.schemas.common.base import BaseSchema
from app.schemas.room.room_response import RoomDetailResponse, RoomResponse
from app.schemas.user.user_response import UserDetailResponse, UserResponse

__all__ = [
    "ApiResponse",
]


class ApiResponse(BaseSchema):
    """Response envelope shared by all endpoints."""

    status_code: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Response message")
    error_code: Optional[str] = Field(default=None, description="Machine readable failure code")
    details: Optional[Dict[str, Any]] = None

    # Authentication
    token: Optional[str] = None
    role: Optional[str] = None
    expiration_time: Optional[str] = None
    booking_confirmation_code: Optional[str] = None

    # Payloads
    user: Optional[Union[UserDetailResponse, UserResponse]] = None
    room: Optional[Union[RoomDetailResponse, RoomResponse]] = None
    booking: Optional[BookingResponse] = None
    user_list: Optional[List[UserResponse]] = None
    room_list: Optional[List[RoomResponse]] = None
    room_types: Optional[List[str]] = None
    booking_list: Optional[List[BookingResponse]] = None

    def to_content(self) -> Dict[str, Any]:
        """JSON-ready body with camelCase keys and unset payloads omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def ok(cls, message: str = "successful", status_code: int = 200, **payload: Any) -> "ApiResponse":
        return cls(status_code=status_code, message=message, **payload)

    @classmethod
    def error(
        cls,
        status_code: int,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ApiResponse":
        return cls(status_code=status_code, message=message, error_code=error_code, details=details)
