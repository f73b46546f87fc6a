# app/api/v1/bookings.py
"""
Booking endpoints: book a room, look up by confirmation code, list, cancel.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_booking_service, require_admin, require_user_or_admin
from app.schemas.booking import BookingRequest
from app.services.booking import BookingService
from .responses import from_result

router = APIRouter(prefix="/bookings", tags=["Booking Management"])


@router.post("/book-room/{room_id}/{user_id}", dependencies=[Depends(require_user_or_admin)])
def book_room(
    room_id: int,
    user_id: int,
    request: BookingRequest,
    service: BookingService = Depends(get_booking_service),
) -> JSONResponse:
    """Book ``room_id`` for ``user_id``; answers with the confirmation code."""
    return from_result(service.create_booking(room_id, user_id, request), "booking_confirmation_code")


@router.get("/get-by-confirmation-code/{confirmation_code}")
def get_booking_by_confirmation_code(
    confirmation_code: str,
    service: BookingService = Depends(get_booking_service),
) -> JSONResponse:
    return from_result(service.find_by_confirmation_code(confirmation_code), "booking")


@router.get("/all", dependencies=[Depends(require_admin)])
def get_all_bookings(service: BookingService = Depends(get_booking_service)) -> JSONResponse:
    return from_result(service.list_all(), "booking_list")


@router.delete("/cancel/{booking_id}", dependencies=[Depends(require_user_or_admin)])
def cancel_booking(booking_id: int, service: BookingService = Depends(get_booking_service)) -> JSONResponse:
    return from_result(service.cancel(booking_id))
