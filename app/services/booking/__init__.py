"""
Booking service layer.

Provides the booking ledger: availability enforcement, confirmation
codes, lookup, listing and cancellation.
"""

from app.services.booking.booking_service import BookingService

__all__ = ["BookingService"]
