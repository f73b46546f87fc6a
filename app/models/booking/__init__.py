"""Booking models."""

from app.models.booking.booking import Booking

__all__ = ["Booking"]
