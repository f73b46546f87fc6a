# app/utils/date_utils.py
"""
Date range helpers for stays.

A stay occupies the half-open range ``[check_in, check_out)``: the
departure day is free for the next guest to arrive on.
"""

from datetime import date, datetime, timezone
from typing import Iterable, Protocol


class HasStayDates(Protocol):
    check_in_date: date
    check_out_date: date


def today_utc() -> date:
    """Return today's calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def is_valid_stay(check_in: date, check_out: date) -> bool:
    """A stay must last at least one night."""
    return check_out > check_in


def ranges_overlap(
    check_in: date,
    check_out: date,
    other_check_in: date,
    other_check_out: date,
) -> bool:
    """
    Half-open interval intersection test.

    Ranges that only touch (one's check-out equals the other's check-in)
    do not overlap.
    """
    return check_in < other_check_out and check_out > other_check_in


def room_is_available(
    check_in: date,
    check_out: date,
    existing_bookings: Iterable[HasStayDates],
) -> bool:
    """
    True when no existing booking overlaps the requested stay.

    Args:
        check_in: Requested arrival date
        check_out: Requested departure date (exclusive)
        existing_bookings: Bookings already held against the room

    Returns:
        Whether the stay can be accepted
    """
    return not any(
        ranges_overlap(check_in, check_out, booking.check_in_date, booking.check_out_date)
        for booking in existing_bookings
    )
