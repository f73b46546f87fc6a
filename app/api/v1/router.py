"""
API v1 Router - Main Entry Point
Aggregates all v1 API endpoints for the hotel management back end
"""
from fastapi import APIRouter

from app.core.logging import get_logger
from . import auth, bookings, rooms, users

logger = get_logger(__name__)

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"}
    }
)

router.include_router(auth.router)
router.include_router(users.router)
router.include_router(rooms.router)
router.include_router(bookings.router)

logger.debug(f"API v1 router assembled with {len(router.routes)} routes")
