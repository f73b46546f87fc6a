# app/api/v1/__init__.py
"""
API v1 package.

This module re-exports the main FastAPI router that aggregates the v1
sub-routers (auth, users, rooms, bookings).

    from app.api.v1 import api_router
    app.include_router(api_router, prefix=settings.API_V1_STR)
"""

from .router import router as api_router

__all__ = [
    "api_router",
]
