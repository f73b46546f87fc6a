"""
Base repositories package.

Provides the generic repository every aggregate repository builds on.
"""

from app.repositories.base.base_repository import BaseRepository

__all__ = ["BaseRepository"]
