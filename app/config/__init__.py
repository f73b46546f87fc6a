"""
Configuration package for the hotel management back end.

Contains environment settings and logging configuration.
"""

from app.config.settings import get_settings, settings

__all__ = ['settings', 'get_settings']
