# app/api/__init__.py
"""
HTTP API package. Versioned routers live in subpackages (``app.api.v1``).
"""
