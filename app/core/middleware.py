# app/core/middleware.py
"""
Core middleware and exception handler registration for the FastAPI application.

Request IDs are stored both on ``request.state`` and in the logging
context variable so every log line emitted while serving a request
carries the same id.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core.exceptions import BaseAppException, ErrorCode
from app.core.logging import get_logger, request_id as request_id_ctx

logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Attach a request ID to each incoming request.

    An upstream ``X-Request-ID`` header is reused when present. The id is
    echoed back in the response headers.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_ctx.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_ctx.reset(token)

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Measure request processing time.

    Adds an X-Process-Time header (seconds) and logs request completion.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "request_id": getattr(request.state, "request_id", "-"),
                "method": request.method,
                "url": str(request.url.path),
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
                "client_host": request.client.host if request.client else None,
            }
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add common security headers to all responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        return response


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """Log error responses and unhandled exceptions."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request processing failed: {exc}",
                extra={
                    "request_id": getattr(request.state, "request_id", "-"),
                    "method": request.method,
                    "url": str(request.url.path),
                    "error_type": type(exc).__name__,
                },
                exc_info=True
            )
            raise

        if response.status_code >= 500:
            logger.error(
                f"Request returned error status {response.status_code}",
                extra={"method": request.method, "url": str(request.url.path)},
            )
        elif response.status_code >= 400:
            logger.warning(
                f"Request returned error status {response.status_code}",
                extra={"method": request.method, "url": str(request.url.path)},
            )
        return response


def register_middlewares(app: FastAPI, include_security: bool = True) -> None:
    """
    Register the core middlewares.

    Starlette runs the last added middleware first, so they are added
    from innermost to outermost:
        1. ErrorLoggingMiddleware
        2. TimingMiddleware
        3. SecurityHeadersMiddleware
        4. RequestIDMiddleware (outermost, so the id is set for all the others)
    """
    app.add_middleware(ErrorLoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    if include_security:
        app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    logger.debug(
        "Core middlewares registered",
        extra={"security_headers": include_security},
    )


# ------------------------------------------------------------------ #
# Exception handlers
# ------------------------------------------------------------------ #

async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    """Render application exceptions in the standard response envelope."""
    return JSONResponse(status_code=exc.status_code, content=_drop_none(exc.to_dict()))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()) if part != 'body')}: {err.get('msg')}"
        for err in errors
    )
    body = {
        "statusCode": 422,
        "message": message or "Validation failed",
        "errorCode": ErrorCode.VALIDATION_ERROR.value,
        "details": {"errors": [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
            for err in errors
        ]},
    }
    return JSONResponse(status_code=422, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    body = {
        "statusCode": 500,
        "message": "Internal server error",
        "errorCode": ErrorCode.INTERNAL_ERROR.value,
    }
    return JSONResponse(status_code=500, content=body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def _drop_none(content: dict) -> dict:
    return {key: value for key, value in content.items() if value is not None}


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "SecurityHeadersMiddleware",
    "ErrorLoggingMiddleware",
    "register_middlewares",
    "register_exception_handlers",
]
