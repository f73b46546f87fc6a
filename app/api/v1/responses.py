# app/api/v1/responses.py
"""
Translate service results into HTTP responses.

Successful results become ``ApiResponse`` envelopes with the payload
under the requested field; failures carry the mapped HTTP status and
the service error code.
"""

from typing import Any, Optional

from fastapi.responses import JSONResponse

from app.schemas.common.response import ApiResponse
from app.services.base import ServiceResult


def render(response: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.to_content())


def from_result(
    result: ServiceResult,
    payload_field: Optional[str] = None,
    status_code: int = 200,
    **extra: Any,
) -> JSONResponse:
    """
    Build the HTTP response for ``result``.

    Args:
        result: Outcome of a service call
        payload_field: Envelope field receiving ``result.data`` on success
        status_code: Status used on success
        extra: Additional envelope fields set on success

    Returns:
        JSONResponse whose status equals the envelope's ``statusCode``
    """
    if not result.is_success:
        error = result.error
        status = result.status_code
        # Server-side failure details stay in the logs
        details = error.details if error and status < 500 else None
        return render(
            ApiResponse.error(
                status_code=status,
                message=result.message or "Request failed",
                error_code=result.error_code.value if result.error_code else None,
                details=details,
            )
        )

    payload = dict(extra)
    if payload_field:
        payload[payload_field] = result.data
    return render(ApiResponse.ok(message=result.message or "successful", status_code=status_code, **payload))
