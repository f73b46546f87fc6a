"""
Outcome type returned by every service call.

Services do not raise past their boundary. A call either succeeds with
``data`` or fails with a ``ServiceError``; the error's code decides the
HTTP status the API layer answers with.
"""

from dataclasses import dataclass, field as dc_field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar


class ErrorCode(str, Enum):
    """Failure kinds a service can report."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"

    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"

    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    ROOM_UNAVAILABLE = "ROOM_UNAVAILABLE"

    STORAGE_FAILURE = "STORAGE_FAILURE"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"


ERROR_STATUS_CODES: Dict[ErrorCode, int] = {
    ErrorCode.INTERNAL_ERROR: 500,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.ALREADY_EXISTS: 400,
    ErrorCode.ROOM_NOT_FOUND: 404,
    ErrorCode.USER_NOT_FOUND: 404,
    ErrorCode.BOOKING_NOT_FOUND: 404,
    ErrorCode.INVALID_DATE_RANGE: 400,
    ErrorCode.ROOM_UNAVAILABLE: 409,
    ErrorCode.STORAGE_FAILURE: 500,
    ErrorCode.AUTHENTICATION_FAILED: 401,
}


class ErrorSeverity(str, Enum):
    """How loudly a failure is logged. Client mistakes are WARNING."""

    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class ServiceError:
    code: ErrorCode
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None
    occurred_at: datetime = dc_field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES.get(self.code, 500)


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Success or failure of a service operation.

    Attributes:
        is_success: Whether the operation succeeded
        data: Payload of a successful call
        error: Failure description, set only when ``is_success`` is False
        message: Client-facing message ("successful" on success)
        metadata: Extra context for callers and logs (ids, counts)
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None
    metadata: Dict[str, Any] = dc_field(default_factory=dict)

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        return cls(is_success=True, data=data, message=message, metadata=metadata or {})

    @classmethod
    def failure(cls, error: ServiceError, metadata: Optional[Dict[str, Any]] = None) -> "ServiceResult[TData]":
        return cls(is_success=False, error=error, message=error.message, metadata=metadata or {})

    @classmethod
    def fail(
        cls,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ) -> "ServiceResult[TData]":
        """Shorthand for ``failure(ServiceError(...))``."""
        return cls.failure(ServiceError(code=code, message=message, field=field, details=details, severity=severity))

    @classmethod
    def not_found(
        cls,
        resource_type: str,
        resource_id: Optional[Any] = None,
        code: ErrorCode = ErrorCode.NOT_FOUND,
    ) -> "ServiceResult[TData]":
        """
        Failure for a missing entity, e.g. "Room Not Found (ID: 4)".

        Args:
            resource_type: Entity name used in the message
            resource_id: Identifier that was looked up, if any
            code: Entity-specific code such as ROOM_NOT_FOUND
        """
        message = f"{resource_type} Not Found"
        if resource_id is not None:
            message = f"{message} (ID: {resource_id})"
        return cls.fail(
            code,
            message,
            details={"resource_type": resource_type, "resource_id": resource_id},
            severity=ErrorSeverity.WARNING,
        )

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return self.error.code if self.error else None

    @property
    def status_code(self) -> int:
        if self.is_success:
            return 200
        return self.error.status_code if self.error else 500

    def __bool__(self) -> bool:
        return self.is_success


__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "ERROR_STATUS_CODES",
    "ServiceError",
    "ServiceResult",
]
