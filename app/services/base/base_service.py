"""
Shared plumbing for the room, user, booking and auth services.
"""

import time
from abc import ABC
from functools import wraps
from typing import Any, Dict, Generic, Optional, Tuple, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import DatabaseError
from app.core.logging import get_logger
from app.repositories.base.base_repository import BaseRepository
from app.services.base.service_result import ErrorCode, ErrorSeverity, ServiceResult


TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)

# First matching entry wins
_EXCEPTION_CODES: Tuple[Tuple[Type[Exception], ErrorCode], ...] = (
    (SQLAlchemyError, ErrorCode.STORAGE_FAILURE),
    (DatabaseError, ErrorCode.STORAGE_FAILURE),
    (ValueError, ErrorCode.VALIDATION_ERROR),
)


def track_performance(operation_name: str):
    """Log how long the wrapped service call took and whether it succeeded."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - started
            get_logger(func.__module__).info(
                f"{operation_name} took {elapsed * 1000:.1f}ms",
                extra={
                    "operation": operation_name,
                    "duration_ms": round(elapsed * 1000, 3),
                    "success": bool(getattr(result, "is_success", True)),
                },
            )
            return result
        return wrapper
    return decorator


class BaseService(ABC, Generic[TModel, TRepo]):
    """
    Base for services that own one primary repository.

    Subclasses wrap each public method in ``try``/``except Exception`` and
    hand the exception to ``_handle_exception``, so callers always get a
    ``ServiceResult``.
    """

    def __init__(self, repository: TRepo, db_session: Session):
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(self.__class__.__name__)

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
    ) -> ServiceResult:
        """
        Roll back, log, and turn ``exception`` into a failed result.

        Storage problems surface as STORAGE_FAILURE without the driver's
        message; the full error goes to the log only.
        """
        self._rollback()

        code = self._error_code_for(exception)
        ref = str(entity_ref) if entity_ref is not None else None
        self._logger.error(
            f"{operation} failed: {exception}",
            exc_info=True,
            extra={"operation": operation, "entity_ref": ref, "exception_type": type(exception).__name__},
        )

        if code == ErrorCode.STORAGE_FAILURE:
            message = f"Failed to {operation}: storage unavailable"
        else:
            message = f"Failed to {operation}: {exception}"

        return ServiceResult.fail(
            code,
            message,
            details={"error": str(exception), "entity_ref": ref},
            severity=ErrorSeverity.CRITICAL if code == ErrorCode.STORAGE_FAILURE else ErrorSeverity.ERROR,
        )

    @staticmethod
    def _error_code_for(exception: Exception) -> ErrorCode:
        for exc_type, code in _EXCEPTION_CODES:
            if isinstance(exception, exc_type):
                return code
        return ErrorCode.INTERNAL_ERROR

    def _rollback(self) -> None:
        try:
            self.db.rollback()
        except SQLAlchemyError as e:
            # Keep the original error as the one reported
            self._logger.warning(f"Rollback failed: {e}")

    def _log_operation(
        self,
        operation: str,
        entity_ref: Optional[Any] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        context = {"entity_ref": str(entity_ref) if entity_ref is not None else None}
        context.update(extra or {})
        self._logger.info(f"{operation} completed", extra=context)
