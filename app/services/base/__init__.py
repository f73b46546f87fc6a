"""
Service-layer building blocks: the ``BaseService`` class, the
``track_performance`` timing decorator and the ``ServiceResult`` types
every service returns.
"""

from app.services.base.service_result import (
    ERROR_STATUS_CODES,
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)
from app.services.base.base_service import BaseService, track_performance

__all__ = [
    "BaseService",
    "track_performance",
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    "ErrorSeverity",
    "ERROR_STATUS_CODES",
]
