"""
Authentication service: email/password login and token issuance.
"""

from sqlalchemy.orm import Session

from app.services.base import (
    BaseService,
    ServiceResult,
    ServiceError,
    ErrorCode,
    ErrorSeverity,
    track_performance,
)
from app.core.security import create_access_token, describe_expiration, verify_password
from app.repositories.user import UserRepository
from app.models.user.user import User
from app.schemas.auth.login import LoginRequest, LoginResult
from app.utils.string_utils import StringHelper


class AuthService(BaseService[User, UserRepository]):
    """
    Service for authenticating users and issuing access tokens.
    """

    def __init__(self, user_repository: UserRepository, db_session: Session):
        super().__init__(user_repository, db_session)
        self.user_repository = user_repository

    @track_performance("login")
    def login(self, request: LoginRequest) -> ServiceResult[LoginResult]:
        """
        Authenticate user via email and password.

        Args:
            request: Login credentials

        Returns:
            ServiceResult with token, role and token lifetime, or
            USER_NOT_FOUND / AUTHENTICATION_FAILED
        """
        try:
            user = self.user_repository.find_by_email(request.email)
            if not user:
                self._logger.warning(
                    "Login attempt for unknown email",
                    extra={"email": StringHelper.mask_email(request.email)},
                )
                return ServiceResult.not_found("User", request.email, code=ErrorCode.USER_NOT_FOUND)

            if not verify_password(request.password, user.password_hash):
                self._logger.warning(
                    "Login failed: bad credentials",
                    extra={"user_id": user.id},
                )
                return ServiceResult.failure(
                    ServiceError(
                        code=ErrorCode.AUTHENTICATION_FAILED,
                        message="Bad credentials",
                        severity=ErrorSeverity.WARNING,
                    )
                )

            token = create_access_token(subject=user.email, user_id=user.id, role=user.role)
            self._logger.info(f"User {user.id} logged in", extra={"user_id": user.id})

            return ServiceResult.success(
                LoginResult(token=token, role=user.role, expiration_time=describe_expiration()),
                message="successful",
            )
        except Exception as e:
            return self._handle_exception(e, "login")
