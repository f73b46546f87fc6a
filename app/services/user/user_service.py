"""
User account service: registration, profile lookups, roles and deletion.
"""

from typing import List

from sqlalchemy.orm import Session

from app.services.base import (
    BaseService,
    ServiceResult,
    ServiceError,
    ErrorCode,
    ErrorSeverity,
    track_performance,
)
from app.core.exceptions import EntityAlreadyExistsError
from app.core.security import hash_password
from app.repositories.user import UserRepository
from app.models.base.enums import UserRole
from app.models.user.user import User
from app.schemas.auth.register import RegisterRequest
from app.schemas.user.user_response import UserDetailResponse, UserResponse
from app.utils.string_utils import StringHelper


class UserService(BaseService[User, UserRepository]):
    """
    User directory.

    Registration stores a bcrypt hash; no response ever carries it.
    """

    def __init__(self, repository: UserRepository, db_session: Session):
        super().__init__(repository, db_session)

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    @track_performance("register_user")
    def register(self, request: RegisterRequest) -> ServiceResult[UserResponse]:
        """
        Create a new account.

        Args:
            request: Registration data; a missing role means USER

        Returns:
            ServiceResult with the created user, or ALREADY_EXISTS when the
            email is taken
        """
        try:
            if self.repository.exists_by_email(request.email):
                return self._email_taken(request.email)

            user = User(
                email=request.email,
                name=request.name,
                phone_number=request.phone_number,
                password_hash=hash_password(request.password),
                role=request.role or UserRole.USER.value,
            )
            user = self.repository.create(user)

            self._logger.info(
                f"Registered user {user.id}",
                extra={"user_id": user.id, "email": StringHelper.mask_email(user.email)},
            )
            return ServiceResult.success(UserResponse.model_validate(user), message="successful")

        except EntityAlreadyExistsError:
            # Lost a race with a concurrent registration of the same email
            return self._email_taken(request.email)
        except Exception as e:
            return self._handle_exception(e, "register user")

    def _email_taken(self, email: str) -> ServiceResult[UserResponse]:
        return ServiceResult.failure(
            ServiceError(
                code=ErrorCode.ALREADY_EXISTS,
                message=f"{email} Already Exists",
                field="email",
                severity=ErrorSeverity.WARNING,
            )
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_all_users(self) -> ServiceResult[List[UserResponse]]:
        try:
            users = self.repository.list_all()
            return ServiceResult.success([UserResponse.model_validate(u) for u in users], message="successful")
        except Exception as e:
            return self._handle_exception(e, "list users")

    def get_user_by_id(self, user_id: int) -> ServiceResult[UserResponse]:
        try:
            user = self.repository.find_by_id(user_id)
            if not user:
                return ServiceResult.not_found("User", user_id, code=ErrorCode.USER_NOT_FOUND)
            return ServiceResult.success(UserResponse.model_validate(user), message="successful")
        except Exception as e:
            return self._handle_exception(e, "get user", user_id)

    def get_my_info(self, email: str) -> ServiceResult[UserResponse]:
        """Profile of the account identified by ``email``."""
        try:
            user = self.repository.find_by_email(email)
            if not user:
                return ServiceResult.not_found("User", email, code=ErrorCode.USER_NOT_FOUND)
            return ServiceResult.success(UserResponse.model_validate(user), message="successful")
        except Exception as e:
            return self._handle_exception(e, "get profile", email)

    @track_performance("get_user_booking_history")
    def get_user_booking_history(self, user_id: int) -> ServiceResult[UserDetailResponse]:
        """User with every booking they hold, each with its room."""
        try:
            user = self.repository.find_with_bookings(user_id)
            if not user:
                return ServiceResult.not_found("User", user_id, code=ErrorCode.USER_NOT_FOUND)
            return ServiceResult.success(UserDetailResponse.model_validate(user), message="successful")
        except Exception as e:
            return self._handle_exception(e, "get booking history", user_id)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def update_role(self, user_id: int, role: UserRole) -> ServiceResult[UserResponse]:
        try:
            user = self.repository.find_by_id(user_id)
            if not user:
                return ServiceResult.not_found("User", user_id, code=ErrorCode.USER_NOT_FOUND)

            user = self.repository.update(user, {"role": UserRole(role).value})
            self._log_operation("update role", user_id, {"role": user.role})
            return ServiceResult.success(UserResponse.model_validate(user), message="successful")
        except Exception as e:
            return self._handle_exception(e, "update role", user_id)

    @track_performance("delete_user")
    def delete_user(self, user_id: int) -> ServiceResult[bool]:
        """Delete an account and, with it, all of its bookings."""
        try:
            if not self.repository.delete_by_id(user_id):
                return ServiceResult.not_found("User", user_id, code=ErrorCode.USER_NOT_FOUND)
            self._log_operation("delete user", user_id)
            return ServiceResult.success(True, message="successful")
        except Exception as e:
            return self._handle_exception(e, "delete user", user_id)
