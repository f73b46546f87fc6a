# app/api/v1/users.py
"""
User management endpoints.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_current_user, get_user_service, require_admin, require_user_or_admin
from app.models.user.user import User
from app.schemas.user import RoleUpdate
from app.services.user import UserService
from .responses import from_result

router = APIRouter(prefix="/users", tags=["User Management"])


@router.get("/all", dependencies=[Depends(require_admin)])
def get_all_users(service: UserService = Depends(get_user_service)) -> JSONResponse:
    return from_result(service.get_all_users(), "user_list")


@router.get("/get-by-id/{user_id}", dependencies=[Depends(require_user_or_admin)])
def get_user_by_id(user_id: int, service: UserService = Depends(get_user_service)) -> JSONResponse:
    return from_result(service.get_user_by_id(user_id), "user")


@router.delete("/delete/{user_id}", dependencies=[Depends(require_admin)])
def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> JSONResponse:
    return from_result(service.delete_user(user_id))


@router.get("/get-logged-in-profile-info")
def get_logged_in_profile(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return from_result(service.get_my_info(current_user.email), "user")


@router.get("/get-user-bookings/{user_id}", dependencies=[Depends(require_user_or_admin)])
def get_user_booking_history(user_id: int, service: UserService = Depends(get_user_service)) -> JSONResponse:
    return from_result(service.get_user_booking_history(user_id), "user")


@router.put("/update-role/{user_id}", dependencies=[Depends(require_admin)])
def update_role(
    user_id: int,
    request: RoleUpdate,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return from_result(service.update_role(user_id, request.role), "user")
