# app/api/v1/auth.py
"""
Authentication endpoints: registration and login.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.deps import get_auth_service, get_user_service
from app.schemas.auth import LoginRequest, RegisterRequest
from app.schemas.common.response import ApiResponse
from app.services.auth import AuthService
from app.services.user import UserService
from .responses import from_result, render

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", summary="Register a new account")
def register(
    request: RegisterRequest,
    service: UserService = Depends(get_user_service),
) -> JSONResponse:
    return from_result(service.register(request), "user")


@router.post("/login", summary="Log in and obtain an access token")
def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    result = service.login(request)
    if not result.is_success:
        return from_result(result)

    issued = result.data
    return render(
        ApiResponse.ok(
            message=result.message or "successful",
            token=issued.token,
            role=issued.role,
            expiration_time=issued.expiration_time,
        )
    )
