"""Login, registration and logout endpoints."""

from fastapi import APIRouter, Depends, status

from cms.application.schemas import ApiResponse, AuthResult, LoginRequest, RegisterRequest
from cms.infrastructure.dependencies import get_auth_backend, get_bearer_token
from cms.infrastructure.mock import MockAuthBackend

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=ApiResponse[AuthResult],
    response_model_exclude_none=True,
)
async def login(
    credentials: LoginRequest,
    auth: MockAuthBackend = Depends(get_auth_backend),
) -> ApiResponse[AuthResult]:
    """Exchange username and password for a bearer token."""
    return ApiResponse.ok(await auth.login(credentials))


@router.post(
    "/register",
    response_model=ApiResponse[AuthResult],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    data: RegisterRequest,
    auth: MockAuthBackend = Depends(get_auth_backend),
) -> ApiResponse[AuthResult]:
    """Create an account; the response logs it in."""
    return ApiResponse.ok(await auth.register(data))


@router.post(
    "/logout",
    response_model=ApiResponse[None],
    response_model_exclude_none=True,
)
async def logout(
    token: str | None = Depends(get_bearer_token),
    auth: MockAuthBackend = Depends(get_auth_backend),
) -> ApiResponse[None]:
    await auth.logout(token)
    return ApiResponse.ok(None, message="Logged out")
