"""Current-user profile endpoints."""

from fastapi import APIRouter, Depends

from cms.application.schemas import ApiResponse, ProfileUpdate, UserProfile
from cms.domain.entities import Role
from cms.domain.exceptions import PermissionDeniedError
from cms.infrastructure.dependencies import get_auth_backend, get_bearer_token, get_current_user
from cms.infrastructure.mock import MockAuthBackend

router = APIRouter(prefix="/user", tags=["User"])


@router.get(
    "/profile",
    response_model=ApiResponse[UserProfile],
    response_model_exclude_none=True,
)
async def get_profile(
    user: UserProfile = Depends(get_current_user),
) -> ApiResponse[UserProfile]:
    return ApiResponse.ok(user)


@router.put(
    "/profile",
    response_model=ApiResponse[UserProfile],
    response_model_exclude_none=True,
)
async def update_profile(
    data: ProfileUpdate,
    user: UserProfile = Depends(get_current_user),
    token: str | None = Depends(get_bearer_token),
    auth: MockAuthBackend = Depends(get_auth_backend),
) -> ApiResponse[UserProfile]:
    """Merge the supplied fields into the caller's profile.

    Only admins may change a role, so a user cannot promote themselves.
    """
    if data.role is not None and data.role != user.role and user.role != Role.ADMIN.value:
        raise PermissionDeniedError(Role.ADMIN.value)
    return ApiResponse.ok(await auth.update_profile(token, data))
