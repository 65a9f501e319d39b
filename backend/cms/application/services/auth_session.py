"""Session/auth state: the current user, a loading flag and change listeners.

An explicit context object handed to whatever renders the UI:

    async with AuthSession(client) as session:
        session.subscribe(on_change)
        await session.login(LoginRequest(username="admin", password="..."))
"""

import logging
from collections.abc import Callable

from cms.application.schemas import (
    AuthActionResult,
    AuthUser,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
)
from cms.application.services.api_client import ApiClient
from cms.domain.exceptions import CmsError

logger = logging.getLogger(__name__)

Listener = Callable[["AuthSession"], None]


class AuthSession:
    """Holds who is logged in. State changes only when an action succeeds."""

    def __init__(self, client: ApiClient):
        self._client = client
        self._user: AuthUser | None = None
        self._is_loading = True
        self._listeners: list[Listener] = []

    @property
    def user(self) -> AuthUser | None:
        return self._user

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.is_admin

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _set_state(self, *, user: AuthUser | None = None, is_loading: bool | None = None) -> None:
        self._user = user
        if is_loading is not None:
            self._is_loading = is_loading
        self._notify()

    # ── Lifecycle ───────────────────────────────────────────────────

    async def initialize(self) -> None:
        """Restore a stored token and resolve it to a user.

        A token that no longer resolves is cleared, leaving the session
        unauthenticated.
        """
        user: AuthUser | None = None
        if await self._client.restore_token():
            response = await self._client.get_user_profile()
            if response.success:
                user = response.data
            else:
                logger.warning("Stored token rejected: %s", response.message)
                await self._client.clear_token()
        self._set_state(user=user, is_loading=False)

    async def close(self) -> None:
        self._listeners.clear()

    async def __aenter__(self) -> "AuthSession":
        await self.initialize()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ── Actions ─────────────────────────────────────────────────────

    async def login(self, credentials: LoginRequest) -> AuthActionResult:
        self._set_state(user=self._user, is_loading=True)
        try:
            response = await self._client.login(credentials)
        except CmsError as exc:
            self._set_state(user=self._user, is_loading=False)
            return AuthActionResult(success=False, message=exc.message or "Login failed")
        if not response.success:
            self._set_state(user=self._user, is_loading=False)
            return AuthActionResult(success=False, message=response.message or "Login failed")
        self._set_state(user=response.data.user, is_loading=False)
        return AuthActionResult(success=True)

    async def register(self, data: RegisterRequest) -> AuthActionResult:
        self._set_state(user=self._user, is_loading=True)
        try:
            response = await self._client.register(data)
        except CmsError as exc:
            self._set_state(user=self._user, is_loading=False)
            return AuthActionResult(success=False, message=exc.message or "Registration failed")
        if not response.success:
            self._set_state(user=self._user, is_loading=False)
            return AuthActionResult(success=False, message=response.message or "Registration failed")
        self._set_state(user=response.data.user, is_loading=False)
        return AuthActionResult(success=True)

    async def logout(self) -> None:
        await self._client.logout()
        self._set_state(user=None)

    async def update_profile(self, data: ProfileUpdate) -> AuthActionResult:
        try:
            response = await self._client.update_user_profile(data)
        except CmsError as exc:
            return AuthActionResult(success=False, message=exc.message or "Profile update failed")
        if not response.success:
            return AuthActionResult(success=False, message=response.message or "Profile update failed")
        self._set_state(user=response.data)
        return AuthActionResult(success=True)
