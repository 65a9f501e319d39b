"""Port for authentication and profile operations."""

from abc import ABC, abstractmethod

from cms.application.schemas import (
    AuthResult,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    UserProfile,
)


class AuthBackend(ABC):
    """Implemented by the mock backend and the HTTP backend."""

    @abstractmethod
    async def login(self, credentials: LoginRequest) -> AuthResult:
        """Exchange credentials for a token. Raises InvalidCredentialsError."""
        ...

    @abstractmethod
    async def register(self, data: RegisterRequest) -> AuthResult:
        """Create an account and log it in. Raises UsernameTakenError."""
        ...

    @abstractmethod
    async def logout(self, token: str | None) -> None:
        """End the session bound to ``token``."""
        ...

    @abstractmethod
    async def get_profile(self, token: str | None) -> UserProfile:
        """Return the profile of the token's owner."""
        ...

    @abstractmethod
    async def update_profile(self, token: str | None, data: ProfileUpdate) -> UserProfile:
        """Merge ``data`` into the token owner's profile."""
        ...
