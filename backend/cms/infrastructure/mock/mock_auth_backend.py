"""Mock authentication backend over the key/value store.

Tokens encode the user id directly (``mock-token-<id>``); a token is valid
for as long as a user with that id exists.
"""

import logging

from cms.application.interfaces import AuthBackend, KeyValueStore
from cms.application.schemas import (
    AuthResult,
    AuthUser,
    LoginRequest,
    ProfileUpdate,
    RegisterRequest,
    UserProfile,
)
from cms.domain.entities import Role, User
from cms.domain.exceptions import (
    EntityNotFoundError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    UsernameTakenError,
)
from cms.infrastructure.mock.records import from_iso, to_iso
from cms.infrastructure.mock.seed_data import seed_users
from cms.infrastructure.storage.collection import Record, SeededCollection

logger = logging.getLogger(__name__)

USERS_KEY = "mock_users"
TOKEN_PREFIX = "mock-token-"


def build_token(user_id: int) -> str:
    return f"{TOKEN_PREFIX}{user_id}"


def parse_token(token: str | None) -> int | None:
    """Extract the user id from a mock token, or None if it is not one."""
    if not token or not token.startswith(TOKEN_PREFIX):
        return None
    try:
        return int(token[len(TOKEN_PREFIX):])
    except ValueError:
        return None


def normalize_roles(records: list[Record]) -> list[Record]:
    """Coerce every role other than "admin" down to "user"."""
    return [{**r, "role": Role.coerce(r.get("role")).value} for r in records]


class MockAuthBackend(AuthBackend):
    """Implements the AuthBackend port against the ``mock_users`` collection."""

    def __init__(self, store: KeyValueStore):
        self._users = SeededCollection(
            store,
            USERS_KEY,
            seed_users,
            fallback_to_seed=False,
            normalizer=normalize_roles,
        )

    @staticmethod
    def _to_entity(record: Record) -> User:
        """Map stored record → domain entity."""
        return User(
            id=record["id"],
            username=record["username"],
            password=record["password"],
            role=Role.coerce(record.get("role")),
            email=record.get("email"),
            created_at=from_iso(record["created_at"]),
            updated_at=from_iso(record["updated_at"]),
        )

    @staticmethod
    def _to_record(user: User) -> Record:
        """Map domain entity → stored record."""
        return {
            "id": user.id,
            "username": user.username,
            "password": user.password,
            "role": user.role.value,
            "email": user.email,
            "created_at": to_iso(user.created_at),
            "updated_at": to_iso(user.updated_at),
        }

    @staticmethod
    def _to_profile(user: User) -> UserProfile:
        return UserProfile(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def _to_auth_result(user: User) -> AuthResult:
        return AuthResult(
            token=build_token(user.id),
            user=AuthUser(id=user.id, username=user.username, role=user.role.value, email=user.email),
        )

    async def ensure_seeded(self) -> int:
        return len(await self._users.load())

    async def _load(self) -> list[User]:
        return [self._to_entity(r) for r in await self._users.load()]

    @staticmethod
    def _find_index(users: list[User], token: str | None) -> int:
        user_id = parse_token(token)
        if user_id is None:
            raise NotAuthenticatedError()
        for index, user in enumerate(users):
            if user.id == user_id:
                return index
        raise EntityNotFoundError("User", user_id)

    async def login(self, credentials: LoginRequest) -> AuthResult:
        users = await self._load()
        user = next(
            (
                u for u in users
                if u.username == credentials.username and u.password == credentials.password
            ),
            None,
        )
        if user is None:
            logger.info("Rejected login for '%s'", credentials.username)
            raise InvalidCredentialsError()
        logger.info("User '%s' logged in (id=%d)", user.username, user.id)
        return self._to_auth_result(user)

    async def register(self, data: RegisterRequest) -> AuthResult:
        records = await self._users.load()
        wanted = data.username.lower()
        if any(r["username"].lower() == wanted for r in records):
            raise UsernameTakenError(data.username)

        user = User(
            id=SeededCollection.next_id(records),
            username=data.username,
            password=data.password,
            role=Role.coerce(data.role),
            email=data.email,
        )
        await self._users.save([*records, self._to_record(user)])
        logger.info("Registered user '%s' (id=%d, role=%s)", user.username, user.id, user.role.value)
        return self._to_auth_result(user)

    async def logout(self, token: str | None) -> None:
        logger.debug("Mock logout for token owner %s", parse_token(token))

    async def get_profile(self, token: str | None) -> UserProfile:
        users = await self._load()
        return self._to_profile(users[self._find_index(users, token)])

    async def update_profile(self, token: str | None, data: ProfileUpdate) -> UserProfile:
        users = await self._load()
        index = self._find_index(users, token)
        user = users[index]
        user.update(**data.model_dump(exclude_none=True))
        await self._users.save([self._to_record(u) for u in users])
        logger.info("Updated profile of user %d", user.id)
        return self._to_profile(user)
