"""Domain entity for CMS accounts."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Role(str, Enum):
    """Account roles. Anything other than ``admin`` is a plain user."""

    ADMIN = "admin"
    USER = "user"

    @classmethod
    def coerce(cls, value: "str | Role | None") -> "Role":
        """Map a raw role value onto a Role, defaulting to USER."""
        return cls.ADMIN if value == cls.ADMIN.value else cls.USER


@dataclass
class User:
    """A registered account.

    ``password`` is kept in plaintext by the mock store; the seeded accounts
    are fixtures, not a security contract.
    """

    username: str
    password: str
    role: Role = Role.USER
    email: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def update(
        self,
        username: str | None = None,
        email: str | None = None,
        role: str | None = None,
    ) -> None:
        """Merge profile fields and refresh the updated_at timestamp."""
        if username is not None:
            self.username = username
        if email is not None:
            self.email = email
        if role is not None:
            self.role = Role.coerce(role)
        self.updated_at = datetime.now(timezone.utc)
