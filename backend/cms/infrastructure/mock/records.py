"""Helpers shared by the mock backends: timestamps, search and pagination."""

from collections.abc import Sequence
from datetime import datetime
from typing import TypeVar

T = TypeVar("T")


def to_iso(value: datetime) -> str:
    """Serialize a UTC timestamp as ``2024-01-01T00:00:00Z``."""
    return value.isoformat().replace("+00:00", "Z")


def from_iso(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def contains(haystack: str | None, needle: str) -> bool:
    """Case-insensitive substring test; ``needle`` must already be lowercase."""
    return needle in (haystack or "").lower()


def paginate(items: Sequence[T], page: int, limit: int) -> list[T]:
    """Offset pagination: ``start = (page - 1) * limit``."""
    start = (page - 1) * limit
    return list(items[start : start + limit])
