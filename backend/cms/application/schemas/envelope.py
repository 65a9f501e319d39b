"""The uniform response envelope returned by every ApiClient operation."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from cms.domain.exceptions import CmsError

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """``{success, data, message?, error?}``: the wire and client envelope."""

    success: bool
    data: T | None = None
    message: str | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T, message: str | None = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, exc: CmsError) -> "ApiResponse[T]":
        return cls(success=False, message=exc.message, error=exc.detail)


def is_api_error(response: Any) -> bool:
    return isinstance(response, ApiResponse) and response.success is False


def is_api_success(response: Any) -> bool:
    return isinstance(response, ApiResponse) and response.success is True


def get_api_error_message(response: Any) -> str:
    """Best human-readable message for a failed envelope."""
    if is_api_error(response):
        return response.error or response.message or "An error occurred"
    return "Unknown error"


def handle_api_error(error: Any) -> str:
    """Reduce an exception or raw value to a display message."""
    message = getattr(error, "message", None) or (str(error) if isinstance(error, Exception) else None)
    if message:
        return message
    if isinstance(error, str):
        return error
    return "An unexpected error occurred"


_DATE_FORMATS = ("%B %d, %Y", "%Y-%m-%d")


def format_api_date(value: str) -> str:
    """Render an API date as ``April 13, 2025``; unparsable input is returned as-is."""
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return value
    return f"{parsed:%B} {parsed.day}, {parsed.year}"
