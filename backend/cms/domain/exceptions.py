"""Domain-specific exceptions, independent of any web framework.

Backends raise these; ``ApiClient`` turns them into ``success=False``
envelopes. ``AuthenticationRequiredError`` is the one exception the facade
lets through to the caller.
"""


class CmsError(Exception):
    """Base class for every failure that maps onto a response envelope."""

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message)


class EntityNotFoundError(CmsError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str, field: str = "id"):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.field = field
        super().__init__(f"{entity_type} with {field} '{entity_id}' not found")


class DuplicateEntityError(CmsError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class UsernameTakenError(DuplicateEntityError):
    """Raised by registration when the username clashes case-insensitively."""

    def __init__(self, username: str):
        super().__init__("User", "username", username)
        self.message = "Username already exists"


class InvalidCredentialsError(CmsError):
    """Raised when no stored user matches the supplied username and password."""

    def __init__(self):
        super().__init__("Invalid username or password")


class NotAuthenticatedError(CmsError):
    """Raised when an operation needs a session token and none is usable."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class AuthenticationRequiredError(NotAuthenticatedError):
    """Raised before a protected remote call is sent without a token."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Authentication required to {operation}")


class PermissionDeniedError(CmsError):
    """Raised when the authenticated user lacks the required role."""

    def __init__(self, required_role: str):
        self.required_role = required_role
        super().__init__(f"Role '{required_role}' required")


class NetworkError(CmsError):
    """Raised when the remote API cannot be reached at all."""

    def __init__(self, detail: str):
        super().__init__("Failed to connect to server", detail=detail)


class HttpError(CmsError):
    """Raised when the remote API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str, detail: str | None = None):
        self.status_code = status_code
        super().__init__(message, detail=detail)
