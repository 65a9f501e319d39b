from .api_client import ApiClient
from .auth_session import AuthSession
from .retry import retry_request

__all__ = [
    "ApiClient",
    "AuthSession",
    "retry_request",
]
