from .http_backend import HttpBackend

__all__ = ["HttpBackend"]
