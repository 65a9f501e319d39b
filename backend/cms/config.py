from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Article CMS API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Remote API
    api_base_url: str = "https://test-fe.mysellerpintar.com/api"
    api_prefix: str = "/api"
    request_timeout: float = 10.0
    retry_attempts: int = 3
    retry_delay: float = 1.0

    # Mock backend toggles; articles default to the mock store
    use_mock_api: bool = False
    mock_articles: bool = True

    # Key/value store backing the mock backend ("memory" or "json")
    storage_backend: str = "memory"
    storage_path: str = "data/store.json"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_mock: str = "INFO"             # Mock backend over the key/value store
    log_level_client: str = "INFO"           # ApiClient facade and AuthSession

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
