"""Centralized logging configuration.

Each Settings ``log_level_*`` field controls a group of loggers, so the
outbound HTTP chatter of httpx can be silenced while the mock backend
stays verbose (or the other way round).

Usage:
    from cms.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from create_app() or a script
"""

import logging
import sys

from cms.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field → logger names it governs
LOGGER_GROUPS: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore", "cms.infrastructure.http"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_mock": ("cms.infrastructure.mock", "cms.infrastructure.storage"),
    "log_level_client": ("cms.application.services",),
}


def parse_level(raw: str | None) -> int:
    """``"warning"`` → ``logging.WARNING``; unknown names fall back to INFO."""
    numeric = getattr(logging, (raw or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO


def category_levels(settings: Settings) -> dict[str, int]:
    """Resolve every grouped logger name to its numeric level."""
    levels: dict[str, int] = {}
    for field_name, logger_names in LOGGER_GROUPS.items():
        level = parse_level(getattr(settings, field_name, None))
        for name in logger_names:
            levels[name] = level
    return levels


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the root level, attach a stderr handler if none exists, then set group levels."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for name, level in category_levels(settings).items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s http=%s uvicorn=%s mock=%s client=%s",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_mock,
        settings.log_level_client,
    )
