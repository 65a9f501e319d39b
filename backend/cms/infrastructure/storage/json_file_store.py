"""Key/value store persisted as a single JSON object on disk.

Layout:
    <path>: ``{"<key>": "<json text>", ...}``

Every write rewrites the whole file, mirroring the whole-collection
read/write model of the mock backend.
"""

import json
import logging
from pathlib import Path

from cms.application.interfaces import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Infrastructure adapter for a JSON-file key/value namespace."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        """Read the backing file, returning {} if missing or corrupt."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read %s, starting empty: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: top-level value is not an object", self._path)
            return {}
        return data

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    async def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    async def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    async def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)
