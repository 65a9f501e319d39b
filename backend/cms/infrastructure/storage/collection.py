"""Whole-collection JSON storage over a KeyValueStore.

Every mutation in the mock backend is ``load()`` → transform in memory →
``save()``. There is no locking: two mutations that interleave across an
``await`` lose one of the writes (last write wins for the whole list).
"""

import json
import logging
from collections.abc import Callable
from typing import Any

from cms.application.interfaces import KeyValueStore

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class SeededCollection:
    """A named list of JSON records, seeded with defaults on first load."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        seed: Callable[[], list[Record]],
        *,
        fallback_to_seed: bool = True,
        normalizer: Callable[[list[Record]], list[Record]] | None = None,
    ):
        self._store = store
        self._key = key
        self._seed = seed
        self._fallback_to_seed = fallback_to_seed
        self._normalizer = normalizer

    @property
    def key(self) -> str:
        return self._key

    async def load(self) -> list[Record]:
        """Return the full collection, seeding and persisting defaults when absent."""
        raw = await self._store.get_item(self._key)
        if raw is None:
            records = self._seed()
            await self.save(records)
            logger.info("Seeded '%s' with %d records", self._key, len(records))
            return records

        try:
            records = json.loads(raw)
        except json.JSONDecodeError:
            records = None
        if not isinstance(records, list):
            logger.warning("Unreadable value under '%s', using fallback", self._key)
            return self._seed() if self._fallback_to_seed else []

        if self._normalizer is not None:
            normalized = self._normalizer(records)
            if normalized != records:
                await self.save(normalized)
                logger.info("Normalized records under '%s'", self._key)
            records = normalized
        return records

    async def save(self, records: list[Record]) -> None:
        await self._store.set_item(self._key, json.dumps(records))

    @staticmethod
    def next_id(records: list[Record]) -> int:
        """``max(existing ids) + 1``, or 1 for an empty collection."""
        return max((int(r["id"]) for r in records), default=0) + 1
