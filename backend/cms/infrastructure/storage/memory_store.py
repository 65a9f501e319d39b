"""In-process key/value store: stands in for browser local storage."""

from cms.application.interfaces import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Contents live as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    async def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)
