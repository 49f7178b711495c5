"""Read-through lookup caches for validation lists."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class LookupCache:
    """Name → descriptor mapping loaded on first use.

    Entries are never expired: objects created through another channel (or
    through this client) after the first load stay invisible until
    :meth:`invalidate` is called or a new client is built.
    """

    def __init__(self, name: str, loader: Callable[[], list[dict]]) -> None:
        self.name = name
        self._loader = loader
        self._entries: dict[str, dict] | None = None

    @property
    def loaded(self) -> bool:
        return self._entries is not None

    def entries(self) -> dict[str, dict]:
        if self._entries is None:
            items = self._loader()
            self._entries = {item["name"]: item for item in items if "name" in item}
            logger.debug("Loaded %d %s", len(self._entries), self.name)
        return self._entries

    def get(self, name: str) -> dict | None:
        """Return the descriptor for *name* (exact match) or ``None``."""
        return self.entries().get(name)

    def invalidate(self) -> None:
        """Drop the cached list so the next lookup reloads it."""
        self._entries = None
