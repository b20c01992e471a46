import time
from collections import OrderedDict
from typing import Any, Callable, Hashable, Optional, Tuple

CACHE_TTL = 5 * 60  # seconds
MAX_ENTRIES = 128


class ResponseCache:
    """Bounded response cache: entries expire after `ttl` seconds and the
    least recently used entry is evicted beyond `max_entries`."""

    def __init__(self, ttl: float = CACHE_TTL, max_entries: int = MAX_ENTRIES,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.max_entries = max_entries
        self.clock = clock
        self._entries: "OrderedDict[Hashable, Tuple[float, Any]]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return self.get(key) is not None

    def get(self, key: Hashable) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, value = entry
        if self.clock() - stored_at >= self.ttl:
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return value

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = (self.clock(), value)
        self._entries.move_to_end(key)
        self.sweep()
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def sweep(self) -> int:
        """Drop expired entries; returns how many were dropped."""
        now = self.clock()
        expired = [k for k, (stored_at, _) in self._entries.items() if now - stored_at >= self.ttl]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()
