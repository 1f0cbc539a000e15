"""In-memory TTL cache for recipe API and AI results.

Entries expire lazily: an expired entry is only removed when it is read,
evicted or explicitly deleted. Eviction follows insertion order (the oldest
inserted entry goes first); reads do not refresh an entry's position, so this
is not an LRU.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import orjson


if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


DEFAULT_TTL_SECONDS: Final[float] = 3600.0
DEFAULT_MAX_SIZE: Final[int] = 100


@dataclass(slots=True)
class CacheEntry[T]:
    """Cached value with its absolute expiry timestamp (``time.time()``)."""

    data: T
    expiry: float

    def is_expired(self, now: float) -> bool:
        """An entry is still valid at exactly ``now == expiry``."""
        return now > self.expiry


class ApiCache[T]:
    """Bounded key/value store with per-entry expiry.

    Args:
        ttl: Default time-to-live in seconds.
        max_size: Maximum number of entries kept.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        max_size: int = DEFAULT_MAX_SIZE,
    ) -> None:
        if max_size < 1:
            msg = "max_size must be at least 1"
            raise ValueError(msg)
        self.ttl = ttl
        self.max_size = max_size
        self._entries: dict[str, CacheEntry[T]] = {}

    def get(self, key: str) -> T | None:
        """Return the cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        if entry.is_expired(time.time()):
            del self._entries[key]
            return None

        return entry.data

    def set(self, key: str, data: T, ttl: float | None = None) -> None:
        """Insert or overwrite an entry.

        A new key arriving at a full cache evicts exactly one entry, the
        earliest inserted one. Overwriting keeps the key's position.

        Args:
            key: Cache key.
            data: Value to store.
            ttl: Lifetime in seconds; defaults to the cache TTL.
        """
        if key not in self._entries and len(self._entries) >= self.max_size:
            oldest_key = next(iter(self._entries))
            del self._entries[oldest_key]

        lifetime = self.ttl if ttl is None else ttl
        self._entries[key] = CacheEntry(data=data, expiry=time.time() + lifetime)

    def delete(self, key: str) -> None:
        """Remove an entry; missing keys are ignored."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    @staticmethod
    def generate_key(prefix: str, params: Mapping[str, Any]) -> str:
        """Build a deterministic key from a prefix and flat parameters.

        Parameter names are sorted, and each value is serialized as compact
        JSON with sorted object keys, so argument order never changes the key:
        ``"{prefix}:{name}:{json}:{name}:{json}..."``.
        """
        segments = [prefix]
        for name in sorted(params):
            value = orjson.dumps(
                params[name],
                option=orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS,
                default=str,
            ).decode()
            segments.append(f"{name}:{value}")
        return ":".join(segments)
