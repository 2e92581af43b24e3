"""
Two-level TTL cache for expensive generated responses.

Entries live in a process-local dict and are mirrored into a durable
key-value store under ``<namespace><key>`` as JSON ``{data, timestamp, ttl}``,
so cached responses survive restarts. The durable store is best effort:
any failure there is logged and the cache keeps working from memory.
"""

import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from mindtrade.repositories.protocols import KeyValueStore, EnumerableKeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60
DEFAULT_NAMESPACE = "openai_cache_"


@dataclass
class CacheEntry:
    """Cached payload plus the write time and freshness window (seconds)."""

    data: Any
    timestamp: float
    ttl: float

    def is_valid(self, now: float) -> bool:
        return now - self.timestamp < self.ttl

    def to_json(self) -> str:
        return json.dumps({"data": self.data, "timestamp": self.timestamp, "ttl": self.ttl})

    @classmethod
    def from_json(cls, raw: str) -> "CacheEntry":
        """Parse a stored entry. Raises ValueError on malformed input."""
        try:
            payload = json.loads(raw)
            return cls(
                data=payload["data"],
                timestamp=float(payload["timestamp"]),
                ttl=float(payload["ttl"]),
            )
        except (TypeError, KeyError, json.JSONDecodeError) as exc:
            raise ValueError(f"malformed cache entry: {exc}") from exc


class TTLCache:
    """
    Memory + durable cache with per-entry time-to-live.

    An entry is valid iff ``now - timestamp < ttl``. Expired entries are
    treated as absent and purged lazily on the next read.

    If the durable store cannot enumerate its keys, the cache keeps an
    auxiliary index entry listing the keys it wrote so ``clear()`` can still
    find them.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        namespace: str = DEFAULT_NAMESPACE,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        if not namespace.endswith("_"):
            raise ValueError(f"cache namespace must end with '_': {namespace!r}")
        self._store = store
        self._namespace = namespace
        self._default_ttl = default_ttl
        self._clock = clock
        self._memory: dict[str, CacheEntry] = {}
        self._lock = threading.RLock()

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    def storage_key(self, key: str) -> str:
        """Return the durable-store key for a cache key."""
        return f"{self._namespace}{key}"

    @property
    def _index_key(self) -> str:
        # Never starts with the namespace, so no cache key can map onto it
        return f"{self._namespace.rstrip('_')}.index"

    @property
    def _enumerable(self) -> bool:
        return isinstance(self._store, EnumerableKeyValueStore)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set(self, key: str, data: Any, ttl: Optional[float] = None) -> None:
        """Store ``data`` under ``key`` for ``ttl`` seconds (default 24h)."""
        entry = CacheEntry(
            data=data,
            timestamp=self._clock(),
            ttl=self._default_ttl if ttl is None else ttl,
        )
        with self._lock:
            self._memory[key] = entry
            self._write_durable(key, entry)

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached data for ``key`` or ``default`` when absent/expired."""
        now = self._clock()
        with self._lock:
            entry = self._memory.get(key)
            if entry is not None:
                if entry.is_valid(now):
                    return entry.data
                del self._memory[key]

            entry = self._read_durable(key)
            if entry is None:
                return default
            if entry.is_valid(now):
                self._memory[key] = entry
                return entry.data

            logger.debug("Cache entry expired: %s", key)
            self._remove_durable(key)
            return default

    def __contains__(self, key: str) -> bool:
        marker = object()
        return self.get(key, marker) is not marker

    def clear(self, key: Optional[str] = None) -> None:
        """Remove one entry, or every entry in this cache's namespace."""
        with self._lock:
            if key is not None:
                self._memory.pop(key, None)
                self._remove_durable(key)
                return

            self._memory.clear()
            self._clear_durable()

    # ------------------------------------------------------------------
    # Durable store (errors logged, never raised)
    # ------------------------------------------------------------------

    def _write_durable(self, key: str, entry: CacheEntry) -> None:
        if self._store is None:
            return
        try:
            self._store.set_item(self.storage_key(key), entry.to_json())
            if not self._enumerable:
                self._update_index(add=key)
        except Exception as exc:
            logger.warning("Failed to persist cache entry %s: %s", key, exc)

    def _read_durable(self, key: str) -> Optional[CacheEntry]:
        if self._store is None:
            return None
        try:
            raw = self._store.get_item(self.storage_key(key))
        except Exception as exc:
            logger.warning("Failed to read cache entry %s: %s", key, exc)
            return None
        if raw is None:
            return None
        try:
            return CacheEntry.from_json(raw)
        except ValueError as exc:
            logger.warning("Discarding unreadable cache entry %s: %s", key, exc)
            self._remove_durable(key)
            return None

    def _remove_durable(self, key: str) -> None:
        if self._store is None:
            return
        try:
            self._store.remove_item(self.storage_key(key))
            if not self._enumerable:
                self._update_index(discard=key)
        except Exception as exc:
            logger.warning("Failed to remove cache entry %s: %s", key, exc)

    def _clear_durable(self) -> None:
        if self._store is None:
            return
        try:
            if self._enumerable:
                storage_keys: Iterable[str] = [
                    k for k in self._store.keys() if k.startswith(self._namespace)
                ]
            else:
                storage_keys = [self.storage_key(k) for k in self._load_index()]
            for storage_key in storage_keys:
                self._store.remove_item(storage_key)
            if not self._enumerable:
                self._store.remove_item(self._index_key)
        except Exception as exc:
            logger.warning("Failed to clear durable cache: %s", exc)

    def _load_index(self) -> list[str]:
        raw = self._store.get_item(self._index_key)
        if not raw:
            return []
        try:
            keys = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Cache key index is unreadable; starting a new one")
            return []
        return [k for k in keys if isinstance(k, str)] if isinstance(keys, list) else []

    def _update_index(self, add: Optional[str] = None, discard: Optional[str] = None) -> None:
        keys = self._load_index()
        if add is not None and add not in keys:
            keys.append(add)
        if discard is not None and discard in keys:
            keys.remove(discard)
        self._store.set_item(self._index_key, json.dumps(keys))
