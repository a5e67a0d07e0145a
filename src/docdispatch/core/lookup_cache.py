"""Memoizing cache in front of a Lookup port."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Generic, TypeVar


if TYPE_CHECKING:
    from docdispatch.core.ports import Lookup


logger = logging.getLogger(__name__)

V = TypeVar("V")


class LookupCache(Generic[V]):
    """Amortizes repeated lookups of the same key for the cache's lifetime.

    Resolved keys are stored forever and never refreshed. A key the lookup
    could not resolve is not stored, so the next get() asks again. A key
    that resolved to None stays cached as None.

    Safe to share between threads: concurrent misses on one key invoke the
    lookup once, different keys resolve independently.

    Example:
        >>> from docdispatch.adapters.lookup import MappingLookup
        >>> cache = LookupCache(MappingLookup({"TheDress": "blue"}))
        >>> cache.get("TheDress")
        'blue'
    """

    def __init__(self, lookup: Lookup[V]) -> None:
        self._lookup = lookup
        self._entries: dict[str, V | None] = {}
        self._lock = threading.Lock()
        self._key_locks: dict[str, threading.Lock] = {}
        self._hits = 0
        self._misses = 0
        self._lookups = 0

    def get(self, key: str) -> V | None:
        """Return the value for key, consulting the lookup on first use.

        Args:
            key: The key to resolve.

        Returns:
            The cached or freshly resolved value, or None if the key
            could not be resolved.
        """
        with self._lock:
            if key in self._entries:
                self._hits += 1
                return self._entries[key]
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            # Another thread may have resolved the key while we waited
            with self._lock:
                if key in self._entries:
                    self._hits += 1
                    return self._entries[key]
                self._misses += 1
                self._lookups += 1

            found = self._lookup.try_read(key)

            with self._lock:
                if found is None:
                    self._key_locks.pop(key, None)
                    logger.debug("Lookup could not resolve key %r", key)
                    return None
                self._entries[key] = found.value
                self._key_locks.pop(key, None)

        logger.debug("Cached value for key %r", key)
        return found.value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def statistics(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with 'hits', 'misses', 'lookups' (calls made to the
            lookup port) and 'entries' (resolved keys held).
        """
        with self._lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "lookups": self._lookups,
                "entries": len(self._entries),
            }
