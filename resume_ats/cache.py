"""Content-hash cache for scoring results.

The scoring pipeline is referentially transparent, so results can be reused
for any document with the same scored content.  Keys are derived from the
document's content, never from object identity.
"""

from __future__ import annotations

import copy
import hashlib
import json
from collections import OrderedDict
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from .domain.resume_document import coerce_document


def content_hash(document: Any) -> str:
    """SHA256 of the canonical JSON of *document*, ignoring ``metadata``."""
    data = coerce_document(document).to_dict()
    data.pop("metadata", None)
    payload = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class CacheEntry:
    """A single cache entry with TTL (time-to-live)."""

    def __init__(self, value: Any, ttl_seconds: int = 300):
        self.value = value
        self.created_at = datetime.now()
        self.ttl = timedelta(seconds=ttl_seconds)
        self.hits = 0

    def is_expired(self) -> bool:
        return datetime.now() - self.created_at > self.ttl

    def touch(self):
        self.hits += 1


class ScoringCache:
    """
    Cache for scoring results.

    Entries are keyed by computation name plus the document's content hash,
    expire after a TTL, and are evicted least-recently-used first once
    ``max_entries`` is reached.  Values are stored and handed out as deep
    copies, so no two callers ever share a mutable result.
    """

    def __init__(self, ttl_seconds: int = 300, max_entries: int = 1000):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._cache: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def _make_key(self, name: str, document: Any) -> str:
        return f"{name}:{content_hash(document)}"

    def get(self, name: str, document: Any) -> Optional[Any]:
        """
        Get cached result if available and not expired.

        Args:
            name: Computation name (e.g. "breakdown")
            document: Resume document the result was computed from

        Returns:
            A copy of the cached value if found and valid, None otherwise
        """
        key = self._make_key(name, document)
        entry = self._cache.get(key)

        if entry is None:
            self._misses += 1
            return None

        if entry.is_expired():
            del self._cache[key]
            self._misses += 1
            return None

        self._cache.move_to_end(key)
        entry.touch()
        self._hits += 1
        return copy.deepcopy(entry.value)

    def set(self, name: str, document: Any, value: Any, ttl_seconds: Optional[int] = None):
        """Store a copy of *value*, sweeping expired entries and trimming to ``max_entries``."""
        key = self._make_key(name, document)
        self.evict_expired()
        self._cache[key] = CacheEntry(
            copy.deepcopy(value), ttl_seconds if ttl_seconds is not None else self.ttl_seconds
        )
        self._cache.move_to_end(key)
        while len(self._cache) > self.max_entries:
            self._cache.popitem(last=False)
            self._evictions += 1

    def clear(self):
        """Clear all cached entries."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def evict_expired(self):
        """Remove all expired entries from cache."""
        expired_keys = [key for key, entry in self._cache.items() if entry.is_expired()]
        for key in expired_keys:
            del self._cache[key]

    def get_stats(self) -> Dict[str, Any]:
        total_requests = self._hits + self._misses
        hit_rate = self._hits / total_requests if total_requests > 0 else 0.0

        return {
            "hits": self._hits,
            "misses": self._misses,
            "total_requests": total_requests,
            "hit_rate": hit_rate,
            "cache_size": len(self._cache),
            "evictions": self._evictions,
        }
