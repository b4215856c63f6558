from __future__ import annotations

import hashlib
import json
import threading
import time
from typing import Any

from .config import DEFAULT_CACHE_CONFIG, CacheConfig


def make_key(request_dict: dict) -> str:
    normalized = json.dumps(request_dict, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


class ResultCache:
    """In-process TTL cache for pairing results, with hit/miss counters."""

    def __init__(self, config: CacheConfig = DEFAULT_CACHE_CONFIG):
        self.config = config
        self._entries: dict[str, dict[str, Any]] = {}
        self._hits = 0
        self._misses = 0
        self._lock = threading.Lock()

    def get(self, request_dict: dict) -> Any | None:
        if not self.config.enabled:
            return None
        key = make_key(request_dict)
        with self._lock:
            entry = self._entries.get(key)
            if entry and time.time() - entry["created_at"] < self.config.ttl_seconds:
                self._hits += 1
                return entry["value"]
            if entry:
                del self._entries[key]
            self._misses += 1
            return None

    def set(self, request_dict: dict, value: Any) -> None:
        if not self.config.enabled:
            return
        key = make_key(request_dict)
        now = time.time()
        with self._lock:
            self._purge_expired(now)
            self._entries.pop(key, None)
            # Oldest first, dicts keep insertion order
            while self._entries and len(self._entries) >= self.config.max_entries:
                del self._entries[next(iter(self._entries))]
            self._entries[key] = {"value": value, "created_at": now}

    def _purge_expired(self, now: float) -> None:
        expired = [
            k for k, entry in self._entries.items()
            if now - entry["created_at"] >= self.config.ttl_seconds
        ]
        for k in expired:
            del self._entries[k]

    def stats(self) -> dict:
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
            }

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
