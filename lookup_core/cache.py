#!/usr/bin/env python3
"""
In-memory result cache
One bounded LRU per source language, created on first use, living for the
whole process. Entries are only evicted by size, never by age.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

from .models import LookupResult

logger = logging.getLogger(__name__)

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')

DEFAULT_MAX_ENTRIES = 100_000


class LRUCache(Generic[K, V]):
    """Least-recently-used mapping; both get and put refresh recency"""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: K) -> Optional[V]:
        with self._lock:
            if key not in self._entries:
                return None
            self._entries.move_to_end(key)
            return self._entries[key]

    def put(self, key: K, value: V) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Evicted '{evicted}' from LRU cache")

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CacheRegistry:
    """Per-language result caches keyed by query word"""

    def __init__(self, max_entries_per_language: int = DEFAULT_MAX_ENTRIES):
        self.max_entries_per_language = max_entries_per_language
        self._caches: Dict[str, LRUCache[str, List[LookupResult]]] = {}
        self._lock = threading.Lock()

    def get_or_create(self, language: str) -> LRUCache[str, List[LookupResult]]:
        with self._lock:
            cache = self._caches.get(language)
            if cache is None:
                logger.info(f"Creating result cache for language '{language}' "
                            f"({self.max_entries_per_language} entries)")
                cache = LRUCache(self.max_entries_per_language)
                self._caches[language] = cache
            return cache

    def get(self, language: str, word: str) -> Optional[List[LookupResult]]:
        cached = self.get_or_create(language).get(word)
        return list(cached) if cached is not None else None

    def put(self, language: str, word: str, results: List[LookupResult]) -> None:
        self.get_or_create(language).put(word, list(results))

    def languages(self) -> List[str]:
        with self._lock:
            return list(self._caches)
