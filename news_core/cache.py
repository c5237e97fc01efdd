##########################################################################################
#
# Script name: cache.py
#
# Description: Article cache keyed by filter signature, with a TTL and stale-while-error
#              fallback.
#
##########################################################################################

import json
import logging
from typing import Callable

from .config import CACHE_KEY_PREFIX, CACHE_TTL_MS
from .models import Article, CacheEntry
from .storage import Storage
from .utils import now_ms


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger(__name__)


# ****************************************************************************************
# Classes
# ****************************************************************************************


class NewsCache:
    '''
    An in-process dict read first, and a storage backend mirroring every write.
    Entries are replaced whole, never merged.
    '''

    def __init__(
        self,
        storage: Storage,
        ttl_ms: int = CACHE_TTL_MS,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.storage = storage
        self.ttl_ms = ttl_ms
        self._clock = clock or now_ms
        self._entries: dict[str, CacheEntry] = {}

    def _load_persisted(self, signature: str) -> CacheEntry | None:
        try:
            raw = self.storage.get_item(signature)
        except Exception as exc:  # noqa: BLE001
            log.error('Failed to read cache record %s: %s', signature, exc)
            return None
        if not raw:
            return None
        try:
            entry = CacheEntry.from_record(signature, json.loads(raw))
        except (ValueError, KeyError, TypeError) as exc:
            log.warning('Ignoring corrupt cache record %s: %s', signature, exc)
            return None
        self._entries[signature] = entry
        return entry

    def get_entry(self, signature: str) -> CacheEntry | None:
        entry = self._entries.get(signature)
        if entry is not None:
            return entry
        return self._load_persisted(signature)

    def put(self, signature: str, articles: list[Article], category: str = 'all') -> CacheEntry:
        entry = CacheEntry(
            articles=tuple(articles),
            timestamp_ms=self._clock(),
            filter_signature=signature,
            category=category,
        )
        self._entries[signature] = entry
        try:
            self.storage.set_item(signature, json.dumps(entry.to_record()))
        except Exception as exc:  # noqa: BLE001
            log.error('Failed to save cache record %s: %s', signature, exc)
        return entry

    def get_or_fetch(
        self,
        signature: str,
        producer: Callable[[], list[Article]],
        category: str = 'all',
        fallback: Callable[[], list[Article]] | None = None,
    ) -> list[Article]:
        '''
        Fresh entry -> cached articles. Otherwise the producer runs and its result
        replaces the entry. If the producer raises, the previous entry is served
        whatever its age; with nothing cached the fallback result is returned
        unstored, else an empty list.
        '''
        cached = self.get_entry(signature)
        if cached is not None and cached.is_fresh(self._clock(), self.ttl_ms):
            log.debug('Cache hit for %s', signature)
            return list(cached.articles)

        try:
            articles = list(producer())
        except Exception as exc:  # noqa: BLE001
            log.warning('Refresh failed for %s: %s', signature, exc)
            if cached is not None:
                return list(cached.articles)
            return list(fallback()) if fallback is not None else []

        self.put(signature, articles, category=category)
        return articles

    def clear(self) -> None:
        self._entries.clear()
        try:
            keys = [key for key in self.storage.keys() if key.startswith(CACHE_KEY_PREFIX)]
            self.storage.remove_items(keys)
        except Exception as exc:  # noqa: BLE001
            log.error('Failed to clear cache: %s', exc)
