##########################################################################################
#
# Script name: preferences.py
#
# Description: Persists the favorite-category and muted-source lists.
#
##########################################################################################

import json
import logging

from .config import FAVORITE_CATEGORIES_KEY, MUTED_SOURCES_KEY
from .storage import Storage
from .utils import unique_strings


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger(__name__)


# ****************************************************************************************
# Classes
# ****************************************************************************************


class PreferencesStore:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def _read_list(self, key: str) -> list[str]:
        raw = self.storage.get_item(key)
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError as exc:
            log.warning('Ignoring unreadable preference %s: %s', key, exc)
            return []
        if not isinstance(parsed, list):
            return []
        return [value for value in parsed if isinstance(value, str)]

    def _write_list(self, key: str, values: list[str]) -> list[str]:
        unique = unique_strings(values)
        self.storage.set_item(key, json.dumps(unique))
        return unique

    def get_favorite_categories(self) -> list[str]:
        return self._read_list(FAVORITE_CATEGORIES_KEY)

    def set_favorite_categories(self, categories: list[str]) -> list[str]:
        return self._write_list(FAVORITE_CATEGORIES_KEY, categories)

    def get_muted_sources(self) -> list[str]:
        return self._read_list(MUTED_SOURCES_KEY)

    def set_muted_sources(self, source_ids: list[str]) -> list[str]:
        return self._write_list(MUTED_SOURCES_KEY, source_ids)
