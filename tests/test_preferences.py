##########################################################################################
#
# Script name: test_preferences.py
#
# Description: Favorite-category and muted-source persistence.
#
##########################################################################################

import json

from news_core.config import FAVORITE_CATEGORIES_KEY, MUTED_SOURCES_KEY
from news_core.preferences import PreferencesStore
from news_core.storage import MemoryStorage


def test_lists_default_to_empty() -> None:
    store = PreferencesStore(MemoryStorage())
    assert store.get_favorite_categories() == []
    assert store.get_muted_sources() == []


def test_saves_are_deduplicated_and_overwrite() -> None:
    storage = MemoryStorage()
    store = PreferencesStore(storage)
    store.set_favorite_categories(['sports', 'ghana', 'sports', 'technology'])
    assert store.get_favorite_categories() == ['sports', 'ghana', 'technology']
    assert json.loads(storage.get_item(FAVORITE_CATEGORIES_KEY)) == ['sports', 'ghana', 'technology']

    store.set_favorite_categories(['world'])
    assert store.get_favorite_categories() == ['world']


def test_muted_sources_are_independent_of_favorites() -> None:
    store = PreferencesStore(MemoryStorage())
    store.set_muted_sources(['ghanaweb', 'ghanaweb', 'pulsegh'])
    assert store.get_muted_sources() == ['ghanaweb', 'pulsegh']
    assert store.get_favorite_categories() == []


def test_unreadable_values_read_as_empty() -> None:
    storage = MemoryStorage()
    storage.set_item(FAVORITE_CATEGORIES_KEY, 'not json')
    storage.set_item(MUTED_SOURCES_KEY, '{"a": 1}')
    store = PreferencesStore(storage)
    assert store.get_favorite_categories() == []
    assert store.get_muted_sources() == []
