##########################################################################################
#
# Script name: service.py
#
# Description: Entry point for callers: cached article queries over the headline
#              provider, publisher feeds and the static fallback.
#
##########################################################################################

import logging

from .blending import build_hybrid_feed
from .cache import NewsCache
from .config import CACHE_KEY_PREFIX, DEFAULT_CATEGORY, LOCAL_CATEGORY, PAGE_SIZE, Settings
from .errors import NewsError, ProviderError
from .fallback import StaticFallbackProvider
from .feeds import fetch_local_news
from .headlines import HeadlineClient
from .models import Article, FeedSource, NewsFilters
from .preferences import PreferencesStore
from .registry import list_sources
from .storage import MemoryStorage, SqliteStorage, Storage


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger(__name__)


# ****************************************************************************************
# Classes
# ****************************************************************************************


class NewsService:
    def __init__(
        self,
        settings: Settings | None = None,
        storage: Storage | None = None,
        client: HeadlineClient | None = None,
        session=None,
        sources: list[FeedSource] | None = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        if storage is None:
            storage = SqliteStorage(self.settings.cache_db) if self.settings.cache_db else MemoryStorage()
        self.storage = storage
        self.session = session
        self.cache = NewsCache(storage)
        self.preferences = PreferencesStore(storage)
        self.fallback = client.fallback if client is not None else StaticFallbackProvider()
        self.client = client or HeadlineClient(
            api_key=self.settings.api_key,
            base_url=self.settings.api_base,
            timeout=self.settings.provider_timeout,
            session=session,
            fallback=self.fallback,
        )
        self.sources = sources if sources is not None else list_sources(self.settings.sources_file)

    @property
    def primary_country(self) -> str:
        return self.settings.primary_country

    def _fallback_for(self, category: str) -> list[Article]:
        return self.fallback.fetch_by_category(category, self.primary_country)

    def _fetch_country(self, country: str) -> list[Article]:
        return self.client.fetch_top_headlines(country=country, raise_errors=True)

    def _fetch_live(self, category: str, search_query: str = '', sort_by: str = 'publishedAt') -> list[Article]:
        if search_query:
            return self.client.search_articles(search_query, category, sort_by=sort_by, raise_errors=True)
        if category == 'all':
            return build_hybrid_feed(
                self.primary_country,
                self.settings.secondary_countries,
                self._fetch_country,
                target=PAGE_SIZE,
            )
        return self.client.fetch_by_category(category, self.primary_country, raise_errors=True)

    def fetch_news(self, filters: NewsFilters | None = None) -> list[Article]:
        filters = filters or NewsFilters()
        category = filters.category

        def producer() -> list[Article]:
            if not self.client.configured:
                log.info('No headline provider key configured; serving sample %s articles.', category)
                return self._fallback_for(category)
            return self._fetch_live(category, filters.search_query, filters.sort_by)

        return self.cache.get_or_fetch(
            filters.signature(),
            producer,
            category=category,
            fallback=lambda: self._fallback_for(category),
        )

    def fetch_by_category(self, category: str) -> list[Article]:
        if category == 'all':
            return self.fetch_hybrid_feed()
        return self.client.fetch_by_category(category, self.primary_country)

    def fetch_hybrid_feed(self) -> list[Article]:
        try:
            return self._fetch_live('all')
        except ProviderError as exc:
            log.warning('Hybrid feed failed (%s); serving sample world articles.', exc)
            return self.fallback.fetch_by_category(DEFAULT_CATEGORY)

    def fetch_breaking_news(self) -> list[Article]:
        return self.client.fetch_breaking(self.primary_country)

    def fetch_trending_news(self) -> list[Article]:
        return self.client.fetch_trending()

    def search_news(self, query: str, category: str | None = None) -> list[Article]:
        return self.client.search_articles(query, category)

    def fetch_local_news(self, limit: int = PAGE_SIZE) -> list[Article]:
        source_ids = ','.join(source.id for source in self.sources)
        signature = f'{CACHE_KEY_PREFIX}local_{limit}_{source_ids}'

        def producer() -> list[Article]:
            articles = fetch_local_news(
                self.sources,
                limit=limit,
                session=self.session,
                timeout=self.settings.feed_timeout,
            )
            if not articles and self.sources:
                raise NewsError('no publisher feed returned articles')
            return articles

        return self.cache.get_or_fetch(signature, producer, category=LOCAL_CATEGORY)

    def clear_cache(self) -> None:
        self.cache.clear()
        log.info('News cache cleared.')
