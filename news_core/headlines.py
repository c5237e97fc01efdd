##########################################################################################
#
# Script name: headlines.py
#
# Description: Client for the paid headline provider (NewsAPI-style JSON) with a static
#              fallback when the provider is unconfigured or failing.
#
##########################################################################################

import logging
import random

import requests

from .categories import infer_category
from .config import (
    BREAKING_PAGE_SIZE,
    DEFAULT_API_BASE,
    DEFAULT_NEWS_IMAGE,
    LOCAL_CATEGORY,
    PAGE_SIZE,
    PROVIDER_TIMEOUT_SECONDS,
    TRENDING_COUNT,
    USER_AGENT,
)
from .errors import ProviderError
from .fallback import StaticFallbackProvider
from .models import Article, ArticleSource
from .utils import as_list, parse_timestamp, read_time_minutes, to_iso, utc_now


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger(__name__)


# ****************************************************************************************
# Classes
# ****************************************************************************************


class HeadlineClient:
    '''
    Thin client over the provider's ``top-headlines`` and ``everything`` endpoints.

    Public fetch methods never raise for upstream problems: a missing API key, a
    transport error, an undecodable body or a non-"ok" status all degrade to the
    static fallback set for the requested category. Pass ``raise_errors=True`` to
    get the underlying :class:`ProviderError` instead.
    '''

    def __init__(
        self,
        api_key: str = '',
        base_url: str = DEFAULT_API_BASE,
        page_size: int = PAGE_SIZE,
        timeout: float = PROVIDER_TIMEOUT_SECONDS,
        session=None,
        fallback: StaticFallbackProvider | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.api_key = api_key or ''
        self.base_url = base_url.rstrip('/')
        self.page_size = page_size
        self.timeout = timeout
        self.fallback = fallback or StaticFallbackProvider()
        self._http = session or requests
        self._rng = rng or random.Random()

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _request(self, endpoint: str, params: dict) -> list[dict]:
        if not self.api_key:
            raise ProviderError(endpoint, 'no API key configured')
        query = {key: value for key, value in params.items() if value not in (None, '')}
        query['apiKey'] = self.api_key
        url = f'{self.base_url}/{endpoint}'
        try:
            response = self._http.get(
                url,
                params=query,
                timeout=self.timeout,
                headers={'User-Agent': USER_AGENT},
            )
        except requests.RequestException as exc:
            raise ProviderError(endpoint, exc) from exc
        try:
            payload = response.json() or {}
        except ValueError as exc:
            raise ProviderError(endpoint, f'invalid JSON (HTTP {response.status_code})') from exc
        if not isinstance(payload, dict):
            raise ProviderError(endpoint, 'unexpected payload shape')
        status = payload.get('status')
        if status != 'ok' or response.status_code >= 400:
            raise ProviderError(endpoint, payload.get('message') or status or f'HTTP {response.status_code}')
        rows = [row for row in as_list(payload.get('articles')) if isinstance(row, dict)]
        log.debug('Provider %s returned %d article(s).', endpoint, len(rows))
        return rows

    def normalize_article(self, row: dict, index: int = 0, is_breaking: bool = False) -> Article:
        source = row.get('source')
        if not isinstance(source, dict):
            source = {}
        description = row.get('description') or ''
        content = row.get('content') or description
        published = parse_timestamp(row.get('publishedAt')) or utc_now()
        return Article(
            id=f"{source.get('id') or 'unknown'}_{int(published.timestamp() * 1000)}",
            title=row.get('title') or 'Untitled',
            description=description or content,
            content=content,
            url=row.get('url') or '',
            image_url=row.get('urlToImage') or DEFAULT_NEWS_IMAGE,
            published_at=to_iso(published),
            source=ArticleSource(
                id=source.get('id') or 'unknown',
                name=source.get('name') or 'Unknown Source',
            ),
            author=row.get('author') or None,
            category=infer_category(row.get('title'), row.get('description')),
            is_breaking=is_breaking,
            is_trending=not is_breaking and index < TRENDING_COUNT,
            read_time_minutes=read_time_minutes(content),
            source_type='newsapi',
            # Engagement counters are placeholders for the UI, not analytics.
            view_count=self._rng.randint(1000, 10999),
            like_count=self._rng.randint(50, 1049),
            comment_count=self._rng.randint(5, 104),
            share_count=self._rng.randint(10, 509),
        )

    def normalize_articles(self, rows: list[dict], is_breaking: bool = False) -> list[Article]:
        articles: list[Article] = []
        for row in rows:
            try:
                article = self.normalize_article(row, index=len(articles), is_breaking=is_breaking)
            except (ValueError, TypeError, AttributeError) as exc:
                log.warning('Skipping malformed provider article %r: %s', row.get('url'), exc)
                continue
            articles.append(article)
        return articles

    def fetch_top_headlines(
        self,
        country: str | None = None,
        category: str | None = None,
        search_query: str | None = None,
        page_size: int | None = None,
        is_breaking: bool = False,
        raise_errors: bool = False,
    ) -> list[Article]:
        page_size = page_size or self.page_size
        if search_query:
            endpoint = 'everything'
            params = {'q': search_query, 'sortBy': 'publishedAt', 'pageSize': page_size}
        else:
            endpoint = 'top-headlines'
            params = {'country': country, 'category': category, 'pageSize': page_size}
        try:
            rows = self._request(endpoint, params)
        except ProviderError as exc:
            if raise_errors:
                raise
            log.warning('%s; serving fallback articles.', exc)
            return self.fallback.fetch_top_headlines(country=country, category=category, is_breaking=is_breaking)
        return self.normalize_articles(rows, is_breaking=is_breaking)

    def search_articles(
        self,
        query: str,
        category: str | None = None,
        sort_by: str = 'publishedAt',
        raise_errors: bool = False,
    ) -> list[Article]:
        if not (query or '').strip():
            return []
        # The everything endpoint has no category filter; category only picks the fallback set.
        params = {'q': query.strip(), 'sortBy': sort_by, 'pageSize': self.page_size}
        try:
            rows = self._request('everything', params)
        except ProviderError as exc:
            if raise_errors:
                raise
            log.warning('%s; serving fallback articles.', exc)
            return self.fallback.search_articles(query, category, sort_by=sort_by)
        return self.normalize_articles(rows)

    def fetch_breaking(self, country: str) -> list[Article]:
        return self.fetch_top_headlines(
            country=country,
            page_size=BREAKING_PAGE_SIZE,
            is_breaking=True,
        )

    def fetch_trending(self) -> list[Article]:
        params = {'q': '*', 'language': 'en', 'sortBy': 'popularity', 'pageSize': self.page_size}
        try:
            rows = self._request('everything', params)
        except ProviderError as exc:
            log.warning('%s; no trending articles.', exc)
            return []
        return self.normalize_articles(rows)

    def fetch_by_category(
        self,
        category: str,
        primary_country: str,
        raise_errors: bool = False,
    ) -> list[Article]:
        if category == 'breaking':
            query = {'country': primary_country, 'page_size': BREAKING_PAGE_SIZE, 'is_breaking': True}
        elif category == LOCAL_CATEGORY:
            query = {'country': primary_country}
        else:
            # Category headlines are requested without a country to broaden results.
            query = {'category': category}
        try:
            return self.fetch_top_headlines(raise_errors=True, **query)
        except ProviderError as exc:
            if raise_errors:
                raise
            log.warning('%s; serving sample %s articles.', exc, category)
            return self.fallback.fetch_by_category(category, primary_country)
