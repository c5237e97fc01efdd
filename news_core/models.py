from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .config import CACHE_KEY_PREFIX, CATEGORIES, DEFAULT_CATEGORY, DEFAULT_NEWS_IMAGE
from .utils import iso_or_now, parse_timestamp


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class ArticleSource:
    id: str
    name: str
    logo_url: str | None = None
    site_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {'id': self.id, 'name': self.name}
        if self.logo_url:
            payload['logo'] = self.logo_url
        if self.site_url:
            payload['url'] = self.site_url
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any] | None) -> ArticleSource:
        payload = payload or {}
        return cls(
            id=str(payload.get('id') or 'unknown'),
            name=str(payload.get('name') or 'Unknown Source'),
            logo_url=payload.get('logo'),
            site_url=payload.get('url'),
        )


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    url: str
    source: ArticleSource
    published_at: str
    category: str = DEFAULT_CATEGORY
    description: str = ''
    content: str = ''
    image_url: str = DEFAULT_NEWS_IMAGE
    author: str | None = None
    is_breaking: bool = False
    is_trending: bool = False
    is_local: bool = False
    read_time_minutes: int = 1
    source_type: str = 'newsapi'
    original_url: str | None = None
    summary: str | None = None
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    share_count: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError('Article id must not be empty')
        if self.category not in CATEGORIES:
            raise ValueError(f'Unknown article category: {self.category}')
        if parse_timestamp(self.published_at) is None:
            raise ValueError(f'Unparseable publishedAt: {self.published_at!r}')

    @property
    def published_dt(self) -> datetime:
        return parse_timestamp(self.published_at) or EPOCH

    def dedupe_key(self) -> str:
        return self.id or self.url

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'content': self.content,
            'url': self.url,
            'urlToImage': self.image_url,
            'publishedAt': self.published_at,
            'source': self.source.to_dict(),
            'author': self.author,
            'category': self.category,
            'isBreaking': self.is_breaking,
            'isTrending': self.is_trending,
            'isLocal': self.is_local,
            'readTime': self.read_time_minutes,
            'sourceType': self.source_type,
            'viewCount': self.view_count,
            'likeCount': self.like_count,
            'commentCount': self.comment_count,
            'shareCount': self.share_count,
        }
        if self.original_url is not None:
            payload['originalUrl'] = self.original_url
        if self.summary is not None:
            payload['summary'] = self.summary
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Article:
        category = payload.get('category') or DEFAULT_CATEGORY
        return cls(
            id=str(payload['id']),
            title=payload.get('title') or 'Untitled',
            url=payload.get('url') or '',
            source=ArticleSource.from_dict(payload.get('source')),
            published_at=iso_or_now(payload.get('publishedAt')),
            category=category if category in CATEGORIES else DEFAULT_CATEGORY,
            description=payload.get('description') or '',
            content=payload.get('content') or '',
            image_url=payload.get('urlToImage') or DEFAULT_NEWS_IMAGE,
            author=payload.get('author'),
            is_breaking=bool(payload.get('isBreaking')),
            is_trending=bool(payload.get('isTrending')),
            is_local=bool(payload.get('isLocal')),
            read_time_minutes=int(payload.get('readTime') or 1),
            source_type=payload.get('sourceType') or 'newsapi',
            original_url=payload.get('originalUrl'),
            summary=payload.get('summary'),
            view_count=int(payload.get('viewCount') or 0),
            like_count=int(payload.get('likeCount') or 0),
            comment_count=int(payload.get('commentCount') or 0),
            share_count=int(payload.get('shareCount') or 0),
        )


@dataclass(frozen=True)
class FeedSource:
    id: str
    name: str
    site_url: str
    feeds: tuple[str, ...]
    logo: str | None = None


@dataclass(frozen=True)
class CacheEntry:
    articles: tuple[Article, ...]
    timestamp_ms: int
    filter_signature: str
    category: str = 'all'

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.timestamp_ms

    def is_fresh(self, now_ms: int, ttl_ms: int) -> bool:
        return self.age_ms(now_ms) < ttl_ms

    def to_record(self) -> dict[str, Any]:
        return {
            'data': [article.to_dict() for article in self.articles],
            'timestamp': self.timestamp_ms,
            'category': self.category,
        }

    @classmethod
    def from_record(cls, signature: str, record: dict[str, Any]) -> CacheEntry:
        return cls(
            articles=tuple(Article.from_dict(item) for item in record.get('data') or []),
            timestamp_ms=int(record['timestamp']),
            filter_signature=signature,
            category=record.get('category') or 'all',
        )


@dataclass(frozen=True)
class NewsFilters:
    category: str = 'all'
    search_query: str = ''
    sources: tuple[str, ...] = field(default_factory=tuple)
    sort_by: str = 'publishedAt'

    def signature(self) -> str:
        return f'{CACHE_KEY_PREFIX}{self.category}_{self.search_query}_{",".join(self.sources)}'
