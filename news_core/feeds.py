##########################################################################################
#
# Script name: feeds.py
#
# Description: Fetches publisher RSS/Atom feeds with candidate-endpoint fallback and
#              normalizes their items into articles.
#
##########################################################################################

import logging
from concurrent.futures import ThreadPoolExecutor

import feedparser
import requests

from .config import (
    DEFAULT_NEWS_IMAGE,
    FEED_TIMEOUT_SECONDS,
    LOCAL_CATEGORY,
    PAGE_SIZE,
    SUMMARY_MAX_CHARS,
    USER_AGENT,
)
from .errors import FeedError
from .models import Article, ArticleSource, FeedSource
from .registry import list_sources
from .utils import (
    as_list,
    decode_entities,
    first_image_src,
    parse_timestamp,
    read_time_minutes,
    strip_html,
    to_iso,
    truncate,
    utc_now,
)


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger(__name__)
DEFAULT_MAX_WORKERS = 4


# ****************************************************************************************
# Functions
# ****************************************************************************************


def parse_published(entry: dict) -> str:
    candidates = [
        entry.get('published'),
        entry.get('updated'),
        entry.get('created'),
    ]
    for candidate in candidates:
        parsed = parse_timestamp(candidate)
        if parsed is not None:
            return to_iso(parsed)
    return to_iso(utc_now())


def _entry_body(entry: dict) -> str:
    for block in as_list(entry.get('content')):
        value = block.get('value') if isinstance(block, dict) else block
        if value:
            return str(value)
    return str(entry.get('summary') or entry.get('description') or '')


def extract_image(entry: dict, body: str) -> str:
    for enclosure in as_list(entry.get('enclosures')):
        if isinstance(enclosure, dict):
            href = enclosure.get('href') or enclosure.get('url')
        else:
            href = enclosure
        if href:
            return str(href)
    for media in as_list(entry.get('media_content')):
        url = media.get('url') if isinstance(media, dict) else media
        if url:
            return str(url)
    return first_image_src(body) or DEFAULT_NEWS_IMAGE


def entry_to_article(source: FeedSource, entry: dict) -> Article:
    title = decode_entities(str(entry.get('title') or ''))
    link = str(entry.get('link') or '').strip()
    guid = str(entry.get('id') or entry.get('guid') or '').strip()
    body = _entry_body(entry)
    summary = truncate(strip_html(body), SUMMARY_MAX_CHARS)
    return Article(
        id=f'{source.id}_{guid or link}',
        title=title or 'Untitled',
        description=summary,
        content=summary,
        url=link,
        original_url=link,
        image_url=extract_image(entry, body),
        published_at=parse_published(entry),
        source=ArticleSource(
            id=source.id,
            name=source.name,
            logo_url=source.logo,
            site_url=source.site_url,
        ),
        author=entry.get('author') or None,
        category=LOCAL_CATEGORY,
        read_time_minutes=read_time_minutes(summary),
        is_local=True,
        source_type='rss',
        summary=summary,
    )


def fetch_feed(url: str, session=None, timeout: float = FEED_TIMEOUT_SECONDS):
    http = session or requests
    try:
        response = http.get(url, timeout=timeout, headers={'User-Agent': USER_AGENT})
    except requests.RequestException as exc:
        raise FeedError(url, exc) from exc
    if not 200 <= response.status_code < 300:
        raise FeedError(url, f'HTTP {response.status_code}')
    parsed = feedparser.parse(response.content)
    if not parsed.entries and (parsed.get('bozo') or not parsed.get('version')):
        reason = parsed.get('bozo_exception') or 'not a syndication feed'
        raise FeedError(url, reason)
    return parsed


def fetch_publisher_articles(
    source: FeedSource,
    limit: int = PAGE_SIZE,
    session=None,
    timeout: float = FEED_TIMEOUT_SECONDS,
) -> list[Article]:
    if limit <= 0:
        log.warning('Nothing to fetch for %s with limit %d.', source.id, limit)
        return []

    parsed = None
    for url in source.feeds:
        try:
            parsed = fetch_feed(url, session=session, timeout=timeout)
        except FeedError as exc:
            log.warning('Feed candidate failed for %s: %s', source.id, exc)
            continue
        log.debug('Using feed %s for %s (%d entries).', url, source.id, len(parsed.entries))
        break

    if parsed is None:
        log.warning('All %d feed candidates failed for %s.', len(source.feeds), source.id)
        return []

    articles: list[Article] = []
    for entry in parsed.entries:
        try:
            articles.append(entry_to_article(source, entry))
        except ValueError as exc:
            log.warning('Skipping malformed entry from %s: %s', source.id, exc)
            continue
        if len(articles) >= limit:
            break
    return articles


def fetch_local_news(
    sources: list[FeedSource] | None = None,
    limit: int = PAGE_SIZE,
    session=None,
    timeout: float = FEED_TIMEOUT_SECONDS,
    max_workers: int = DEFAULT_MAX_WORKERS,
) -> list[Article]:
    if limit <= 0:
        return []
    sources = list_sources() if sources is None else sources
    if not sources:
        return []

    def _fetch_source(source: FeedSource) -> list[Article]:
        try:
            return fetch_publisher_articles(source, limit, session=session, timeout=timeout)
        except Exception as exc:  # noqa: BLE001
            log.exception('Feed fetch failed for %s: %s', source.id, exc)
            return []

    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(sources)))) as pool:
        batches = list(pool.map(_fetch_source, sources))

    results: list[Article] = []
    for batch in batches:
        results.extend(batch[: limit - len(results)])
        if len(results) >= limit:
            break
    log.debug('Collected %d local article(s) from %d source(s).', len(results), len(sources))
    return sorted(results, key=lambda article: article.published_dt, reverse=True)
