from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable

from .config import PAGE_SIZE, PRIMARY_WEIGHT
from .models import Article


log = logging.getLogger(__name__)

LocaleFetcher = Callable[[str], list[Article]]


def dedupe_articles(articles: Iterable[Article], seen: set[str] | None = None) -> list[Article]:
    seen = set() if seen is None else seen
    unique: list[Article] = []
    for article in articles:
        key = article.dedupe_key()
        if key in seen:
            continue
        seen.add(key)
        unique.append(article)
    return unique


def sort_by_recency(articles: Iterable[Article]) -> list[Article]:
    return sorted(articles, key=lambda article: article.published_dt, reverse=True)


def primary_quota(target: int) -> int:
    return math.ceil(target * PRIMARY_WEIGHT)


def blend(primary: list[Article], secondary: list[Article], target: int = PAGE_SIZE) -> list[Article]:
    primary_count = min(len(primary), primary_quota(target))
    secondary_count = min(len(secondary), target - primary_count)
    blended = primary[:primary_count] + secondary[:secondary_count]
    return sort_by_recency(blended)


def _safe_fetch(fetch: LocaleFetcher, locale: str) -> list[Article]:
    try:
        return list(fetch(locale))
    except Exception as exc:  # noqa: BLE001
        log.warning('Locale %s fetch failed, contributing no articles: %s', locale, exc)
        return []


def build_hybrid_feed(
    primary_locale: str,
    secondary_locales: Iterable[str],
    fetch: LocaleFetcher,
    target: int = PAGE_SIZE,
    max_workers: int | None = None,
) -> list[Article]:
    secondary_locales = list(secondary_locales)
    locales = [primary_locale, *secondary_locales]
    with ThreadPoolExecutor(max_workers=max_workers or len(locales)) as pool:
        primary_future = pool.submit(fetch, primary_locale)
        secondary_futures = [pool.submit(_safe_fetch, fetch, locale) for locale in secondary_locales]
        secondary_batches = [future.result() for future in secondary_futures]
        primary_articles = primary_future.result()

    secondary_articles = [article for batch in secondary_batches for article in batch]
    seen: set[str] = set()
    primary_unique = dedupe_articles(primary_articles, seen)
    secondary_unique = dedupe_articles(secondary_articles, seen)
    log.debug(
        'Hybrid feed %s: %d primary, %d secondary unique article(s).',
        primary_locale,
        len(primary_unique),
        len(secondary_unique),
    )
    return blend(primary_unique, secondary_unique, target=target)
