##########################################################################################
#
# Script name: registry.py
#
# Description: Registry of publisher feed sources, each with ordered candidate endpoints.
#
##########################################################################################

import logging
import os

import yaml

from .models import FeedSource


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

log = logging.getLogger(__name__)

# Publishers move their feeds around; candidates are tried in order.
DEFAULT_SOURCES = (
    FeedSource(
        id='myjoyonline',
        name='MyJoyOnline',
        site_url='https://www.myjoyonline.com',
        logo='https://www.myjoyonline.com/wp-content/uploads/2020/02/joy-logo.png',
        feeds=(
            'https://www.myjoyonline.com/feed/',
            'https://www.myjoyonline.com/news/feed/',
        ),
    ),
    FeedSource(
        id='citinewsroom',
        name='Citi Newsroom',
        site_url='https://citinewsroom.com',
        logo='https://citinewsroom.com/wp-content/uploads/2019/07/citinewsroom-logo.png',
        feeds=(
            'https://citinewsroom.com/feed/',
            'https://citinewsroom.com/category/news/feed/',
        ),
    ),
    FeedSource(
        id='graphic',
        name='Graphic Online',
        site_url='https://www.graphic.com.gh',
        feeds=(
            'https://www.graphic.com.gh/news.feed?type=rss',
            'https://www.graphic.com.gh/news/general-news.feed?type=rss',
        ),
    ),
    FeedSource(
        id='ghanaweb',
        name='GhanaWeb',
        site_url='https://www.ghanaweb.com',
        feeds=(
            'https://www.ghanaweb.com/GhanaHomePage/NewsArchive/rss.xml',
            'https://www.ghanaweb.com/rss/news.xml',
        ),
    ),
    FeedSource(
        id='3news',
        name='3News',
        site_url='https://3news.com',
        feeds=(
            'https://3news.com/feed/',
            'https://3news.com/news/feed/',
        ),
    ),
    FeedSource(
        id='pulsegh',
        name='Pulse Ghana',
        site_url='https://www.pulse.com.gh',
        feeds=(
            'https://www.pulse.com.gh/rss',
            'https://www.pulse.com.gh/news/rss',
        ),
    ),
)


# ****************************************************************************************
# Functions
# ****************************************************************************************


def _build_source(entry: dict, idx: int) -> FeedSource | None:
    source_id = str(entry.get('id') or '').strip()
    feeds = entry.get('feeds') or entry.get('rss') or []
    if isinstance(feeds, str):
        feeds = [feeds]
    feeds = tuple(str(url).strip() for url in feeds if str(url).strip())
    if not source_id:
        log.warning('Source entry %d is missing an id; skipping.', idx)
        return None
    if not feeds:
        log.warning('Source %s has no candidate feed endpoints; skipping.', source_id)
        return None
    return FeedSource(
        id=source_id,
        name=str(entry.get('name') or source_id),
        site_url=str(entry.get('site_url') or entry.get('siteUrl') or ''),
        feeds=feeds,
        logo=entry.get('logo') or None,
    )


def load_source_config(path: str) -> list[FeedSource]:
    with open(path, 'r', encoding='utf-8') as handle:
        payload = yaml.safe_load(handle) or {}
    entries = payload.get('sources', [])
    if not isinstance(entries, list):
        raise ValueError('config.sources must be a list')
    sources: list[FeedSource] = []
    seen: set[str] = set()
    for idx, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            log.warning('Source entry %d is not a mapping; skipping.', idx)
            continue
        source = _build_source(entry, idx)
        if source is None or source.id in seen:
            continue
        seen.add(source.id)
        sources.append(source)
    log.info('Loaded %d feed source(s) from %s.', len(sources), path)
    return sources


def list_sources(path: str | None = None) -> list[FeedSource]:
    if path and os.path.exists(path):
        return load_source_config(path)
    if path:
        log.warning('Feed source file %s not found; using built-in registry.', path)
    return list(DEFAULT_SOURCES)
