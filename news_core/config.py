##########################################################################################
#
# Script name: config.py
#
# Description: Static configuration, category taxonomy and environment settings for the
#              news aggregation core.
#
##########################################################################################

import os
from dataclasses import dataclass, field


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

CATEGORIES = (
    'all',
    'breaking',
    'ghana',
    'akora',
    'school',
    'world',
    'business',
    'technology',
    'science',
    'health',
    'sports',
    'entertainment',
    'politics',
    'education',
    'environment',
    'travel',
    'food',
    'lifestyle',
    'culture',
)

DEFAULT_CATEGORY = 'world'
LOCAL_CATEGORY = 'ghana'

PAGE_SIZE = 20
BREAKING_PAGE_SIZE = 5
TRENDING_COUNT = 5
PRIMARY_WEIGHT = 0.6

CACHE_TTL_MS = 5 * 60 * 1000
CACHE_KEY_PREFIX = 'news_cache_'
FAVORITE_CATEGORIES_KEY = 'news_favorite_categories'
MUTED_SOURCES_KEY = 'news_muted_sources'

SUMMARY_MAX_CHARS = 320
WORDS_PER_MINUTE = 200

FEED_TIMEOUT_SECONDS = 7.0
PROVIDER_TIMEOUT_SECONDS = 10.0
USER_AGENT = 'news-core/1.0 (+https://github.com/)'

DEFAULT_NEWS_IMAGE = (
    'https://images.unsplash.com/photo-1504711434969-e33886168f5c?w=800&auto=format&fit=crop&q=60'
)
DEFAULT_API_BASE = 'https://newsapi.org/v2'
DEFAULT_PRIMARY_COUNTRY = 'gh'
DEFAULT_SECONDARY_COUNTRIES = 'us,gb,ng'

# Order matters: the first rule with a hit decides the category.
CATEGORY_RULES = (
    ('sports', ('sport', 'football', 'basketball')),
    ('technology', ('tech', 'ai', 'software')),
    ('business', ('business', 'economy', 'market')),
    ('health', ('health', 'medical', 'covid')),
    ('science', ('science', 'research', 'study')),
    ('entertainment', ('entertainment', 'movie', 'music')),
)


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip().lower() for part in (value or '').split(',') if part.strip())


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    api_key: str = ''
    api_base: str = DEFAULT_API_BASE
    primary_country: str = DEFAULT_PRIMARY_COUNTRY
    secondary_countries: tuple[str, ...] = field(
        default_factory=lambda: _split_csv(DEFAULT_SECONDARY_COUNTRIES)
    )
    sources_file: str | None = None
    cache_db: str | None = None
    provider_timeout: float = PROVIDER_TIMEOUT_SECONDS
    feed_timeout: float = FEED_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            api_key=(os.getenv('NEWS_API_KEY') or '').strip(),
            api_base=(os.getenv('NEWS_API_BASE') or DEFAULT_API_BASE).rstrip('/'),
            primary_country=(os.getenv('NEWS_PRIMARY_COUNTRY') or DEFAULT_PRIMARY_COUNTRY).strip().lower(),
            secondary_countries=_split_csv(
                os.getenv('NEWS_SECONDARY_COUNTRIES') or DEFAULT_SECONDARY_COUNTRIES
            ),
            sources_file=os.getenv('NEWS_SOURCES_FILE') or None,
            cache_db=os.getenv('NEWS_CACHE_DB') or None,
            provider_timeout=_env_float('NEWS_HTTP_TIMEOUT', PROVIDER_TIMEOUT_SECONDS),
            feed_timeout=_env_float('NEWS_FEED_TIMEOUT', FEED_TIMEOUT_SECONDS),
        )
