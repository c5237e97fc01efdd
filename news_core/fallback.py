##########################################################################################
#
# Script name: fallback.py
#
# Description: Static sample articles served when the headline provider is unconfigured
#              or unavailable.
#
##########################################################################################

import random
from datetime import timedelta

from .config import DEFAULT_CATEGORY, DEFAULT_NEWS_IMAGE
from .models import Article, ArticleSource
from .utils import to_iso, utc_now


# ****************************************************************************************
# Global data and configuration
# ****************************************************************************************

MOCK_ARTICLES = {
    'ghana': [
        (
            'Accra Tech Hub Announces New Startup Accelerator',
            'A new wave of funding and mentorship for Ghanaian founders',
            'https://images.unsplash.com/photo-1521737604893-d14cc237f11d?w=800&auto=format&fit=crop&q=60',
        ),
        (
            'Ghana Premier League: Weekend Highlights',
            'Thrilling matches and standout performances across the league',
            'https://images.unsplash.com/photo-1461896836934-ffe607ba8211?w=800&auto=format&fit=crop&q=60',
        ),
    ],
    'technology': [
        (
            'AI Revolution: New Language Model Surpasses Human Performance',
            'Latest AI model shows unprecedented capabilities in natural language understanding',
            'https://images.unsplash.com/photo-1677442136019-21780ecad995?w=800&auto=format&fit=crop&q=60',
        ),
        (
            'Smartphone Innovation: Foldable Displays Become Mainstream',
            'Major manufacturers announce new lineup of foldable devices',
            'https://images.unsplash.com/photo-1592286927505-c0d6b5c63c7e?w=800&auto=format&fit=crop&q=60',
        ),
    ],
    'business': [
        (
            'Stock Market Hits Record High Amid Economic Recovery',
            'Major indices reach new peaks as economy shows strong growth',
            'https://images.unsplash.com/photo-1611974789855-9c2a0a7236a3?w=800&auto=format&fit=crop&q=60',
        ),
    ],
    'sports': [
        (
            'Championship Finals: Underdog Team Clinches Victory',
            'Historic upset as underdogs win championship in thrilling finish',
            'https://images.unsplash.com/photo-1461896836934-ffe607ba8211?w=800&auto=format&fit=crop&q=60',
        ),
    ],
    'health': [
        (
            'Medical Breakthrough: New Treatment Shows Promise',
            'Researchers develop innovative approach to treating chronic disease',
            'https://images.unsplash.com/photo-1576091160550-2173dba999ef?w=800&auto=format&fit=crop&q=60',
        ),
    ],
    'world': [
        (
            'International Cooperation Strengthens Global Security',
            'Nations unite on new framework for peace and stability',
            'https://images.unsplash.com/photo-1526304640581-d334cdbbf45e?w=800&auto=format&fit=crop&q=60',
        ),
    ],
}

BREAKING_ARTICLES = [
    {
        'id': 'breaking-1',
        'title': 'Breaking: Major Technology Breakthrough Announced',
        'description': 'Scientists unveil revolutionary quantum computing advancement',
        'content': (
            'In a groundbreaking announcement today, researchers have achieved a major milestone '
            'in quantum computing technology...'
        ),
        'url': 'https://example.com/breaking-1',
        'image_url': 'https://images.unsplash.com/photo-1635070041078-e363dbe005cb?w=800&auto=format&fit=crop&q=60',
        'source': ('tech-news', 'Tech News'),
        'author': 'Sarah Johnson',
        'category': 'technology',
        'read_time': 5,
        'counts': (15420, 892, 67, 234),
    },
    {
        'id': 'breaking-2',
        'title': 'Global Summit Reaches Historic Climate Agreement',
        'description': 'World leaders commit to ambitious carbon reduction targets',
        'content': (
            'After days of intense negotiations, leaders from around the world have reached a '
            'landmark agreement on climate action...'
        ),
        'url': 'https://example.com/breaking-2',
        'image_url': 'https://images.unsplash.com/photo-1611273426858-450d8e3c9fce?w=800&auto=format&fit=crop&q=60',
        'source': ('world-news', 'World News'),
        'author': 'Michael Chen',
        'category': 'environment',
        'read_time': 6,
        'counts': (23150, 1456, 128, 567),
    },
]


# ****************************************************************************************
# Classes
# ****************************************************************************************


class StaticFallbackProvider:
    '''
    Fixed sample articles behind the same fetch methods as HeadlineClient, so a
    caller can swap one for the other.
    '''

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def _category_articles(self, category: str) -> list[Article]:
        # Unknown categories read the world table but keep the requested name in the ids.
        rows = MOCK_ARTICLES.get(category, MOCK_ARTICLES[DEFAULT_CATEGORY])
        tagged = category if category in MOCK_ARTICLES else DEFAULT_CATEGORY
        now = utc_now()
        articles: list[Article] = []
        for idx, (title, description, image_url) in enumerate(rows):
            articles.append(
                Article(
                    id=f'mock-{category}-{idx}',
                    title=title,
                    description=description,
                    content=description,
                    url='https://example.com',
                    image_url=image_url or DEFAULT_NEWS_IMAGE,
                    published_at=to_iso(now - timedelta(hours=idx)),
                    source=ArticleSource(id='mock', name='News Source'),
                    category=tagged,
                    read_time_minutes=4,
                    source_type='mock',
                    view_count=self._rng.randint(1000, 10999),
                    like_count=self._rng.randint(50, 1049),
                    comment_count=self._rng.randint(5, 104),
                    share_count=self._rng.randint(10, 509),
                )
            )
        return articles

    def _breaking_articles(self) -> list[Article]:
        now = utc_now()
        articles: list[Article] = []
        for idx, row in enumerate(BREAKING_ARTICLES):
            source_id, source_name = row['source']
            views, likes, comments, shares = row['counts']
            articles.append(
                Article(
                    id=row['id'],
                    title=row['title'],
                    description=row['description'],
                    content=row['content'],
                    url=row['url'],
                    image_url=row['image_url'],
                    published_at=to_iso(now - timedelta(hours=idx)),
                    source=ArticleSource(id=source_id, name=source_name),
                    author=row['author'],
                    category=row['category'],
                    is_breaking=True,
                    read_time_minutes=row['read_time'],
                    source_type='mock',
                    view_count=views,
                    like_count=likes,
                    comment_count=comments,
                    share_count=shares,
                )
            )
        return articles

    def fetch_top_headlines(
        self,
        country: str | None = None,
        category: str | None = None,
        search_query: str | None = None,
        page_size: int | None = None,
        is_breaking: bool = False,
    ) -> list[Article]:
        if is_breaking or category == 'breaking':
            return self._breaking_articles()
        return self._category_articles(category or DEFAULT_CATEGORY)

    def search_articles(
        self,
        query: str,
        category: str | None = None,
        sort_by: str = 'publishedAt',
    ) -> list[Article]:
        if not (query or '').strip():
            return []
        return self._category_articles(category or DEFAULT_CATEGORY)

    def fetch_breaking(self, country: str | None = None) -> list[Article]:
        return self._breaking_articles()

    def fetch_by_category(self, category: str, primary_country: str | None = None) -> list[Article]:
        return self.fetch_top_headlines(category=category)
