##########################################################################################
#
# Script name: conftest.py
#
# Description: Shared fixtures: an offline stand-in for requests sessions and sample data.
#
##########################################################################################

import json

import pytest
import requests

from news_core.models import Article, ArticleSource


class FakeResponse:
    def __init__(self, status_code=200, content=b'', payload=None):
        self.status_code = status_code
        self.content = content if isinstance(content, bytes) else content.encode('utf-8')
        self._payload = payload

    @property
    def text(self):
        return self.content.decode('utf-8')

    def json(self):
        if self._payload is not None:
            return self._payload
        return json.loads(self.text)


class FakeSession:
    '''
    Routes GET requests by URL to canned responses or exceptions, recording every call.
    '''
    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, params=None, timeout=None, headers=None):
        self.calls.append({'url': url, 'params': dict(params or {}), 'timeout': timeout})
        route = self.routes.get(url)
        if callable(route):
            route = route(params or {})
        if route is None:
            raise requests.ConnectionError(f'no route for {url}')
        if isinstance(route, Exception):
            raise route
        return route

    @property
    def urls(self):
        return [call['url'] for call in self.calls]


def make_article(article_id, published_at='2026-10-01T12:00:00Z', url=None, category='world'):
    return Article(
        id=article_id,
        title=f'Title {article_id}',
        url=url or f'https://example.com/{article_id}',
        source=ArticleSource(id='test', name='Test Source'),
        published_at=published_at,
        category=category,
    )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def response():
    return FakeResponse
