##########################################################################################
#
# Script name: test_fallback.py
#
# Description: Sample article tables served in place of the headline provider.
#
##########################################################################################

import random

from news_core.fallback import StaticFallbackProvider


def _provider() -> StaticFallbackProvider:
    return StaticFallbackProvider(rng=random.Random(3))


def test_technology_set_has_two_tagged_articles() -> None:
    articles = _provider().fetch_top_headlines(category='technology')
    assert [article.id for article in articles] == ['mock-technology-0', 'mock-technology-1']
    assert {article.category for article in articles} == {'technology'}
    assert {article.source_type for article in articles} == {'mock'}
    assert articles[0].published_dt > articles[1].published_dt


def test_unknown_category_reads_world_table_with_requested_ids() -> None:
    articles = _provider().fetch_by_category('gossip')
    assert [article.id for article in articles] == ['mock-gossip-0']
    assert articles[0].category == 'world'
    assert articles[0].title == _provider().fetch_by_category('world')[0].title


def test_breaking_requests_return_fixed_breaking_set() -> None:
    provider = _provider()
    expected = ['breaking-1', 'breaking-2']
    assert [article.id for article in provider.fetch_breaking('gh')] == expected
    assert [article.id for article in provider.fetch_top_headlines(country='gh', is_breaking=True)] == expected
    assert [article.id for article in provider.fetch_by_category('breaking')] == expected
    assert all(article.is_breaking for article in provider.fetch_breaking())


def test_search_mirrors_client_contract() -> None:
    provider = _provider()
    assert provider.search_articles('  ') == []
    assert [article.id for article in provider.search_articles('cocoa', 'health')] == ['mock-health-0']
