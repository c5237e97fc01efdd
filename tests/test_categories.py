##########################################################################################
#
# Script name: test_categories.py
#
# Description: Keyword category inference and its rule order.
#
##########################################################################################

import pytest

from news_core.categories import infer_category
from news_core.config import CATEGORY_RULES


def test_rule_order_is_pinned() -> None:
    assert [category for category, _ in CATEGORY_RULES] == [
        'sports',
        'technology',
        'business',
        'health',
        'science',
        'entertainment',
    ]


def test_sports_rule_precedes_technology_rule() -> None:
    assert infer_category('New AI chip breaks football record', '') == 'sports'


@pytest.mark.parametrize(
    'title,description,expected',
    [
        ('Software update ships', '', 'technology'),
        ('Market rally continues', 'Investors cheer', 'business'),
        ('Hospital expands', 'New medical wing opens', 'health'),
        ('New study of whales', '', 'science'),
        ('Movie premiere tonight', '', 'entertainment'),
        ('Election results announced', 'Voters turned out', 'world'),
        ('BASKETBALL finals', '', 'sports'),
    ],
)
def test_first_matching_rule_wins(title: str, description: str, expected: str) -> None:
    assert infer_category(title, description) == expected


def test_matches_substrings_of_words() -> None:
    # "said" contains "ai"
    assert infer_category('Minister said nothing', None) == 'technology'


def test_missing_text_defaults_to_world() -> None:
    assert infer_category(None, None) == 'world'
