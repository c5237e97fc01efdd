##########################################################################################
#
# Script name: categories.py
#
# Description: Keyword heuristic assigning a topic category to provider articles.
#
##########################################################################################

from .config import CATEGORY_RULES, DEFAULT_CATEGORY


# ****************************************************************************************
# Functions
# ****************************************************************************************


def infer_category(title: str | None, description: str | None) -> str:
    text_blob = f'{title or ""} {description or ""}'.lower()
    for category, keywords in CATEGORY_RULES:
        if any(keyword in text_blob for keyword in keywords):
            return category
    return DEFAULT_CATEGORY
