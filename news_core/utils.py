from __future__ import annotations

import html
import math
import re
import time
from datetime import datetime, timezone
from typing import Any, Iterable, TypeVar, Union

from dateutil import parser as date_parser

from .config import WORDS_PER_MINUTE


T = TypeVar('T')

# Parsed XML and JSON fields may hold a single value or a list of them.
OneOrMany = Union[T, list[T], tuple[T, ...], None]

SCRIPT_STYLE_RE = re.compile(r'<(script|style)[^>]*>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)
TAG_RE = re.compile(r'<[^>]+>')
IMG_SRC_RE = re.compile(r'<img[^>]+src=["\']?([^"\'>\s]+)["\']?', re.IGNORECASE)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def now_ms() -> int:
    return int(time.time() * 1000)


def to_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def parse_timestamp(value: Any) -> datetime | None:
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        if value > 1_000_000_000_000:
            value = value / 1000.0
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (ValueError, OverflowError, OSError):
            return None
    else:
        try:
            parsed = date_parser.parse(str(value))
        except (ValueError, TypeError, OverflowError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def iso_or_now(value: Any) -> str:
    parsed = parse_timestamp(value)
    return to_iso(parsed or utc_now())


def as_list(value: OneOrMany[T]) -> list[T]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def normalize_whitespace(value: str) -> str:
    return re.sub(r'\s+', ' ', value or '').strip()


def decode_entities(value: str) -> str:
    return normalize_whitespace(html.unescape(value or ''))


def strip_html(value: str) -> str:
    text = SCRIPT_STYLE_RE.sub(' ', value or '')
    text = TAG_RE.sub(' ', text)
    text = html.unescape(text)
    return normalize_whitespace(text)


def truncate(value: str, max_chars: int) -> str:
    return value[:max_chars].rstrip() if len(value) > max_chars else value


def first_image_src(markup: str) -> str:
    match = IMG_SRC_RE.search(markup or '')
    return match.group(1) if match else ''


def word_count(text: str) -> int:
    return len(normalize_whitespace(text).split()) if text else 0


def read_time_minutes(text: str) -> int:
    return max(1, math.ceil(word_count(text) / WORDS_PER_MINUTE))


def unique_strings(values: Iterable[Any]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for value in values:
        if not isinstance(value, str) or value in seen:
            continue
        seen.add(value)
        unique.append(value)
    return unique
