"""Slot extraction from sanitized chat text.

Every extractor is total: it never raises and returns `None` when the slot is absent. Rating,
year and genre are read from the lowercased text; titles and actor names depend on
capitalization and are read from the original-case text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from src.intent.dates import extract_year, extract_year_range
from src.intent.dictionaries import detect_genre
from src.intent.normalize import DEFAULT_MAX_LEN, sanitize_text

MIN_RATING = 0.0
MAX_RATING = 10.0
MIN_SLOT_LEN = 2

# Latin-1 aware letter classes so accented names ("Penélope Cruz", "Ødegaard") match.
_UPPER = "A-ZÀ-ÖØ-Þ"
_LETTER = "A-Za-zÀ-ÖØ-öø-ÿ"

_COMMA_DECIMAL_RE = re.compile(r"(\d),(\d)")

# Up to three integer digits with optional decimals, never the head of a longer number (years).
_NUMBER = r"(?P<value>\d{1,3}(?:\.\d+)?)(?!\d)"

_RATING_RES: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\b(?:over|min(?:imum)?)\s*{_NUMBER}"),
    re.compile(rf"\b(?:rating|score)\s*{_NUMBER}"),
    re.compile(r"\b(?P<value>\d{1,3}(?:\.\d+)?)\s*\+"),
)

_DOUBLE_QUOTED_RE = re.compile(r"[\"“](.+?)[\"”]")
_SINGLE_QUOTED_RE = re.compile(r"'(.*?)'")

_TITLE_PHRASE = rf"[{_UPPER}][\w\s:'-]+"
_TITLE_HINT_RES: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\b(?i:tell me about)\s+(?P<title>{_TITLE_PHRASE})"),
    re.compile(rf"\b(?i:what(?:['’]s|\s+is)?)\s+(?P<title>{_TITLE_PHRASE})\s+(?i:about)\b"),
)
_TITLE_FILLER_RE = re.compile(r"\s+(?:please|thanks?)\b.*$", flags=re.IGNORECASE)

_NAME = rf"[{_UPPER}][{_LETTER}.'-]+(?:\s+[{_UPPER}][{_LETTER}.'-]+)*"
_ACTOR_RES: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\bstarring\s+(?P<name>{_NAME})"),
    re.compile(rf"\bwith\s+(?P<name>{_NAME})"),
    re.compile(rf"\bfeaturing\s+(?P<name>{_NAME})"),
    re.compile(rf"\bstar(?:ring)?\s+(?P<name>{_NAME})"),
)


@dataclass(frozen=True)
class SlotBag:
    """All slots extracted from one message."""

    clean_text: str
    lower_text: str
    min_rating: float | None = None
    year: int | None = None
    year_range: tuple[int, int] | None = None
    genre: str | None = None
    title: str | None = None
    actor: str | None = None


def _clamp_rating(value: float) -> float:
    return max(MIN_RATING, min(MAX_RATING, value))


def extract_rating(text: str) -> float | None:
    """Extract a minimum rating threshold.

    Understands:
        - "over 7", "over 7.5", "over 7,5"
        - "min 8", "minimum 8"
        - "rating 8", "score 8"
        - "7+", "7.5+", "7,5+"

    Numbers have at most three integer digits, so a four-digit year is never read as a rating.
    Returns a float clamped into [0, 10] ("over 100" -> 10.0), or `None`.
    """

    normalized = _COMMA_DECIMAL_RE.sub(r"\1.\2", (text or "").lower())

    for pattern in _RATING_RES:
        match = pattern.search(normalized)
        if match:
            return _clamp_rating(float(match.group("value")))
    return None


def _long_enough(value: str) -> str | None:
    value = value.strip()
    return value if len(value) >= MIN_SLOT_LEN else None


def extract_quoted_title(text: str) -> str | None:
    """Extract a title inside quotes: "Inception", “Inception” or 'The Matrix'."""

    for pattern in (_DOUBLE_QUOTED_RE, _SINGLE_QUOTED_RE):
        match = pattern.search(text or "")
        if match:
            return _long_enough(match.group(1))
    return None


def extract_title_hint(text: str) -> str | None:
    """Extract an unquoted, capitalized title.

    Recognized phrasing: "tell me about Inception", "what is Interstellar about".
    """

    for pattern in _TITLE_HINT_RES:
        match = pattern.search(text or "")
        if match:
            title = _TITLE_FILLER_RE.sub("", match.group("title").strip())
            return _long_enough(title)
    return None


def extract_actor(text: str) -> str | None:
    """Extract a capitalized actor name after "starring", "with", "featuring" or "star"."""

    for pattern in _ACTOR_RES:
        match = pattern.search(text or "")
        if match:
            name = _long_enough(match.group("name"))
            if name is not None:
                return name
    return None


def extract_slots(raw_text: str, *, max_len: int = DEFAULT_MAX_LEN) -> SlotBag:
    """Sanitize the input and extract every slot from it."""

    clean = sanitize_text(raw_text, max_len)
    lower = clean.lower()

    year_range = extract_year_range(lower)
    # A detected range wins; the single-year slot is never filled from the same text.
    year = None if year_range is not None else extract_year(lower)

    return SlotBag(
        clean_text=clean,
        lower_text=lower,
        min_rating=extract_rating(lower),
        year=year,
        year_range=year_range,
        genre=detect_genre(lower),
        title=extract_quoted_title(clean) or extract_title_hint(clean),
        actor=extract_actor(clean),
    )
