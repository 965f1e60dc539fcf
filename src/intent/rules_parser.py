"""Rules-based English intent router for the movie chat.

The router is deterministic and total:
    - it extracts every slot independently (see `src.intent.slots`),
    - it applies an ordered list of rules, the first match wins,
    - when nothing matches it still returns a best-effort discovery intent.

Rule order is significant. A message mentioning both a title phrase and an actor resolves to
`find_by_title` because the title rule is evaluated first.
"""

from __future__ import annotations

import logging
import re

from src.intent.dictionaries import DISCOVERY_TERMS
from src.intent.normalize import DEFAULT_MAX_LEN
from src.intent.schema import (
    DEFAULT_MIN_RATING,
    DetailsFollowup,
    FindByActorLead,
    FindByGenreAndRating,
    FindByTitle,
    FindByYear,
    Intent,
)
from src.intent.slots import SlotBag, extract_slots

logger = logging.getLogger(__name__)

# "what's it about" is a follow-up on the movie under discussion, not a title request.
_REFERENT_SUBJECTS: frozenset[str] = frozenset({"it"})

_WHAT = r"what(?:['’]s|\s+is)?"

_TELL_ME_ABOUT_RE = re.compile(r"\btell me about\b")
_PLOT_OF_RE = re.compile(r"\bplot of\b")
_WHAT_ABOUT_RE = re.compile(rf"\b{_WHAT}\s+(?P<subject>.+?)\s+about\b")

_FOLLOWUP_RE = re.compile(
    rf"\b(?:{_WHAT}\s+it\s+about|who directed it|tell me more|details|more info)\b"
)

_DISCOVERY_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(term) for term in DISCOVERY_TERMS) + r")\b"
)


def _asks_what_subject_is_about(text: str) -> bool:
    return any(
        match.group("subject").strip() not in _REFERENT_SUBJECTS
        for match in _WHAT_ABOUT_RE.finditer(text)
    )


def looks_like_find_by_title(text: str, title: str | None) -> bool:
    """Whether the message asks about one specific movie (explicit title or "about" phrasing)."""

    if title is not None:
        return True
    return (
            _TELL_ME_ABOUT_RE.search(text) is not None
            or _PLOT_OF_RE.search(text) is not None
            or _asks_what_subject_is_about(text)
    )


def looks_like_details_followup(text: str) -> bool:
    """Whether the message follows up on the last movie ("what's it about?", "tell me more")."""

    return _FOLLOWUP_RE.search(text) is not None


def looks_like_discovery(text: str) -> bool:
    """Whether the message asks for a list of movies ("find", "show", "recommend", ...)."""

    return _DISCOVERY_RE.search(text) is not None


def _route(slots: SlotBag) -> Intent:
    text = slots.lower_text
    has_year_filter = slots.year is not None or slots.year_range is not None

    if looks_like_find_by_title(text, slots.title):
        return FindByTitle(title=slots.title)

    if slots.actor is not None:
        return FindByActorLead(
            genre=slots.genre,
            min_rating=slots.min_rating,
            year=slots.year,
            year_range=slots.year_range,
            actor=slots.actor,
        )

    if looks_like_details_followup(text):
        # Title may be null; the caller resolves "it" from its own conversation state.
        return DetailsFollowup(title=slots.title)

    discovery = looks_like_discovery(text)

    if discovery and (slots.genre is not None or slots.min_rating is not None or has_year_filter):
        return FindByGenreAndRating(
            genre=slots.genre,
            # A bare "find a comedy" means "find a good comedy".
            min_rating=slots.min_rating if slots.min_rating is not None else DEFAULT_MIN_RATING,
            year=slots.year,
            year_range=slots.year_range,
        )

    if discovery and slots.genre is None and slots.min_rating is None and has_year_filter:
        return FindByYear(year=slots.year, year_range=slots.year_range)

    # Low-confidence catch-all: slots pass through untouched, no rating default.
    return FindByGenreAndRating(
        genre=slots.genre,
        min_rating=slots.min_rating,
        year=slots.year,
        year_range=slots.year_range,
        actor=slots.actor,
        title=slots.title,
    )


def classify(text: str, *, max_len: int = DEFAULT_MAX_LEN) -> Intent:
    """Classify a raw chat message into exactly one intent.

    The input is sanitized internally, so callers may pass raw user text.
    """

    slots = extract_slots(text, max_len=max_len)
    intent = _route(slots)
    logger.debug(
        "classified name=%s genre=%s min_rating=%s year=%s year_range=%s actor=%s title=%s",
        intent.name,
        intent.genre,
        intent.min_rating,
        intent.year,
        intent.year_range,
        intent.actor,
        intent.title,
    )
    return intent
