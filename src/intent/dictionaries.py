"""English dictionaries for genres and request phrasing.

These mappings are used by the rules-based parser and should remain small and deterministic.
Canonical genre labels are the values later mapped to movie-database genre ids.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

SCIENCE_FICTION = "science fiction"

# Declaration order is the tie-break when several aliases occur in one message.
GENRE_ALIASES: tuple[tuple[str, str], ...] = (
    ("action", "action"),
    ("adventure", "adventure"),
    ("animation", "animation"),
    ("comedy", "comedy"),
    ("crime", "crime"),
    ("documentary", "documentary"),
    ("drama", "drama"),
    ("family", "family"),
    ("fantasy", "fantasy"),
    ("history", "history"),
    ("horror", "horror"),
    ("music", "music"),
    ("mystery", "mystery"),
    ("romance", "romance"),
    ("scifi", SCIENCE_FICTION),
    ("sci-fi", SCIENCE_FICTION),
    ("science fiction", SCIENCE_FICTION),
    ("thriller", "thriller"),
    ("war", "war"),
    ("western", "western"),
)

CANONICAL_GENRES: frozenset[str] = frozenset(canonical for _, canonical in GENRE_ALIASES)

# Multi-word genres are checked as plain substrings before the alias scan.
MULTI_WORD_GENRES: tuple[str, ...] = (SCIENCE_FICTION,)

DISCOVERY_TERMS: tuple[str, ...] = (
    "find",
    "show",
    "recommend",
    "suggest",
    "give me",
    "any",
    "looking for",
)


@dataclass(frozen=True)
class GenreAlias:
    """A free-text alias compiled into a whole-word pattern."""

    alias: str
    canonical: str
    pattern: re.Pattern[str]


_GENRE_MATCHES: tuple[GenreAlias, ...] = tuple(
    GenreAlias(alias=alias, canonical=canonical, pattern=re.compile(rf"\b{re.escape(alias)}\b"))
    for alias, canonical in GENRE_ALIASES
)


def detect_genre(text: str) -> str | None:
    """Detect the canonical genre mentioned in the text (case-insensitive, whole word)."""

    lowered = (text or "").lower()

    for phrase in MULTI_WORD_GENRES:
        if phrase in lowered:
            return phrase

    for match in _GENRE_MATCHES:
        if match.pattern.search(lowered):
            return match.canonical
    return None
