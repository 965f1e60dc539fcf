"""Tests for rating, title and actor slot extraction."""

from __future__ import annotations

import pytest

from src.intent.slots import (
    extract_actor,
    extract_quoted_title,
    extract_rating,
    extract_slots,
    extract_title_hint,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("over 7", 7.0),
        ("over 7.5", 7.5),
        ("over 7,5", 7.5),
        ("min 8", 8.0),
        ("minimum 6.5", 6.5),
        ("rating 8", 8.0),
        ("Score 9", 9.0),
        ("7+", 7.0),
        ("7,5+ please", 7.5),
        ("Over 8", 8.0),
    ],
)
def test_extract_rating_patterns(text: str, expected: float) -> None:
    assert extract_rating(text) == expected


def test_extract_rating_pattern_priority() -> None:
    # "over" is tried before "rating", which is tried before "N+".
    assert extract_rating("rating 6 or over 8") == 8.0
    assert extract_rating("9+ with rating 5") == 5.0


def test_extract_rating_clamps_to_ten() -> None:
    assert extract_rating("over 12") == 10.0
    assert extract_rating("rating 99") == 10.0
    assert extract_rating("15+") == 10.0


def test_extract_rating_never_reads_years() -> None:
    assert extract_rating("comedies over 2010") is None
    assert extract_rating("movies from 2015+") is None


def test_extract_rating_absent() -> None:
    assert extract_rating("find a comedy") is None
    assert extract_rating("") is None


def test_extract_quoted_title() -> None:
    assert extract_quoted_title('Tell me about "Inception"') == "Inception"
    assert extract_quoted_title("Tell me about “Le Fabuleux Destin d’Amélie”") == (
        "Le Fabuleux Destin d’Amélie"
    )
    assert extract_quoted_title("Tell me about 'The Matrix'") == "The Matrix"
    assert extract_quoted_title('Tell me about "  Up  "') == "Up"


def test_extract_quoted_title_prefers_double_quotes() -> None:
    assert extract_quoted_title("'Heat' or \"Ronin\"") == "Ronin"


def test_extract_quoted_title_rejects_short_or_missing() -> None:
    assert extract_quoted_title('about "X"') is None
    assert extract_quoted_title("What's Interstellar about") is None
    assert extract_quoted_title("no quotes") is None


def test_extract_title_hint() -> None:
    assert extract_title_hint("Tell me about Inception") == "Inception"
    assert extract_title_hint("tell me about Star Wars: A New Hope") == "Star Wars: A New Hope"
    assert extract_title_hint("What's Interstellar about") == "Interstellar"
    assert extract_title_hint("What is The Matrix about?") == "The Matrix"


def test_extract_title_hint_cuts_trailing_filler() -> None:
    assert extract_title_hint("Tell me about Inception please") == "Inception"
    assert extract_title_hint("Tell me about Inception thanks a lot") == "Inception"
    assert extract_title_hint("Tell me about Inception Thank you") == "Inception"


def test_extract_title_hint_requires_capitalized_phrase() -> None:
    assert extract_title_hint("tell me about it") is None
    assert extract_title_hint("what's it about") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Find a movie starring Tom Hanks", "Tom Hanks"),
        ("comedy with Jim Carrey from 1994", "Jim Carrey"),
        ("something featuring Samuel L. Jackson", "Samuel L. Jackson"),
        ("films that star Meryl Streep", "Meryl Streep"),
        ("drama starring Penélope Cruz", "Penélope Cruz"),
        ("starring Lupita Nyong'o", "Lupita Nyong'o"),
    ],
)
def test_extract_actor(text: str, expected: str) -> None:
    assert extract_actor(text) == expected


def test_extract_actor_pattern_order() -> None:
    assert extract_actor("with Tom Hanks starring Meg Ryan") == "Meg Ryan"


def test_extract_actor_requires_capitalized_name() -> None:
    assert extract_actor("find a movie with my friends") is None
    assert extract_actor("starring tom hanks") is None


def test_extract_slots_prefers_range_over_year() -> None:
    slots = extract_slots("Find a comedy over 7.5 from 2015 to 2020")
    assert slots.year_range == (2015, 2020)
    assert slots.year is None
    assert slots.min_rating == 7.5
    assert slots.genre == "comedy"
    assert slots.clean_text == "Find a comedy over 7.5 from 2015 to 2020"
    assert slots.lower_text == "find a comedy over 7.5 from 2015 to 2020"


def test_extract_slots_single_year() -> None:
    slots = extract_slots("Find movies from 2020")
    assert slots.year == 2020
    assert slots.year_range is None


def test_extract_slots_title_falls_back_to_hint() -> None:
    assert extract_slots('Tell me about "Inception"').title == "Inception"
    assert extract_slots("Tell me about Inception").title == "Inception"


def test_extract_rating_clamps_three_digit_numbers() -> None:
    assert extract_rating("over 100") == 10.0
    assert extract_rating("100+") == 10.0
    assert extract_rating("score 250") == 10.0
