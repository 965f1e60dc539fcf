"""Tests for the Intent Pydantic union and its per-variant invariants."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.intent.schema import (
    DetailsFollowup,
    FindByActorLead,
    FindByGenreAndRating,
    FindByTitle,
    FindByYear,
    IntentName,
    intent_from_obj,
    intent_to_payload,
)


def test_year_and_range_are_exclusive() -> None:
    with pytest.raises(ValueError):
        FindByGenreAndRating(year=2015, year_range=(2015, 2020))


def test_year_range_must_be_ordered() -> None:
    with pytest.raises(ValueError):
        FindByYear(year_range=(2020, 2015))


def test_rating_bounds() -> None:
    with pytest.raises(ValueError):
        FindByGenreAndRating(min_rating=10.5)
    with pytest.raises(ValueError):
        FindByGenreAndRating(min_rating=-1)


def test_title_intent_forbids_filters() -> None:
    with pytest.raises(ValueError):
        FindByTitle(title="Inception", genre="comedy")


def test_followup_forbids_filters() -> None:
    with pytest.raises(ValueError):
        DetailsFollowup(year=2010)


def test_actor_intent_requires_actor() -> None:
    with pytest.raises(ValueError):
        FindByActorLead(genre="comedy")
    with pytest.raises(ValueError):
        FindByActorLead(actor="Tom Hanks", title="Big")


def test_year_intent_forbids_genre_and_rating() -> None:
    with pytest.raises(ValueError):
        FindByYear(year=2000, genre="drama")
    with pytest.raises(ValueError):
        FindByYear(year=2000, min_rating=7.0)


def test_intents_are_immutable() -> None:
    intent = FindByTitle(title="Inception")
    with pytest.raises(ValidationError):
        intent.title = "Tenet"  # type: ignore[misc]


def test_intent_from_obj_dispatches_on_name() -> None:
    intent = intent_from_obj(
        {"name": "find_by_actor_lead", "actor": "Tom Hanks", "year_range": [2001, 2005]}
    )
    assert isinstance(intent, FindByActorLead)
    assert intent.name == IntentName.find_by_actor_lead
    assert intent.year_range == (2001, 2005)


def test_intent_from_obj_rejects_unknown_name_and_fields() -> None:
    with pytest.raises(ValueError):
        intent_from_obj({"name": "find_by_director"})
    with pytest.raises(ValueError):
        intent_from_obj({"name": "find_by_title", "director": "Nolan"})


def test_payload_keeps_nulls_and_lists_range() -> None:
    payload = intent_to_payload(FindByYear(year_range=(1990, 1999)))
    assert payload == {
        "name": "find_by_year",
        "genre": None,
        "min_rating": None,
        "year": None,
        "year_range": [1990, 1999],
        "actor": None,
        "title": None,
    }


def test_payload_round_trips_through_intent_from_obj() -> None:
    intent = FindByGenreAndRating(genre="comedy", min_rating=7.5, year_range=(2015, 2020))
    assert intent_from_obj(intent_to_payload(intent)) == intent
