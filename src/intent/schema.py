"""Intent JSON schema (Pydantic models).

This schema is the contract between the rules parser and whatever answers the user (the chat
handler today, a movie-database lookup later). An intent is a discriminated union over five
variants keyed by `name`; every variant carries the same fixed-shape payload with unused slots
explicitly null.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class IntentName(StrEnum):
    """Supported intent names."""

    find_by_genre_and_rating = "find_by_genre_and_rating"
    find_by_actor_lead = "find_by_actor_lead"
    find_by_title = "find_by_title"
    details_followup = "details_followup"
    find_by_year = "find_by_year"


DEFAULT_MIN_RATING = 7.0

YearRange = tuple[int, int]


class _IntentBase(BaseModel):
    """Shared slot payload and its cross-field invariants."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    genre: str | None = None
    min_rating: float | None = Field(default=None, ge=0.0, le=10.0)
    year: int | None = Field(default=None, ge=1900, le=2099)
    year_range: YearRange | None = None
    actor: str | None = None
    title: str | None = None

    @model_validator(mode="after")
    def validate_years(self) -> _IntentBase:
        """Validate that `year` and `year_range` are exclusive and the range is ordered."""

        if self.year is not None and self.year_range is not None:
            raise ValueError("year and year_range are mutually exclusive")
        if self.year_range is not None:
            start, end = self.year_range
            if start > end:
                raise ValueError("year_range start must be <= end")
            if not (1900 <= start <= 2099 and 1900 <= end <= 2099):
                raise ValueError("year_range bounds must be four-digit years")
        return self

    def _require_null(self, *fields: str) -> None:
        filled = [f for f in fields if getattr(self, f) is not None]
        if filled:
            name = getattr(self, "name", "?")
            raise ValueError(f"{', '.join(filled)} must be null for name={name}")


class FindByGenreAndRating(_IntentBase):
    """Discovery by filters; also the low-confidence catch-all."""

    name: Literal["find_by_genre_and_rating"] = "find_by_genre_and_rating"


class FindByActorLead(_IntentBase):
    """Movies featuring an actor, optionally narrowed by genre/rating/year."""

    name: Literal["find_by_actor_lead"] = "find_by_actor_lead"

    @model_validator(mode="after")
    def validate_shape(self) -> FindByActorLead:
        if self.actor is None:
            raise ValueError("actor is required for name=find_by_actor_lead")
        self._require_null("title")
        return self


class FindByTitle(_IntentBase):
    """Details about one specific movie (title may be missing when only the phrasing matched)."""

    name: Literal["find_by_title"] = "find_by_title"

    @model_validator(mode="after")
    def validate_shape(self) -> FindByTitle:
        self._require_null("genre", "min_rating", "year", "year_range", "actor")
        return self


class DetailsFollowup(_IntentBase):
    """A follow-up on the movie discussed previously; resolving "it" happens upstream."""

    name: Literal["details_followup"] = "details_followup"

    @model_validator(mode="after")
    def validate_shape(self) -> DetailsFollowup:
        self._require_null("genre", "min_rating", "year", "year_range", "actor")
        return self


class FindByYear(_IntentBase):
    """Discovery by release year only."""

    name: Literal["find_by_year"] = "find_by_year"

    @model_validator(mode="after")
    def validate_shape(self) -> FindByYear:
        self._require_null("genre", "min_rating", "actor", "title")
        return self


Intent = Annotated[
    FindByGenreAndRating | FindByActorLead | FindByTitle | DetailsFollowup | FindByYear,
    Field(discriminator="name"),
]

_INTENT_ADAPTER: TypeAdapter[Intent] = TypeAdapter(Intent)

PAYLOAD_FIELDS: tuple[str, ...] = (
    "name",
    "genre",
    "min_rating",
    "year",
    "year_range",
    "actor",
    "title",
)


def intent_from_obj(obj: Any) -> Intent:
    """Validate and parse an Intent from an arbitrary decoded JSON object."""

    return _INTENT_ADAPTER.validate_python(obj)


def intent_to_payload(intent: Intent) -> dict[str, Any]:
    """Serialize an intent into its JSON object form (nulls kept, `year_range` as a list)."""

    dumped = intent.model_dump(mode="json")
    return {field: dumped[field] for field in PAYLOAD_FIELDS}
