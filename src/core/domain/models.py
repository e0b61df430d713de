"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the decode boundary: a body that does not match the
  expected shape fails once, with a readable error.
- Frozen models: every fetched entity is an immutable snapshot that is read
  once and discarded.

Note:
- These models describe *what* the data is, not *how* it is fetched.
- Unknown API fields are ignored; only the consumed fields are declared.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Values seen in the source data. The API may return others ("n/a",
# "hermaphrodite"), so `gender` stays an open string.
KNOWN_GENDERS: tuple[str, ...] = ("male", "female", "divers")


class _Snapshot(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class Person(_Snapshot):
    """Primary entity: a person as returned by `/people/<id>/`."""

    name: str = Field(
        ...,
        description="Full name of the person.",
    )
    height: str = Field(
        ...,
        description="Height in centimeters, kept as the text the API returns.",
    )
    gender: str = Field(
        ...,
        description="Gender as reported by the API (open enumeration).",
    )
    homeworld: str = Field(
        ...,
        description="URL of the planet resource this person comes from.",
    )
    films: tuple[str, ...] = Field(
        ...,
        description="URLs of the films this person appears in, in API order.",
    )


class Planet(_Snapshot):
    """Secondary entity: only the name is consumed."""

    name: str = Field(..., description="Planet name.")


class Film(_Snapshot):
    """Tertiary entity: a film resource."""

    title: str = Field(..., description="Film title.")
    director: str = Field(..., description="Director name(s).")
    release_date: str = Field(..., description="Release date as `YYYY-MM-DD` text.")


class FilmSummary(_Snapshot):
    title: str
    director: str
    release_date: str

    @classmethod
    def from_film(cls, film: Film) -> "FilmSummary":
        return cls(title=film.title, director=film.director, release_date=film.release_date)


class PersonInfo(_Snapshot):
    """Aggregated record: the person with its references resolved.

    Invariants:
    - `homeworld` is the planet name, never a URL.
    - `films` has one entry per reference of the source person, same order.
    """

    name: str = Field(..., description="Copied verbatim from the person.")
    height: str = Field(..., description="Copied verbatim from the person.")
    gender: str = Field(..., description="Copied verbatim from the person.")
    homeworld: str = Field(..., description="Resolved name of the home planet.")
    films: tuple[FilmSummary, ...] = Field(
        default=(),
        description="Resolved films, in the order of `Person.films`.",
    )
