"""
Domain models for butterfly gallery.

Pydantic models for observations extracted from gallery pages and for
search parameters. These define the canonical schema: the extractors
normalize loosely formatted captions into these.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator

UNKNOWN_SPECIES = "Unknown Species"
UNKNOWN_COMMON_NAME = "Unknown"


# =============================================================================
# Observations
# =============================================================================


class ExtractionMethod(StrEnum):
    """Where the species name of an observation came from."""

    TITLE_HTML = "title-html"
    ALT_TEXT = "alt-text"
    TABLE_CELL = "table-cell"
    FALLBACK_FAILED = "fallback-failed"


class Coordinates(BaseModel):
    """WGS84 point in decimal degrees."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)

    def as_pair(self) -> tuple[float, float]:
        return (self.lat, self.lon)


class Observation(BaseModel):
    """One butterfly photograph and what its caption says about it."""

    species: str = Field(default=UNKNOWN_SPECIES, min_length=1)
    common_name: str = Field(default=UNKNOWN_COMMON_NAME, min_length=1)
    raw_title: str = ""
    full_image_url: str
    thumbnail_url: str
    alt_text: str = ""
    original_alt: str = ""
    observed_on: date | None = None
    location: str = ""
    coordinates: Coordinates | None = None
    photographer: str = ""
    source_url: str = ""
    source_page: str = "Unknown"
    has_data_title: bool = False
    extraction_method: ExtractionMethod = ExtractionMethod.FALLBACK_FAILED

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_valid_date(self) -> bool:
        return self.observed_on is not None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def timestamp(self) -> int:
        """Epoch milliseconds of the observation date (UTC midnight), 0 if undated."""
        if self.observed_on is None:
            return 0
        midnight = datetime(
            self.observed_on.year, self.observed_on.month, self.observed_on.day, tzinfo=UTC
        )
        return int(midnight.timestamp() * 1000)

    @property
    def is_identified(self) -> bool:
        """True when a species name was recovered."""
        return self.species != UNKNOWN_SPECIES

    @property
    def has_common_name(self) -> bool:
        return self.common_name != UNKNOWN_COMMON_NAME

    @property
    def display_name(self) -> str:
        """Human-friendly name: common name if available, else scientific."""
        if self.has_common_name:
            return f"{self.common_name} ({self.species})"
        return self.species


# =============================================================================
# Search
# =============================================================================


class SearchParams(BaseModel):
    """Gallery search criteria. Every field is optional."""

    species: str | None = None
    location: str | None = None
    date_from: date | None = None
    date_to: date | None = None

    @field_validator("species", "location", "date_from", "date_to", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def is_empty(self) -> bool:
        return (
            self.species is None
            and self.location is None
            and self.date_from is None
            and self.date_to is None
        )

    @property
    def needs_rich_caption(self) -> bool:
        """Location and date filters only trust records with a data-title caption."""
        return self.location is not None or self.date_from is not None or self.date_to is not None

