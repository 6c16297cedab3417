"""
Ordering and searching the deduplicated observation set.

Sort rule: dated observations first, newest first; undated ones after,
alphabetical by species. Applied after dedup and after every filter.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

from butterfly_gallery.reference.places import STATE_ALIASES
from butterfly_gallery.schemas import Observation, SearchParams

# =============================================================================
# Sorting
# =============================================================================


def _collation_key(text: str) -> tuple[str, str]:
    """Accent- and case-insensitive key, original text as the tiebreak."""
    stripped = "".join(
        ch for ch in unicodedata.normalize("NFKD", text) if not unicodedata.combining(ch)
    )
    return (stripped.casefold(), text)


def _sort_key(obs: Observation) -> tuple[int, int, tuple[str, str]]:
    if obs.has_valid_date:
        return (0, -obs.timestamp, ("", ""))
    return (1, 0, _collation_key(obs.species))


def sort_observations(observations: Iterable[Observation]) -> list[Observation]:
    """Return observations newest first, undated ones alphabetically at the end."""
    return sorted(observations, key=_sort_key)


# =============================================================================
# Filtering
# =============================================================================


def location_terms(query: str) -> tuple[str, ...]:
    """Every spelling a location query should match ("AZ" -> az, arizona)."""
    normalized = query.lower().strip()
    return STATE_ALIASES.get(normalized, (normalized,))


def matches_location(location: str, query: str) -> bool:
    """
    Whole-word match of a location query against a location string.

    ``"AZ"`` matches ``"Phoenix, AZ"`` but not ``"Brazil"``.
    """
    if not location:
        return False
    for term in location_terms(query):
        if not term:
            continue
        if re.search(rf"(^|\W){re.escape(term)}(\W|$)", location, re.IGNORECASE):
            return True
    return False


def matches_species(obs: Observation, query: str) -> bool:
    needle = query.lower()
    return needle in obs.species.lower() or needle in obs.common_name.lower()


def matches(obs: Observation, params: SearchParams) -> bool:
    """Whether one observation passes every criterion in ``params``."""
    if params.needs_rich_caption and not obs.has_data_title:
        return False

    if params.species is not None and not matches_species(obs, params.species):
        return False

    if params.location is not None and not matches_location(obs.location, params.location):
        return False

    if obs.observed_on is not None:
        if params.date_from is not None and obs.observed_on < params.date_from:
            return False
        if params.date_to is not None and obs.observed_on > params.date_to:
            return False

    return True


def filter_observations(
    observations: Iterable[Observation],
    params: SearchParams | None = None,
) -> list[Observation]:
    """
    Narrow observations by species, location and date range.

    With no criteria this returns everything, sorted. Location and date
    filters skip records without a ``data-title`` caption.
    """
    if params is None or params.is_empty:
        return sort_observations(observations)
    return sort_observations(obs for obs in observations if matches(obs, params))
