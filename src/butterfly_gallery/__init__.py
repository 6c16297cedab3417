"""Butterfly Gallery - observation records from static butterfly photo galleries.

Architecture::

    extraction/    Field extractors: caption string -> species, date, place, coordinates
    records.py     One gallery link -> one Observation (fallbacks, sentinels, provenance)
    pages.py       One HTML page -> list of Observations
    dedupe.py      Merge repeated harvests of the same photograph
    search.py      Sort rule and species/location/date filters
    gallery.py     Display shaping for gallery and map front ends (no markup)
    reference/     Static tables (source pages, place keywords, state names)
    services/      HTTP session and page download
    store.py       JSON envelopes with freshness metadata
    flows/         Prefect orchestration (scan fetches, parses, merges, saves)

Data flow: services → pages (records, extraction) → dedupe → search → gallery
"""

__version__ = "0.1.0"

from butterfly_gallery.config import Settings
from butterfly_gallery.dedupe import remove_duplicates
from butterfly_gallery.pages import PageResult, parse_page
from butterfly_gallery.schemas import Observation, SearchParams
from butterfly_gallery.search import filter_observations, sort_observations

__all__ = [
    "Observation",
    "PageResult",
    "SearchParams",
    "Settings",
    "__version__",
    "filter_observations",
    "parse_page",
    "remove_duplicates",
    "sort_observations",
]
