"""Display-ready views of an observation list.

Pure data shaping for the gallery and map front ends: which slice of
records a page shows, how a page splits into rows, which page buttons to
offer, and the marker payload for the map. No markup is produced here.

Public API:
  - paginate / GalleryPage: one page of the gallery
  - chunk_rows: split a page into rows of thumbnails
  - page_window: page numbers for pagination controls
  - map_markers: marker dicts for records with coordinates
  - collection_stats: counts by source page and extraction method
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from butterfly_gallery.schemas import Observation

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 100
DEFAULT_IMAGES_PER_ROW = 6
DEFAULT_VISIBLE_PAGES = 5


@dataclass
class GalleryPage:
    """One page of gallery results."""

    items: list[Observation]
    page: int
    total_pages: int
    total: int
    start_index: int
    end_index: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def summary(self) -> str:
        """E.g. ``Showing 101-200 of 734``."""
        if not self.total:
            return "Showing 0 of 0"
        return f"Showing {self.start_index + 1}-{self.end_index} of {self.total}"


@dataclass
class CollectionStats:
    """Diagnostic counts for a scanned collection."""

    total: int
    by_source_page: dict[str, int] = field(default_factory=dict)
    by_extraction_method: dict[str, int] = field(default_factory=dict)
    unidentified: int = 0
    with_coordinates: int = 0
    with_date: int = 0


def paginate(
    observations: Sequence[Observation],
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> GalleryPage:
    """Slice out one page. Out-of-range page numbers clamp to the nearest page."""
    total = len(observations)
    total_pages = math.ceil(total / page_size) if total else 0
    page = min(max(page, 1), max(total_pages, 1))
    start = (page - 1) * page_size
    end = min(start + page_size, total)
    return GalleryPage(
        items=list(observations[start:end]),
        page=page,
        total_pages=total_pages,
        total=total,
        start_index=start,
        end_index=end,
    )


def chunk_rows(items: Sequence[T], per_row: int = DEFAULT_IMAGES_PER_ROW) -> list[list[T]]:
    """Split items into rows of ``per_row``; the last row may be short."""
    return [list(items[i : i + per_row]) for i in range(0, len(items), per_row)]


def page_window(
    current: int,
    total_pages: int,
    max_visible: int = DEFAULT_VISIBLE_PAGES,
) -> list[int]:
    """
    Page numbers to show around the current page.

    The window is centered on ``current`` where possible and shifted to stay
    inside ``1..total_pages``. First/last-page shortcuts are left to the
    renderer.
    """
    if total_pages < 1:
        return []
    start = max(1, current - max_visible // 2)
    end = min(total_pages, start + max_visible - 1)
    if end - start + 1 < max_visible:
        start = max(1, end - max_visible + 1)
    return list(range(start, end + 1))


def map_markers(observations: Sequence[Observation]) -> list[dict[str, Any]]:
    """Marker payloads for every observation that has coordinates."""
    markers: list[dict[str, Any]] = []
    for obs in observations:
        if obs.coordinates is None:
            continue
        markers.append(
            {
                "lat": obs.coordinates.lat,
                "lon": obs.coordinates.lon,
                "species": obs.species,
                "common_name": obs.common_name,
                "thumbnail_url": obs.thumbnail_url,
                "full_image_url": obs.full_image_url,
                "location": obs.location,
                "observed_on": obs.observed_on.isoformat() if obs.observed_on else None,
            }
        )
    return markers


def collection_stats(observations: Sequence[Observation]) -> CollectionStats:
    """Count records per source page and extraction method."""
    return CollectionStats(
        total=len(observations),
        by_source_page=dict(Counter(o.source_page for o in observations)),
        by_extraction_method=dict(Counter(str(o.extraction_method) for o in observations)),
        unidentified=sum(1 for o in observations if not o.is_identified or not o.has_common_name),
        with_coordinates=sum(1 for o in observations if o.coordinates is not None),
        with_date=sum(1 for o in observations if o.has_valid_date),
    )
