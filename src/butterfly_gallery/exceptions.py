"""Exception types raised by butterfly gallery.

Data-quality problems (missing species, unparseable dates, absent
coordinates) are never raised; they resolve to sentinels or ``None``.
These exceptions cover inputs that cannot be processed at all.
"""

from __future__ import annotations


class ButterflyGalleryError(Exception):
    """Base class for all butterfly gallery errors."""


class PageParseError(ButterflyGalleryError):
    """A source page could not be parsed as HTML."""

    def __init__(self, source_url: str, reason: str) -> None:
        self.source_url = source_url
        self.reason = reason
        super().__init__(f"Could not parse {source_url or '<unknown source>'}: {reason}")


class PageFetchError(ButterflyGalleryError):
    """A source page could not be downloaded."""

    def __init__(self, source_url: str, reason: str) -> None:
        self.source_url = source_url
        self.reason = reason
        super().__init__(f"Could not fetch {source_url}: {reason}")
