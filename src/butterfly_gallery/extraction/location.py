"""Free-text location and photographer credit from gallery captions."""

from __future__ import annotations

import re

# Location sits after the line break and ends where coordinates, a date or
# elevation, the credit, or the next tag begin.
_LOCATION_PATTERN = re.compile(r"<br\s*/?>\s*([^<(©]+?)\s*(?:\(|\d|©|<|$)", re.IGNORECASE)

_PHOTOGRAPHER_PATTERN = re.compile(r"(?:©|&copy;)\s*([^&<]+)", re.IGNORECASE)


def extract_location(title: str) -> str:
    """Return the location text of a caption, or an empty string."""
    if not title:
        return ""
    match = _LOCATION_PATTERN.search(title)
    if match:
        return match.group(1).strip().rstrip(",").strip()
    return ""


def extract_photographer(title: str) -> str:
    """Return the name after the copyright sign, or an empty string."""
    if not title:
        return ""
    match = _PHOTOGRAPHER_PATTERN.search(title)
    if match:
        return match.group(1).strip()
    return ""
