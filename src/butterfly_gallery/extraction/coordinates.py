"""
Geographic coordinates from gallery captions.

Captions carry positions as degrees-minutes-seconds, usually in
parentheses ahead of an elevation::

    (36°34'41''N 105°26'26''W, 10227 ft.)

but the separator, the seconds mark and the parentheses all vary, some
pages use decimal degrees, and captions scraped out of attributes may still
be entity-encoded (``36&#176;34'41''N``). Every shape is decoded to
WGS84 decimal degrees.
"""

from __future__ import annotations

import html
import re

_DEG = r"(\d{1,3}(?:\.\d+)?)\s*°\s*"
_MIN = r"(\d{1,2}(?:\.\d+)?)\s*['′’]\s*"
_SEC = r"(\d{1,2}(?:\.\d+)?)\s*(?:''|\"|″|′′|’’|'|′)\s*"
_LAT = rf"{_DEG}{_MIN}{_SEC}([NS])"
_LON = rf"{_DEG}{_MIN}{_SEC}([EW])"

# Latitude first in every shape. Each pattern stops after the longitude
# direction letter so trailing elevation text is never consumed.
DMS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\(\s*{_LAT}[\s,]*{_LON}", re.IGNORECASE),
    re.compile(rf"{_LAT}(?:\s*,\s*|\s+){_LON}", re.IGNORECASE),
    re.compile(rf"{_LAT}{_LON}", re.IGNORECASE),
)

DECIMAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(-?\d{1,3}(?:\.\d+)?)\s*°?\s*([NS])(?![A-Za-z])\s*,?\s*"
        r"(-?\d{1,3}(?:\.\d+)?)\s*°?\s*([EW])(?![A-Za-z])",
        re.IGNORECASE,
    ),
)

_BARE_PAIR = re.compile(r"(?<![\d.])(-?\d{1,2}\.\d+)\s*,\s*(-?\d{1,3}\.\d+)(?![\d.])")

_MAX_DECODE_PASSES = 3


def decode_entities(text: str) -> str:
    """
    Decode HTML entities (``&#176;``, ``&deg;``, ``&quot;``, ...).

    Repeats until the text stops changing, so double-encoded captions
    (``&amp;#176;``) decode fully.
    """
    for _ in range(_MAX_DECODE_PASSES):
        decoded = html.unescape(text)
        if decoded == text:
            break
        text = decoded
    return text


def dms_to_decimal(degrees: float, minutes: float, seconds: float, direction: str) -> float:
    """Convert degrees/minutes/seconds plus a hemisphere letter to signed decimal degrees."""
    value = degrees + minutes / 60 + seconds / 3600
    if direction.upper() in ("S", "W"):
        value = -value
    return value


def _in_range(lat: float, lon: float) -> bool:
    return -90 <= lat <= 90 and -180 <= lon <= 180


def _from_dms(text: str) -> tuple[float, float] | None:
    for pattern in DMS_PATTERNS:
        match = pattern.search(text)
        if match:
            g = match.groups()
            lat = dms_to_decimal(float(g[0]), float(g[1]), float(g[2]), g[3])
            lon = dms_to_decimal(float(g[4]), float(g[5]), float(g[6]), g[7])
            return lat, lon
    return None


def _from_decimal(text: str) -> tuple[float, float] | None:
    for pattern in DECIMAL_PATTERNS:
        match = pattern.search(text)
        if match:
            lat_raw, lat_dir, lon_raw, lon_dir = match.groups()
            lat = dms_to_decimal(abs(float(lat_raw)), 0, 0, lat_dir)
            lon = dms_to_decimal(abs(float(lon_raw)), 0, 0, lon_dir)
            return lat, lon
    return None


def _from_bare_pair(text: str) -> tuple[float, float] | None:
    match = _BARE_PAIR.search(text)
    if not match:
        return None
    lat, lon = float(match.group(1)), float(match.group(2))
    if not _in_range(lat, lon):
        return None
    return lat, lon


def parse_coordinates(text: str) -> tuple[float, float] | None:
    """
    Find a coordinate pair in a caption.

    Tries DMS shapes, then decimal degrees with hemisphere letters, then a
    bare ``lat, lon`` pair. Returns ``(lat, lon)`` in decimal degrees, or
    None when nothing plausible is found.
    """
    if not text:
        return None
    decoded = decode_entities(text)
    for parser in (_from_dms, _from_decimal, _from_bare_pair):
        result = parser(decoded)
        if result is not None:
            if _in_range(*result):
                return result
            return None
    return None
