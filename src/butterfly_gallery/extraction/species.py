"""Species and common-name extraction from gallery captions.

Captions look like ``<p4><i>Pieris marginalis</i> - Margined White</p4>``,
but older pages drop the ``<p4>`` wrapper, forget the ``<br/>`` before the
location, or run the common name straight into the place name. The pattern
list below goes from the strict canonical form to progressively looser
guesses; the first one that matches wins.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from urllib.parse import urlparse

from butterfly_gallery.reference.places import ADMIN_KEYWORDS, PLACE_KEYWORDS
from butterfly_gallery.schemas import UNKNOWN_COMMON_NAME, UNKNOWN_SPECIES

_SEP = r"\s*[-–]\s*"
_WORDS = r"([A-Za-z\s\-']+?)"
_PLACE_ALT = "|".join(re.escape(k) for k in PLACE_KEYWORDS)
_ADMIN_ALT = "|".join(re.escape(k) for k in ADMIN_KEYWORDS)

# Most specific first. Do not reorder.
TITLE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"<p4><i>(.*?)</i>{_SEP}(.*?)</p4>", re.IGNORECASE),
    re.compile(rf"<i>(.*?)</i>{_SEP}([^<]*?)(?:<br|$)", re.IGNORECASE),
    re.compile(rf"<i>(.*?)</i>{_SEP}([^<]*?)(?:\s*<|$)", re.IGNORECASE),
    re.compile(
        rf"<i>(.*?)</i>{_SEP}{_WORDS}(?=\s*[A-Z][a-z]+\s+(?:{_PLACE_ALT})|<br|$)",
        re.IGNORECASE,
    ),
    re.compile(rf"<i>(.*?)</i>{_SEP}{_WORDS}(?=\s*\d)", re.IGNORECASE),
    re.compile(rf"<i>(.*?)</i>{_SEP}{_WORDS}(?=\s*\()", re.IGNORECASE),
    re.compile(rf"<i>(.*?)</i>{_SEP}([A-Za-z\s\-']+)"),
)

# Applied in order to whatever a title pattern captured as the common name.
_COMMON_NAME_CLEANUP: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\s+(?:{_ADMIN_ALT})(?![A-Za-z]).*$", re.IGNORECASE),
    re.compile(r"\s+\d+.*$"),
    re.compile(r"\s+\(.*$"),
    re.compile(r"\s+[A-Z][a-z]+\s+Co\..*$"),
)

ALT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"^(.*?){_SEP}(.*?)$"),
    re.compile(rf"^([A-Z][a-z]+\s+[a-z]+){_SEP}(.*?)$"),
)

_LABEL_PATTERN = re.compile(rf"([A-Za-z\s]+?){_SEP}([A-Za-z\s\-']+)")

MIN_NAME_LENGTH = 2
MIN_FILENAME_GUESS_LENGTH = 4


def clean_common_name(name: str) -> str:
    """Strip place names, elevations and coordinates that ran into a common name."""
    for pattern in _COMMON_NAME_CLEANUP:
        name = pattern.sub("", name)
    return name.strip()


def extract_species_and_common_name(title: str) -> tuple[str, str]:
    """
    Pull ``(species, common_name)`` out of an HTML caption.

    Returns empty strings for anything that could not be found; the caller
    decides on fallbacks and sentinels.
    """
    if not title:
        return "", ""
    for pattern in TITLE_PATTERNS:
        match = pattern.search(title)
        if match:
            return match.group(1).strip(), clean_common_name(match.group(2).strip())
    return "", ""


def names_from_alt(alt: str) -> tuple[str, str]:
    """Split an image alt text of the form ``Species - Common Name``."""
    if not alt:
        return "", ""
    for pattern in ALT_PATTERNS:
        match = pattern.match(alt)
        if match:
            return match.group(1).strip(), match.group(2).strip()
    return "", ""


def names_from_label(text: str) -> tuple[str, str] | None:
    """Split a table label cell's text of the form ``Species - Common Name``."""
    match = _LABEL_PATTERN.search(text or "")
    if not match:
        return None
    return match.group(1).strip(), match.group(2).strip()


def species_from_filename(url: str) -> str:
    """
    Guess a species from an image filename.

    ``/images/Papilio-glaucus_01.jpg`` becomes ``Papilio glaucus``. Returns an
    empty string when the cleaned name is too short to be useful.
    """
    if not url:
        return ""
    name = PurePosixPath(urlparse(url).path).name.split(".")[0]
    cleaned = re.sub(r"\d+", "", re.sub(r"[-_]", " ", name)).strip()
    if len(cleaned) < MIN_FILENAME_GUESS_LENGTH:
        return ""
    return cleaned


def finalize_names(species: str, common_name: str) -> tuple[str, str]:
    """Replace missing or too-short names with their sentinels."""
    if len(species) < MIN_NAME_LENGTH:
        species = UNKNOWN_SPECIES
    if len(common_name) < MIN_NAME_LENGTH:
        common_name = UNKNOWN_COMMON_NAME
    return species, common_name
