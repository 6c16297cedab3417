"""
Build one Observation from one gallery link.

A gallery entry is an ``<a>`` wrapping an ``<img>``. The caption comes from
the link's ``data-title`` (lightbox tooltip), its ``title``, or the image
``alt``, in that order. When the caption doesn't name the butterfly, the
builder falls back to the alt text, the label row of the surrounding table,
and finally the image filename.
"""

from __future__ import annotations

from urllib.parse import urljoin, urlsplit

from bs4 import Tag

from butterfly_gallery.extraction import (
    extract_date,
    extract_location,
    extract_photographer,
    extract_species_and_common_name,
    finalize_names,
    names_from_alt,
    names_from_label,
    parse_coordinates,
    species_from_filename,
)
from butterfly_gallery.schemas import (
    UNKNOWN_SPECIES,
    Coordinates,
    ExtractionMethod,
    Observation,
)

# =============================================================================
# URL helpers
# =============================================================================


def resolve_url(url: str, base_url: str) -> str:
    """
    Make an image URL absolute relative to the page it was found on.

    ``http(s)://`` URLs pass through, ``//host/x`` gains ``https:``, ``/x``
    is joined to the page origin, anything else is relative to the page.
    """
    if url.startswith("http"):
        return url
    if url.startswith("//"):
        return "https:" + url
    if url.startswith("/"):
        parts = urlsplit(base_url)
        if parts.scheme and parts.netloc:
            return f"{parts.scheme}://{parts.netloc}{url}"
        return url
    return urljoin(base_url, url)


# =============================================================================
# Caption sources
# =============================================================================


def caption_for(link: Tag, img: Tag) -> str:
    """The richest caption available for a link, or an empty string."""
    return str(link.get("data-title") or link.get("title") or img.get("alt") or "")


def _element_children(tag: Tag) -> list[Tag]:
    return [child for child in tag.children if isinstance(child, Tag)]


def names_from_table(link: Tag) -> tuple[str, str]:
    """
    Read names from the label row under a thumbnail.

    Gallery tables put thumbnails in the first row and ``<i>Species</i>
    <b>Common</b>`` labels in the same column of the second row.
    """
    cell = link.find_parent("td")
    if cell is None:
        return "", ""
    table = cell.find_parent("table")
    if table is None:
        return "", ""
    rows = table.find_all("tr")
    if len(rows) < 2:
        return "", ""

    first_cells = _element_children(rows[0])
    index = next((i for i, c in enumerate(first_cells) if c is cell), -1)
    label_cells = _element_children(rows[1])
    if index == -1 or index >= len(label_cells):
        return "", ""

    label_cell = label_cells[index]
    split = names_from_label(label_cell.get_text())
    if split is not None:
        return split

    species = ""
    common_name = ""
    italic = label_cell.find("i")
    if italic is not None:
        species = italic.get_text().strip()
    bold = label_cell.find(["strong", "b"])
    if bold is not None:
        common_name = bold.get_text().strip()
    return species, common_name


def resolve_names(title: str, alt: str, link: Tag, href: str) -> tuple[str, str]:
    """Run the caption -> alt -> table -> filename fallback chain."""
    species, common_name = extract_species_and_common_name(title)

    if (not species or not common_name) and alt:
        alt_species, alt_common = names_from_alt(alt)
        species = species or alt_species
        common_name = common_name or alt_common

    if not species or not common_name:
        table_species, table_common = names_from_table(link)
        species = species or table_species
        common_name = common_name or table_common

    if not species and not common_name:
        species = species_from_filename(href)

    return finalize_names(species, common_name)


def extraction_method(title: str, alt: str, species: str) -> ExtractionMethod:
    """Classify where the species name most likely came from."""
    identified = species != UNKNOWN_SPECIES
    if title and "<i>" in title and identified:
        return ExtractionMethod.TITLE_HTML
    if alt and "-" in alt and identified:
        return ExtractionMethod.ALT_TEXT
    if identified:
        return ExtractionMethod.TABLE_CELL
    return ExtractionMethod.FALLBACK_FAILED


# =============================================================================
# Builder
# =============================================================================


def build_observation(link: Tag, source_url: str, source_page: str) -> Observation | None:
    """
    Build an Observation for a gallery link.

    Returns None when the link has no image, no ``href`` or no image
    ``src``; such links are not gallery entries.
    """
    img = link.find("img")
    if img is None:
        return None

    href = str(link.get("href") or "")
    src = str(img.get("src") or "")
    if not href or not src:
        return None

    title = caption_for(link, img)
    alt = str(img.get("alt") or "")

    species, common_name = resolve_names(title, alt, link, href)
    observed_on = extract_date(title)
    coords = parse_coordinates(title)

    return Observation(
        species=species,
        common_name=common_name,
        raw_title=title.replace('"', "&quot;"),
        full_image_url=resolve_url(href, source_url),
        thumbnail_url=resolve_url(src, source_url),
        alt_text=alt or f"{species} - {common_name}",
        original_alt=alt,
        observed_on=observed_on,
        location=extract_location(title),
        coordinates=Coordinates(lat=coords[0], lon=coords[1]) if coords else None,
        photographer=extract_photographer(title),
        source_url=source_url,
        source_page=source_page,
        has_data_title=bool(link.get("data-title")),
        extraction_method=extraction_method(title, alt, species),
    )
