"""Field extractors for gallery captions.

Each module pulls one kind of field out of a raw caption string and never
raises on bad data: missing fields come back as ``""`` or ``None``.

Public API:
  - species: extract_species_and_common_name, names_from_alt, names_from_label,
    species_from_filename, finalize_names
  - dates: extract_date, is_recent_date
  - location: extract_location, extract_photographer
  - coordinates: parse_coordinates, decode_entities, dms_to_decimal
"""

from butterfly_gallery.extraction.coordinates import (
    decode_entities,
    dms_to_decimal,
    parse_coordinates,
)
from butterfly_gallery.extraction.dates import extract_date, is_recent_date
from butterfly_gallery.extraction.location import extract_location, extract_photographer
from butterfly_gallery.extraction.species import (
    clean_common_name,
    extract_species_and_common_name,
    finalize_names,
    names_from_alt,
    names_from_label,
    species_from_filename,
)

__all__ = [
    "clean_common_name",
    "decode_entities",
    "dms_to_decimal",
    "extract_date",
    "extract_location",
    "extract_photographer",
    "extract_species_and_common_name",
    "finalize_names",
    "is_recent_date",
    "names_from_alt",
    "names_from_label",
    "parse_coordinates",
    "species_from_filename",
]
