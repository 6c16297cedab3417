"""Place names and keywords that show up in gallery captions."""

from __future__ import annotations

# Words that start the location part of a caption when it runs on
# straight after the common name ("Margined White Taos Co. ...").
PLACE_KEYWORDS: tuple[str, ...] = (
    "Co.",
    "County",
    "Wildlife",
    "Park",
    "Reserve",
    "Area",
    "Forest",
    "Beach",
)

# Trailing words stripped from a common name, with everything after them.
ADMIN_KEYWORDS: tuple[str, ...] = (
    "Wildlife",
    "Management",
    "Area",
    "Park",
    "Reserve",
    "County",
    "Co.",
    "State",
    "National",
    "Forest",
    "Beach",
)

# Lower-cased query -> every spelling it should match in a location.
STATE_ALIASES: dict[str, tuple[str, ...]] = {
    "arizona": ("az", "arizona"),
    "florida": ("fl", "florida"),
    "texas": ("tx", "texas"),
    "new mexico": ("nm", "new mexico"),
    "puerto rico": ("pr", "puerto rico"),
    "az": ("az", "arizona"),
    "fl": ("fl", "florida"),
    "tx": ("tx", "texas"),
    "nm": ("nm", "new mexico"),
    "pr": ("pr", "puerto rico"),
}
