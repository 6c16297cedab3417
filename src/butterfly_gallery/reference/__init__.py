"""Static lookup tables.

Reference data that doesn't change between scans: the gallery pages to
scan and their labels, place-type keywords used when cleaning common names,
and the state name/abbreviation table used by location search.

Adding a new table:
1. Create ``reference/{name}.py`` with constants
2. Re-export from this ``__init__.py``
"""

from butterfly_gallery.reference.pages import PAGE_NAMES as PAGE_NAMES
from butterfly_gallery.reference.pages import SOURCE_PAGES as SOURCE_PAGES
from butterfly_gallery.reference.pages import UNKNOWN_PAGE as UNKNOWN_PAGE
from butterfly_gallery.reference.places import PLACE_KEYWORDS as PLACE_KEYWORDS
from butterfly_gallery.reference.places import STATE_ALIASES as STATE_ALIASES
