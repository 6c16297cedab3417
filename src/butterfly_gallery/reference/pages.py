"""Gallery pages scanned for observations."""

from __future__ import annotations

BASE_URL = "https://www.butterflyexplorers.com/p"

SOURCE_PAGES: tuple[str, ...] = (
    f"{BASE_URL}/new-butterflies.html",
    f"{BASE_URL}/butterflies-of-texas.html",
    f"{BASE_URL}/butterflies-of-puerto-rico.html",
    f"{BASE_URL}/butterflies-of-new-mexico.html",
    f"{BASE_URL}/butterflies-of-arizona.html",
    f"{BASE_URL}/butterflies-of-panama.html",
    f"{BASE_URL}/butterflies-of-florida.html",
    f"{BASE_URL}/dual-checklist.html",
)

# Page slug -> human label. Matched by substring against the page URL.
PAGE_NAMES: dict[str, str] = {
    "new-butterflies.html": "New Butterflies",
    "butterflies-of-texas.html": "Texas",
    "butterflies-of-puerto-rico.html": "Puerto Rico",
    "butterflies-of-new-mexico.html": "New Mexico",
    "butterflies-of-arizona.html": "Arizona",
    "butterflies-of-panama.html": "Panama",
    "butterflies-of-florida.html": "Florida",
    "dual-checklist.html": "Dual Checklist",
}

UNKNOWN_PAGE = "Unknown"
