"""Download gallery pages."""

from __future__ import annotations

import requests

from butterfly_gallery.exceptions import PageFetchError
from butterfly_gallery.services.http import session


def fetch_page(url: str) -> str:
    """
    Fetch a gallery page and return its HTML.

    Raises:
        PageFetchError: On connection failure or a non-2xx response.
    """
    try:
        resp = session.get(url)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise PageFetchError(url, str(exc)) from exc
    return resp.text
