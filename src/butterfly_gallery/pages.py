"""
Parse one gallery page into observations.

The galleries were hand-edited over many years, so entries are marked up
several ways. Links are collected with a cascade of selectors from the most
specific (lightbox links with a rich ``data-title``) to the loosest (any
link to a ``.jpg``); each link is processed once no matter how many
selectors catch it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, Tag

from butterfly_gallery.exceptions import PageParseError
from butterfly_gallery.records import build_observation
from butterfly_gallery.reference.pages import PAGE_NAMES, UNKNOWN_PAGE
from butterfly_gallery.schemas import Observation

logger = logging.getLogger(__name__)

LINK_SELECTORS: tuple[str, ...] = (
    "a[data-title]",
    ".img-container a[data-lightbox]",
    "td a[data-lightbox]",
    "a[data-lightbox]",
    "a:has(img)",
    'a[href*=".jpg" i], a[href*=".jpeg" i], a[href*=".png" i]',
)

MAX_ISSUE_SAMPLES = 3


@dataclass
class PageResult:
    """Observations parsed from one source page."""

    source_url: str
    source_page: str
    observations: list[Observation] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def get_page_name(url: str) -> str:
    """Human label for a source page URL ("Texas", "Dual Checklist", ...)."""
    for slug, name in PAGE_NAMES.items():
        if slug in url:
            return name
    return UNKNOWN_PAGE


def find_gallery_links(soup: BeautifulSoup) -> list[Tag]:
    """Every candidate gallery link, in selector order, each element once."""
    seen: set[int] = set()
    links: list[Tag] = []
    for selector in LINK_SELECTORS:
        for element in soup.select(selector):
            if id(element) in seen:
                continue
            seen.add(id(element))
            links.append(element)
    return links


def _log_extraction_issues(observations: list[Observation], page_name: str) -> None:
    issues = [o for o in observations if not o.is_identified or not o.has_common_name]
    if not issues:
        return
    logger.warning("%d images with extraction issues from %s", len(issues), page_name)
    for obs in issues[:MAX_ISSUE_SAMPLES]:
        logger.debug(
            "Extraction issue: title=%r alt=%r method=%s result=%s - %s",
            obs.raw_title,
            obs.original_alt,
            obs.extraction_method,
            obs.species,
            obs.common_name,
        )


def parse_page(html_text: str, source_url: str = "") -> PageResult:
    """
    Parse a gallery page's HTML.

    Args:
        html_text: Page source as fetched.
        source_url: URL the page came from; used to resolve relative image
            URLs and to label the records.

    Raises:
        PageParseError: If ``html_text`` is not text that can be parsed.
    """
    if not isinstance(html_text, str):
        raise PageParseError(source_url, f"expected HTML text, got {type(html_text).__name__}")

    page_name = get_page_name(source_url)
    try:
        soup = BeautifulSoup(html_text, "html.parser")
    except Exception as exc:  # noqa: BLE001
        raise PageParseError(source_url, str(exc)) from exc

    observations: list[Observation] = []
    for link in find_gallery_links(soup):
        obs = build_observation(link, source_url, page_name)
        if obs is not None:
            observations.append(obs)

    logger.info("Parsed %d images from %s", len(observations), page_name)
    _log_extraction_issues(observations, page_name)
    return PageResult(source_url=source_url, source_page=page_name, observations=observations)


def parse_page_safe(html_text: str, source_url: str = "") -> PageResult:
    """Like ``parse_page`` but reports failure on the result instead of raising."""
    try:
        return parse_page(html_text, source_url)
    except PageParseError as exc:
        logger.error("%s", exc)
        return PageResult(
            source_url=source_url,
            source_page=get_page_name(source_url),
            error=str(exc),
        )
