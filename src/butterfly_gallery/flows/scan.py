"""
Prefect flow that scans the gallery pages.

Fetches each source page in turn (with a pause between requests so the
site never sees a burst), parses it, then deduplicates and sorts the whole
collection and saves it. A page that fails to download or parse is
reported and skipped; the rest of the scan carries on.

Run locally:
    python -m butterfly_gallery.flows.scan

Run with Prefect dashboard:
    prefect server start &
    python -m butterfly_gallery.flows.scan
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

from prefect import flow, task

from butterfly_gallery.config import get_settings
from butterfly_gallery.dedupe import remove_duplicates
from butterfly_gallery.exceptions import PageFetchError
from butterfly_gallery.gallery import collection_stats, map_markers
from butterfly_gallery.pages import PageResult, get_page_name, parse_page_safe
from butterfly_gallery.reference.pages import SOURCE_PAGES
from butterfly_gallery.schemas import Observation
from butterfly_gallery.search import sort_observations
from butterfly_gallery.services import pages as page_service
from butterfly_gallery.store import DataStore

store = DataStore(get_settings().data_dir)

OBSERVATIONS_PATH = Path("live/observations.json")
MARKERS_PATH = Path("derived/map_markers.json")
STATS_PATH = Path("derived/stats.json")

SOURCE = "butterflyexplorers.com"


@task(name="fetch-page")
def fetch_page(url: str) -> str:
    """Download one gallery page."""
    return page_service.fetch_page(url)


@task(name="parse-page")
def parse_page(html_text: str, url: str) -> PageResult:
    """Parse one gallery page; failures come back on the result."""
    return parse_page_safe(html_text, url)


def scan_page(url: str) -> PageResult:
    """Fetch and parse one page, turning a fetch failure into an error result."""
    try:
        html_text = fetch_page(url)
    except PageFetchError as exc:
        return PageResult(source_url=url, source_page=get_page_name(url), error=str(exc))
    return parse_page(html_text, url)


@task(name="merge-observations")
def merge_observations(results: Sequence[PageResult]) -> list[Observation]:
    """Concatenate page results, drop duplicates, sort."""
    combined = [obs for result in results for obs in result.observations]
    return sort_observations(remove_duplicates(combined))


@task(name="save-observations")
def save_observations(
    observations: list[Observation],
    results: Sequence[PageResult],
    cache_hours: int,
) -> Path:
    """Save the collection plus its map markers and stats."""
    errors = {r.source_url: r.error for r in results if r.error}
    path = store.write_observations(
        OBSERVATIONS_PATH,
        observations,
        source=SOURCE,
        valid_until=datetime.now(UTC) + timedelta(hours=cache_hours),
        pages=[r.source_url for r in results],
        errors=errors,
    )
    store.write(MARKERS_PATH, map_markers(observations), source=SOURCE)
    stats = collection_stats(observations)
    store.write(STATS_PATH, stats.__dict__, source=SOURCE)
    return path


@flow(name="scan-gallery", log_prints=True)
def scan_all_pages(
    urls: Sequence[str] = SOURCE_PAGES,
    *,
    force: bool = False,
) -> dict[str, Any]:
    """
    Scan every source page and save the merged collection.

    Skips the scan when the saved collection is still fresh, unless
    ``force`` is set.
    """
    settings = get_settings()

    if not force and store.is_fresh(OBSERVATIONS_PATH):
        print("Observation data is fresh, skipping scan.")
        observations = store.read_observations(OBSERVATIONS_PATH) or []
        return {"observations": len(observations), "pages": 0, "errors": {}, "skipped": True}

    results: list[PageResult] = []
    for i, url in enumerate(urls, start=1):
        print(f"Scanning {get_page_name(url)}... ({i}/{len(urls)})")
        result = scan_page(url)
        if result.error:
            print(f"Warning: {result.error}")
        else:
            print(f"Found {len(result.observations)} images from {result.source_page}")
        results.append(result)
        if i < len(urls):
            time.sleep(settings.request_pause_seconds)

    print("Processing and sorting images...")
    observations = merge_observations(results)
    output_path = save_observations(observations, results, settings.cache_hours)

    print(f"Saved {len(observations)} unique images to {output_path}")
    return {
        "observations": len(observations),
        "pages": len(results),
        "errors": {r.source_url: r.error for r in results if r.error},
        "skipped": False,
    }


if __name__ == "__main__":
    result = scan_all_pages()
    print(f"Flow complete: {result}")
