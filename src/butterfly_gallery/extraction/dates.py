"""Observation dates from gallery captions."""

from __future__ import annotations

import math
import re
from datetime import date

# (pattern, year_first). Groups are read positionally; two-digit-first forms
# are month/day/year.
DATE_PATTERNS: tuple[tuple[re.Pattern[str], bool], ...] = (
    (re.compile(r"(\d{4})/(\d{2})/(\d{2})"), True),
    (re.compile(r"(\d{2})/(\d{2})/(\d{4})"), False),
    (re.compile(r"(\d{4})-(\d{2})-(\d{2})"), True),
    (re.compile(r"(\d{2})-(\d{2})-(\d{4})"), False),
)

DEFAULT_RECENCY_DAYS = 365


def extract_date(title: str) -> date | None:
    """Return the first calendar date found in a caption, or None."""
    if not title:
        return None
    for pattern, year_first in DATE_PATTERNS:
        match = pattern.search(title)
        if not match:
            continue
        first, second, third = (int(g) for g in match.groups())
        year, month, day = (first, second, third) if year_first else (third, first, second)
        try:
            return date(year, month, day)
        except ValueError:
            # 2025/13/40 and friends: try the next shape
            continue
    return None


def is_recent_date(
    observed_on: date | None,
    days_threshold: int = DEFAULT_RECENCY_DAYS,
    today: date | None = None,
) -> bool:
    """
    Whether a date falls within ``days_threshold`` days of today.

    Undated observations count as recent so they are never hidden by a
    recency check.
    """
    if observed_on is None:
        return True
    today = today or date.today()
    diff_days = math.ceil(abs((today - observed_on).days))
    return diff_days <= days_threshold
