"""Reporting window shown on an Insights screen.

Insights screens show either an explicit range ("Jan 1 - Jan 30, 2025") or a
relative selector ("Last 30 days"). A relative selector is resolved against
an injected ``today`` so the result is deterministic.
"""

from __future__ import annotations

import datetime
import re

from insights_ocr.metrics.config import DateRangeConfig

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)  # fmt: skip

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip

_MONTH = "(?:{})[a-z]*".format("|".join(MONTH_ABBREVIATIONS + MONTH_NAMES))
_EXPLICIT_RANGE = re.compile(
    rf"\b{_MONTH}\s+\d{{1,2}}\s*[-–]\s*{_MONTH}\s+\d{{1,2}}(?:\s*,\s*\d{{4}})?",
    re.IGNORECASE,
)
_LAST_N_DAYS = re.compile(r"\bLast\s+(\d+)\s+days?\b", re.IGNORECASE)
_WHITESPACE = re.compile(r"\s+")


def _month_day(d: datetime.date) -> str:
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"


def format_date_range(start: datetime.date, end: datetime.date) -> str:
    """Format a window for display.

    Examples:
        >>> format_date_range(datetime.date(2024, 3, 4), datetime.date(2024, 3, 10))
        'Mar 4 - Mar 10, 2024'
        >>> format_date_range(datetime.date(2023, 12, 28), datetime.date(2024, 1, 3))
        'Dec 28, 2023 - Jan 3, 2024'
    """
    if start.year == end.year:
        return f"{_month_day(start)} - {_month_day(end)}, {end.year}"
    return f"{_month_day(start)}, {start.year} - {_month_day(end)}, {end.year}"


def resolve_last_days(days: int, today: datetime.date) -> str:
    """Resolve "Last N days" to the N-day window ending on today."""
    start = today - datetime.timedelta(days=days - 1)
    return format_date_range(start, today)


def extract_date_range(
    text: str,
    today: datetime.date | None = None,
    config: DateRangeConfig | None = None,
) -> str | None:
    """Extract the reporting window as a display string.

    Args:
        text: Full OCR text
        today: Date that ends a relative window (default: the current date)
        config: Relative range limits (default: DateRangeConfig())

    Returns:
        The explicit range as written, the resolved relative range, or None
    """
    config = config or DateRangeConfig()
    normalized = _WHITESPACE.sub(" ", text)

    if m := _EXPLICIT_RANGE.search(normalized):
        return m.group(0).strip()

    if m := _LAST_N_DAYS.search(normalized):
        days = int(m.group(1))
        if 1 <= days <= config.max_days:
            return resolve_last_days(days, today or datetime.date.today())

    return None
