"""Label-adjacency extractors for the simple Insights metrics.

Each metric is described by an ordered tuple of patterns, usually "label then
number" followed by "number then label". The first match whose value passes
validation wins; a metric with no valid match is left absent.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import TypeVar

from insights_ocr.metrics.models import Growth
from insights_ocr.metrics.numbers import parse_float, parse_number, parse_percent

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PERCENT = r"([0-9]+(?:[.,][0-9]+)?)\s*%"
_TREND = r"([+-]?[0-9.]+%)"
_SIGNED_PERCENT = re.compile(r"[+-]?\d+(?:\.\d+)?%")
# Keeps a count from being read out of a percentage such as "45.2%"
_NOT_PERCENT = r"(?![\d.,]*\s*%)"
_NUMBER = rf"([0-9,]+){_NOT_PERCENT}"


def _patterns(*sources: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(s, re.IGNORECASE) for s in sources)


VIEWS_PATTERNS = _patterns(rf"Views?\s*{_NUMBER}", rf"{_NUMBER}\s*Views?")
FOLLOWERS_PATTERNS = _patterns(
    rf"{_NUMBER}\s*Followers?(?!\s*%)",
    rf"Followers?\s*{_NUMBER}",
)
ACCOUNTS_REACHED_PATTERNS = _patterns(
    rf"Accounts?\s*reached\s*{_NUMBER}", rf"{_NUMBER}\s*Accounts?\s*reached"
)
PROFILE_VISITS_PATTERNS = _patterns(
    rf"Profile\s*visits?\s*{_NUMBER}", rf"{_NUMBER}\s*Profile\s*visits?"
)
EXTERNAL_LINK_TAPS_PATTERNS = _patterns(rf"External\s*link\s*taps?\s*{_NUMBER}")
SAVES_PATTERNS = _patterns(rf"Saves?\s*{_NUMBER}", rf"{_NUMBER}\s*Saves?")
SHARES_PATTERNS = _patterns(rf"Shares?\s*{_NUMBER}", rf"{_NUMBER}\s*Shares?")
IMPRESSIONS_PATTERNS = _patterns(
    rf"Impressions?\s*{_NUMBER}", rf"{_NUMBER}\s*Impressions?"
)
REACH_PATTERNS = _patterns(rf"Reach\s*{_NUMBER}", rf"{_NUMBER}\s*Reach")

ENGAGEMENT_RATE_PATTERNS = _patterns(
    rf"Engagement\s*(?:rate)?\s*{_PERCENT}", rf"{_PERCENT}\s*Engagement"
)

ACCOUNTS_REACHED_CHANGE_PATTERNS = _patterns(
    rf"Accounts?\s*reached[^0-9+-]*{_TREND}",
    r"([+-][0-9.]+%)\s*.*Accounts?\s*reached",
)
PROFILE_VISITS_CHANGE_PATTERNS = _patterns(
    rf"Profile\s*visits?[^0-9+-]*{_TREND}", r"([+-][0-9.]+%)\s*.*Profile"
)
FOLLOWER_CHANGE_PATTERNS = _patterns(
    r"Followers?\s*[^0-9+-]*([+-]?[0-9.]+)%\s*vs", r"([+-][0-9.]+)%\s*vs"
)

# "Followers" must not be read out of "Non-followers"
FOLLOWER_PERCENT_PATTERNS = _patterns(
    rf"(?<!non)(?<!non-)(?<!non )Followers?\s*{_PERCENT}"
)
NON_FOLLOWER_PERCENT_PATTERNS = _patterns(rf"Non[- ]?followers?\s*{_PERCENT}")

GROWTH_OVERALL_PATTERNS = _patterns(r"Overall\s*([+-]?[0-9,]+)")
GROWTH_FOLLOWS_PATTERNS = _patterns(rf"(?<!un)Follows?\s*{_NUMBER}")
GROWTH_UNFOLLOWS_PATTERNS = _patterns(rf"Unfollows?\s*{_NUMBER}")


def first_valid(
    text: str,
    patterns: Sequence[re.Pattern[str]],
    parse: Callable[[str], T | None],
) -> T | None:
    """Return the first parsed value that passes validation.

    Patterns are tried in order; within a pattern, matches are tried in text
    order. ``parse`` receives the first capture group and returns None to
    reject it.
    """
    for pattern in patterns:
        for m in pattern.finditer(text):
            value = parse(m.group(1))
            if value is not None:
                return value
    return None


def parse_count(token: str) -> int | None:
    """Parse an integer token; tokens without digits are rejected."""
    if not any(c.isdigit() for c in token):
        return None
    return parse_number(token)


def parse_trend(token: str) -> str | None:
    """Keep a signed percentage such as "+12.3%" verbatim."""
    return token if _SIGNED_PERCENT.fullmatch(token) else None


def extract_counts(text: str) -> dict[str, int]:
    """Extract every simple count that is present in text.

    Returns:
        Mapping of MetricsRecord field name to value
    """
    rules: dict[str, Sequence[re.Pattern[str]]] = {
        "views": VIEWS_PATTERNS,
        "followers": FOLLOWERS_PATTERNS,
        "accounts_reached": ACCOUNTS_REACHED_PATTERNS,
        "profile_visits": PROFILE_VISITS_PATTERNS,
        "external_link_taps": EXTERNAL_LINK_TAPS_PATTERNS,
        "saves": SAVES_PATTERNS,
        "shares": SHARES_PATTERNS,
        "impressions": IMPRESSIONS_PATTERNS,
        "reach": REACH_PATTERNS,
    }
    found: dict[str, int] = {}
    for field, patterns in rules.items():
        value = first_valid(text, patterns, parse_count)
        if value is not None:
            found[field] = value
    return found


def extract_trends(text: str) -> dict[str, str | float]:
    """Extract trend values: change percentages and the engagement rate."""
    found: dict[str, str | float] = {}

    accounts_reached_change = first_valid(
        text, ACCOUNTS_REACHED_CHANGE_PATTERNS, parse_trend
    )
    if accounts_reached_change is not None:
        found["accounts_reached_change"] = accounts_reached_change

    profile_visits_change = first_valid(
        text, PROFILE_VISITS_CHANGE_PATTERNS, parse_trend
    )
    if profile_visits_change is not None:
        found["profile_visits_change"] = profile_visits_change

    follower_change = first_valid(text, FOLLOWER_CHANGE_PATTERNS, parse_float)
    if follower_change is not None:
        found["follower_change_percent"] = follower_change

    engagement_rate = first_valid(text, ENGAGEMENT_RATE_PATTERNS, parse_percent)
    if engagement_rate is not None:
        found["engagement_rate_percent"] = engagement_rate

    return found


def extract_follower_percents(text: str) -> dict[str, float]:
    """Extract follower and non-follower percentages.

    The dashboard shows one follower split for views and another for
    interactions. When an interactions label is present the text is split
    there and each block is read on its own.
    """
    found: dict[str, float] = {}
    split = text.lower().find("interactions")

    if split >= 0:
        views_block = text[:split]
        interactions_block = text[split:]
        logger.debug("Splitting follower percentages at offset %d", split)
    else:
        views_block = text
        interactions_block = ""

    views_follower = first_valid(
        views_block, FOLLOWER_PERCENT_PATTERNS, parse_percent
    )
    if views_follower is not None:
        found["views_follower_percent"] = views_follower

    non_follower = first_valid(
        views_block, NON_FOLLOWER_PERCENT_PATTERNS, parse_percent
    )
    if non_follower is not None:
        found["non_follower_percent"] = non_follower

    if interactions_block:
        interactions_follower = first_valid(
            interactions_block, FOLLOWER_PERCENT_PATTERNS, parse_percent
        )
        if interactions_follower is not None:
            found["interactions_follower_percent"] = interactions_follower

    return found


def extract_growth(text: str) -> Growth | None:
    """Extract overall growth, follows and unfollows.

    Returns:
        Growth with the sub-fields that matched, or None if none did
    """
    overall = first_valid(text, GROWTH_OVERALL_PATTERNS, parse_count)
    follows = first_valid(text, GROWTH_FOLLOWS_PATTERNS, parse_count)
    unfollows = first_valid(text, GROWTH_UNFOLLOWS_PATTERNS, parse_count)
    if overall is None and follows is None and unfollows is None:
        return None
    return Growth(overall=overall, follows=follows, unfollows=unfollows)

