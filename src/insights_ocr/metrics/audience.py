"""Audience breakdowns: gender, age ranges and content type."""

from __future__ import annotations

import re

from insights_ocr.metrics.config import SectionConfig
from insights_ocr.metrics.models import AgeRangeShare, ContentShare, Gender
from insights_ocr.metrics.numbers import parse_percent
from insights_ocr.metrics.sections import content_type_section, gender_section

_PERCENT = r"([0-9]+(?:[.,][0-9]+)?)\s*%"

_MEN = re.compile(r"\b(?:Men|Male|Man)\s*([0-9]+[.,]?[0-9]*)\s*%", re.IGNORECASE)
# "Womcn" is a frequent OCR misread of "Women"
_WOMEN = re.compile(
    r"\b(?:Women|Female|Wom[ae]n|Womcn)\s*([0-9]+[.,]?[0-9]*)\s*%", re.IGNORECASE
)

# Hyphen, en-dash, em-dash or whitespace between the bounds
_DASH = "[\\-\\s–—]*"


def _age_pattern(low: int, high: int) -> re.Pattern[str]:
    return re.compile(rf"{low}{_DASH}{high}\s*{_PERCENT}", re.IGNORECASE)


AGE_RANGE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("13-17", _age_pattern(13, 17)),
    ("18-24", _age_pattern(18, 24)),
    ("25-34", _age_pattern(25, 34)),
    ("35-44", _age_pattern(35, 44)),
    ("45-54", _age_pattern(45, 54)),
    ("55-64", _age_pattern(55, 64)),
    ("65+", re.compile(rf"65\s*\+\s*{_PERCENT}", re.IGNORECASE)),
)

CONTENT_TYPE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Stories", re.compile(rf"Stor(?:ies|ics|les)\s*{_PERCENT}", re.IGNORECASE)),
    # "Posts" must not be the "... posts from ..." caption
    ("Posts", re.compile(rf"Posts?\s*{_PERCENT}(?!\s*from)", re.IGNORECASE)),
    ("Reels", re.compile(rf"Reels?\s*{_PERCENT}", re.IGNORECASE)),
)


def extract_gender(text: str, config: SectionConfig | None = None) -> Gender | None:
    """Extract the Men/Women split from the gender section.

    Returns:
        Gender with the unmatched side set to 0, or None if neither matched
    """
    section = gender_section(text, config)
    men = women = None
    if m := _MEN.search(section):
        men = parse_percent(m.group(1))
    if m := _WOMEN.search(section):
        women = parse_percent(m.group(1))
    if men is None and women is None:
        return None
    return Gender(men=men or 0.0, women=women or 0.0)


def extract_age_ranges(text: str) -> list[AgeRangeShare]:
    """Extract the age buckets found anywhere in text, highest share first."""
    ranges = []
    for age_range, pattern in AGE_RANGE_PATTERNS:
        m = pattern.search(text)
        if m is None:
            continue
        pct = parse_percent(m.group(1))
        if pct is not None:
            ranges.append(AgeRangeShare(range=age_range, percentage=pct))
    return sorted(ranges, key=lambda r: r.percentage, reverse=True)


def extract_content_breakdown(
    text: str, config: SectionConfig | None = None
) -> list[ContentShare]:
    """Extract Stories/Posts/Reels shares from the "By content type" section.

    Scoping to that section keeps "Posts" in "Featured posts" and other UI
    from being read as a share.
    """
    section = content_type_section(text, config)
    shares = []
    for content_type, pattern in CONTENT_TYPE_PATTERNS:
        m = pattern.search(section)
        if m is None:
            continue
        pct = parse_percent(m.group(1))
        if pct is not None:
            shares.append(ContentShare(type=content_type, percentage=pct))
    return sorted(shares, key=lambda s: s.percentage, reverse=True)
