"""Top cities: "<name> <percentage>%" rows in the locations section.

Two passes are combined:

1. Known cities from a fixed gazetteer, matched literally.
2. A generic "words followed by a percentage" heuristic for cities missing
   from the gazetteer. Its candidates go through a rejection filter, because
   content-type and follower rows often bleed into the locations section.

Candidates from both passes are deduplicated by (lowercased name, percentage)
and sorted by percentage, highest first.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from insights_ocr.metrics.config import CityConfig, SectionConfig
from insights_ocr.metrics.models import CityShare
from insights_ocr.metrics.numbers import parse_float
from insights_ocr.metrics.sections import locations_section

logger = logging.getLogger(__name__)

_GAZETTEER = (
    "Los Angeles", "San Francisco", "New York", "Quebec City",
    "Calgary", "Vancouver", "Toronto", "Montreal", "Edmonton", "Ottawa",
    "Burnaby", "Surrey", "Richmond", "Victoria", "Winnipeg", "Halifax",
    "Chicago", "Houston", "Miami", "Seattle", "Denver", "Phoenix", "Dallas",
    "Austin", "London", "Paris", "Sydney", "Melbourne", "Dubai", "Singapore",
    "Mississauga", "Brampton", "Hamilton", "Laval", "Nashville", "Boston",
    "Atlanta", "Las Vegas", "San Diego", "Philadelphia", "Washington",
    "Portland",
)  # fmt: skip

# Longer names first so "New York" is tried before any shorter overlap
KNOWN_CITIES: tuple[str, ...] = tuple(sorted(_GAZETTEER, key=len, reverse=True))

# Dashboard words that are never a city on their own
UI_STOP_WORDS = frozenset(
    {
        "all",
        "followers",
        "non-followers",
        "nonfollowers",
        "posts",
        "cities",
        "countries",
        "top",
        "locations",
        "stories",
        "reels",
        "by",
        "content",
        "type",
        "where",
        "your",
        "are",
        "from",
        "indie",
        "men",
        "women",
        "age",
        "gender",
        "audience",
    }
)

# Names containing these came from an unrelated percentage row
NON_CITY_SUBSTRINGS = ("indie", "reels", "posts", "stories", " li")

_PERCENT = r"([0-9]+(?:[.,][0-9]+)?)\s*%"
_NAME = r"([A-Za-z][A-Za-z \t\-']{1,40}?)"
_LINE_START = re.compile(rf"(?:^|\n)[ \t]*{_NAME}\s+{_PERCENT}")
_WORD_BOUNDARY = re.compile(rf"\b{_NAME}\s+{_PERCENT}")
_SPACES = re.compile(r"\s+")
_TRAILING_HYPHEN = re.compile(r"\s*-\s*$")
_DIGIT = re.compile(r"\d")


def _city_pattern(city: str) -> re.Pattern[str]:
    return re.compile(rf"(?:^|\s){re.escape(city)}\s+{_PERCENT}", re.IGNORECASE)


_KNOWN_CITY_PATTERNS = tuple((city, _city_pattern(city)) for city in KNOWN_CITIES)


def normalize_name(raw: str) -> str:
    """Trim, collapse whitespace and drop a dangling trailing hyphen."""
    name = _SPACES.sub(" ", raw.strip())
    return _TRAILING_HYPHEN.sub("", name)


def is_rejected_name(name: str, config: CityConfig | None = None) -> bool:
    """Return True if a generic candidate name is not a plausible city.

    Args:
        name: Normalized candidate name
        config: Length limits (default: CityConfig())
    """
    config = config or CityConfig()
    lowered = name.lower()
    if not config.min_name_length <= len(name) <= config.max_name_length:
        return True
    if lowered in UI_STOP_WORDS or _DIGIT.search(name):
        return True
    if name.endswith("-"):
        return True
    return any(s in lowered for s in NON_CITY_SUBSTRINGS)


class _CityCollector:
    """Accumulates city shares, deduplicated by (lowercased name, percentage)."""

    def __init__(self) -> None:
        self._seen: set[tuple[str, float]] = set()
        self.cities: list[CityShare] = []

    def add(self, name: str, percentage: float) -> None:
        key = (name.lower(), percentage)
        if key in self._seen:
            return
        self._seen.add(key)
        self.cities.append(CityShare(name=name, percentage=percentage))


def _known_city_patterns(
    config: CityConfig,
) -> Iterable[tuple[str, re.Pattern[str]]]:
    yield from _KNOWN_CITY_PATTERNS
    for city in config.extra_cities:
        yield city, _city_pattern(city)


def match_known_cities(
    section: str, collector: _CityCollector, config: CityConfig
) -> None:
    """Pass 1: gazetteer cities followed by a percentage."""
    for city, pattern in _known_city_patterns(config):
        for m in pattern.finditer(section):
            pct = parse_float(m.group(1))
            if pct is None or not 0 < pct <= 100:
                continue
            collector.add(city, pct)


def match_generic_cities(
    section: str, collector: _CityCollector, config: CityConfig
) -> None:
    """Pass 2: any short name followed by a percentage, minus rejected names."""
    # Line-start first, then word boundary for OCR output without newlines
    for pattern in (_LINE_START, _WORD_BOUNDARY):
        for m in pattern.finditer(section):
            name = normalize_name(m.group(1))
            if is_rejected_name(name, config):
                logger.debug("Rejected city candidate %r", name)
                continue
            pct = parse_float(m.group(2))
            if pct is None or not 0 < pct <= 100:
                continue
            collector.add(name, pct)


def extract_top_cities(
    text: str,
    config: CityConfig | None = None,
    section_config: SectionConfig | None = None,
) -> list[CityShare]:
    """Extract top cities from the locations section of text.

    Args:
        text: Full OCR text
        config: City matching configuration (default: CityConfig())
        section_config: Section windows (default: SectionConfig())

    Returns:
        Cities sorted by percentage, highest first; empty if none matched
    """
    config = config or CityConfig()
    section = locations_section(text, section_config)
    collector = _CityCollector()
    match_known_cities(section, collector, config)
    match_generic_cities(section, collector, config)
    return sorted(collector.cities, key=lambda c: c.percentage, reverse=True)
