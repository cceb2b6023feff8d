"""Interactions total: an ordered cascade of extraction strategies.

The interactions total is the hardest number to read from an Insights screen.
OCR often separates it from its label, and the surrounding rows are full of
small numbers from the date range ("Jan 1 - Jan 30"), percentages and the
"Last 30 days" selector. Each strategy below returns a value or None; the
first non-None value wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator

from insights_ocr.metrics.config import InteractionsConfig
from insights_ocr.metrics.numbers import parse_number
from insights_ocr.metrics.sections import interactions_block, interactions_section

logger = logging.getLogger(__name__)

InteractionsStrategy = Callable[[str, InteractionsConfig], int | None]

_IMMEDIATE = re.compile(
    r"(?:Total\s+)?Interacti[o0]ns\s*([0-9,]{1,6})(?![\d.,]*\s*%)", re.IGNORECASE
)
_STANDALONE_LINE = re.compile(r"^\s*([0-9]{1,5})\s*$")
_LINE_END_NUMBER = re.compile(r"\s+([0-9,]{1,5})\s*$")
_ANY_NUMBER = re.compile(r"\b([0-9,]+)\b")
_THIRTY_DAYS = re.compile(r"30\s*days?", re.IGNORECASE)
_UNSCOPED = (
    re.compile(r"Interactions?\s*([0-9,]+)(?![\d,]*\s*days?)", re.IGNORECASE),
    re.compile(r"([0-9,]+)\s*Interactions?", re.IGNORECASE),
)
# A number directly followed by one of these is part of a decimal,
# a percentage or a date
_FRAGMENT_SUFFIXES = (".", ",", "%")


def _is_candidate(
    n: int, config: InteractionsConfig, *, upper: int, thirty_days: bool = False
) -> bool:
    if not 1 <= n <= upper:
        return False
    if n in config.excluded_values:
        return False
    # "Last 30 days" puts a 30 next to the total
    return not (n == 30 and thirty_days)


def _standalone_numbers(section: str) -> Iterator[str]:
    """Yield numbers in text order, skipping decimal/percent/date fragments."""
    for m in _ANY_NUMBER.finditer(section):
        if section[m.end() : m.end() + 1] in _FRAGMENT_SUFFIXES:
            continue
        yield m.group(1)


def immediate_number(text: str, config: InteractionsConfig) -> int | None:
    """Number right after the "Interactions" label."""
    m = _IMMEDIATE.search(text)
    if m is None:
        return None
    n = parse_number(m.group(1))
    return n if _is_candidate(n, config, upper=config.max_value) else None


def standalone_line(text: str, config: InteractionsConfig) -> int | None:
    """First line in the section that holds nothing but a number."""
    section = interactions_section(text, config)
    if section is None:
        return None
    for line in section.splitlines():
        m = _STANDALONE_LINE.match(line)
        if m is None:
            continue
        n = parse_number(m.group(1))
        if _is_candidate(n, config, upper=config.max_value):
            return n
    return None


def line_ending_number(text: str, config: InteractionsConfig) -> int | None:
    """First line in the section that ends in a number, e.g. "Something 25"."""
    section = interactions_section(text, config)
    if section is None:
        return None
    thirty_days = _THIRTY_DAYS.search(section) is not None
    for line in section.splitlines():
        m = _LINE_END_NUMBER.search(line)
        if m is None:
            continue
        n = parse_number(m.group(1))
        if _is_candidate(n, config, upper=config.max_value, thirty_days=thirty_days):
            return n
    return None


def first_number_in_section(text: str, config: InteractionsConfig) -> int | None:
    """First plausible number in the section, for OCR output without newlines."""
    section = interactions_section(text, config)
    if section is None:
        return None
    thirty_days = _THIRTY_DAYS.search(section) is not None
    for token in _standalone_numbers(section):
        n = parse_number(token)
        if _is_candidate(n, config, upper=config.max_value, thirty_days=thirty_days):
            return n
    return None


def last_number_in_block(text: str, config: InteractionsConfig) -> int | None:
    """Last plausible number in the block that runs through "By content type".

    On the interactions screen the total tends to be printed near the end of
    this block, so numbers are scanned backwards.
    """
    block = interactions_block(text, config)
    if block is None:
        return None
    thirty_days = _THIRTY_DAYS.search(block) is not None
    for token in reversed(list(_standalone_numbers(block))):
        n = parse_number(token)
        if _is_candidate(
            n, config, upper=config.block_max_value, thirty_days=thirty_days
        ):
            return n
    return None


def unscoped_label(text: str, config: InteractionsConfig) -> int | None:
    """Label-adjacent number anywhere in the text, e.g. "120 Interactions"."""
    for pattern in _UNSCOPED:
        for m in pattern.finditer(text):
            if not any(c.isdigit() for c in m.group(1)):
                continue
            n = parse_number(m.group(1))
            if n not in config.excluded_values:
                return n
    return None


INTERACTIONS_STRATEGIES: tuple[InteractionsStrategy, ...] = (
    immediate_number,
    standalone_line,
    line_ending_number,
    first_number_in_section,
    last_number_in_block,
    unscoped_label,
)


def extract_interactions(
    text: str,
    config: InteractionsConfig | None = None,
    strategies: tuple[InteractionsStrategy, ...] = INTERACTIONS_STRATEGIES,
) -> int | None:
    """Run the interactions strategies in order and return the first value.

    Args:
        text: Full OCR text
        config: Limits for the strategies (default: InteractionsConfig())
        strategies: Ordered strategies to try

    Returns:
        The interactions total, or None if no strategy found one
    """
    config = config or InteractionsConfig()
    for strategy in strategies:
        value = strategy(text, config)
        if value is not None:
            logger.debug("Interactions %d found by %s", value, strategy.__name__)
            return value
    return None
