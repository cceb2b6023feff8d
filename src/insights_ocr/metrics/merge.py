"""Merge MetricsRecords extracted from separate screenshots."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from insights_ocr.metrics.models import (
    AgeRangeShare,
    CityShare,
    ContentShare,
    Gender,
    Growth,
    MetricsRecord,
)

T = TypeVar("T", CityShare, AgeRangeShare, ContentShare)

_LIST_KEYS: dict[str, Callable[[Any], str]] = {
    "top_cities": lambda c: c.name,
    "age_ranges": lambda r: r.range,
    "content_breakdown": lambda s: s.type,
}


def dedupe_shares(items: Iterable[T], key: Callable[[T], str]) -> tuple[T, ...]:
    """Keep the highest share per key, sorted by percentage, highest first."""
    best: dict[str, T] = {}
    for item in items:
        k = key(item)
        if k not in best or item.percentage > best[k].percentage:
            best[k] = item
    return tuple(sorted(best.values(), key=lambda i: i.percentage, reverse=True))


def _merge_scalar(current: Any, value: Any) -> Any:
    if current is None:
        return value
    # Strings (date range, trends) keep the first value seen
    if isinstance(value, str):
        return current
    return max(current, value)


def merge_records(records: Sequence[MetricsRecord]) -> MetricsRecord:
    """Combine records from several screenshots into one.

    - Numbers keep the largest value seen.
    - Strings keep the first value seen, not the lexicographically largest,
      so a later screenshot cannot replace the date range or a trend just
      because its text sorts higher.
    - ``gender`` and ``growth`` merge field by field, later records winning.
    - Lists are concatenated, then deduplicated by name/range/type keeping the
      highest percentage.

    Args:
        records: Records in screenshot order

    Returns:
        The merged record
    """
    merged: dict[str, Any] = {}
    lists: dict[str, list] = {key: [] for key in _LIST_KEYS}
    gender: dict[str, float] = {}
    growth: dict[str, int] = {}

    for record in records:
        for name in MetricsRecord.model_fields:
            value = getattr(record, name)
            if value is None:
                continue
            if name in lists:
                lists[name].extend(value)
            elif name == "gender":
                gender.update(value.model_dump())
            elif name == "growth":
                growth.update(value.model_dump(exclude_none=True))
            else:
                merged[name] = _merge_scalar(merged.get(name), value)

    for name, items in lists.items():
        if items:
            merged[name] = dedupe_shares(items, _LIST_KEYS[name])
    if gender:
        merged["gender"] = Gender(**gender)
    if growth:
        merged["growth"] = Growth(**growth)

    return MetricsRecord(**merged)
