"""Assemble a MetricsRecord from raw OCR text.

Every extractor runs against the same input text and is independent of the
others' output. Only fields that were recovered are set on the record.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any

from insights_ocr.metrics.audience import (
    extract_age_ranges,
    extract_content_breakdown,
    extract_gender,
)
from insights_ocr.metrics.cities import extract_top_cities
from insights_ocr.metrics.config import ExtractorConfig
from insights_ocr.metrics.date_range import extract_date_range
from insights_ocr.metrics.fields import (
    extract_counts,
    extract_follower_percents,
    extract_growth,
    extract_trends,
)
from insights_ocr.metrics.interactions import extract_interactions
from insights_ocr.metrics.models import MetricsRecord

logger = logging.getLogger(__name__)


def extract_metrics(
    text: str,
    config: ExtractorConfig | None = None,
    today: datetime.date | None = None,
) -> MetricsRecord:
    """Extract Insights metrics from OCR text.

    This is a pure function of its arguments: it performs no I/O, keeps no
    state between calls and never raises on malformed text. Unrelated or
    empty text yields an empty record.

    Args:
        text: OCR text of one or more screenshots, concatenated
        config: Extractor configuration (default: ExtractorConfig())
        today: Date that ends a "Last N days" window (default: the current
            date)

    Returns:
        A frozen MetricsRecord holding only the recovered fields
    """
    config = config or ExtractorConfig()
    fields: dict[str, Any] = {}

    fields.update(extract_counts(text))
    fields.update(extract_follower_percents(text))
    fields.update(extract_trends(text))

    interactions = extract_interactions(text, config.interactions)
    if interactions is not None:
        fields["interactions"] = interactions

    content_breakdown = extract_content_breakdown(text, config.sections)
    if content_breakdown:
        fields["content_breakdown"] = tuple(content_breakdown)

    top_cities = extract_top_cities(text, config.cities, config.sections)
    if top_cities:
        fields["top_cities"] = tuple(top_cities)

    age_ranges = extract_age_ranges(text)
    if age_ranges:
        fields["age_ranges"] = tuple(age_ranges)

    gender = extract_gender(text, config.sections)
    if gender is not None:
        fields["gender"] = gender

    growth = extract_growth(text)
    if growth is not None:
        fields["growth"] = growth

    date_range = extract_date_range(text, today, config.date_range)
    if date_range is not None:
        fields["date_range"] = date_range

    logger.debug("Extracted %d metric field(s) from %d chars", len(fields), len(text))
    return MetricsRecord(**fields)
