"""Metrics extraction from Insights OCR text."""

from insights_ocr.metrics.assembler import extract_metrics
from insights_ocr.metrics.config import ExtractorConfig
from insights_ocr.metrics.date_range import extract_date_range
from insights_ocr.metrics.merge import merge_records
from insights_ocr.metrics.models import (
    AgeRangeShare,
    CityShare,
    ContentShare,
    Gender,
    Growth,
    MetricsRecord,
)
from insights_ocr.metrics.numbers import parse_number, parse_percent

__all__ = [
    "AgeRangeShare",
    "CityShare",
    "ContentShare",
    "ExtractorConfig",
    "Gender",
    "Growth",
    "MetricsRecord",
    "extract_date_range",
    "extract_metrics",
    "merge_records",
    "parse_number",
    "parse_percent",
]
