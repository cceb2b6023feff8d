"""Turn Instagram Insights screenshots into structured metrics."""

from insights_ocr.metrics import MetricsRecord, extract_metrics

__all__ = [
    "MetricsRecord",
    "extract_metrics",
]
