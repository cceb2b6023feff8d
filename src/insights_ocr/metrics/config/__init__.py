"""Configuration classes for the metrics extractors."""

from insights_ocr.metrics.config.city_config import CityConfig
from insights_ocr.metrics.config.date_range_config import DateRangeConfig
from insights_ocr.metrics.config.extractor_config import ExtractorConfig
from insights_ocr.metrics.config.interactions_config import InteractionsConfig
from insights_ocr.metrics.config.section_config import SectionConfig

__all__ = [
    "CityConfig",
    "DateRangeConfig",
    "ExtractorConfig",
    "InteractionsConfig",
    "SectionConfig",
]
