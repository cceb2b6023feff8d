"""Configuration for the metrics extractor."""

from __future__ import annotations

from pydantic import BaseModel, Field

from insights_ocr.metrics.config.city_config import CityConfig
from insights_ocr.metrics.config.date_range_config import DateRangeConfig
from insights_ocr.metrics.config.interactions_config import InteractionsConfig
from insights_ocr.metrics.config.section_config import SectionConfig


class ExtractorConfig(BaseModel):
    """Configuration for the metrics extractor."""

    sections: SectionConfig = Field(default_factory=SectionConfig)
    """Window sizes of the topical sections."""

    interactions: InteractionsConfig = Field(default_factory=InteractionsConfig)
    """Limits for the interactions cascade."""

    cities: CityConfig = Field(default_factory=CityConfig)
    """Configuration for top city matching."""

    date_range: DateRangeConfig = Field(default_factory=DateRangeConfig)
    """Configuration for relative date ranges."""
