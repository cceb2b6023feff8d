"""Configuration for locating dashboard sections in OCR text."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SectionConfig(BaseModel):
    """Window sizes for the topical sections of an Insights screen.

    The values were tuned against sample screenshots and are not derived from
    a documented layout rule.
    """

    locations_window: int = Field(
        default=1200,
        gt=0,
        description="Maximum characters kept after a top-locations heading.",
    )

    locations_min_end_offset: int = Field(
        default=80,
        ge=0,
        description=(
            "An end marker (age range, gender, by content type) only truncates "
            "the locations section when found beyond this offset."
        ),
    )

    gender_window: int = Field(
        default=500, gt=0, description="Maximum characters kept for gender."
    )

    content_type_window: int = Field(
        default=600,
        gt=0,
        description="Maximum characters kept after 'by content type'.",
    )
