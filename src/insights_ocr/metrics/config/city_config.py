"""Configuration for top-city matching."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CityConfig(BaseModel):
    """Configuration for the top cities matcher."""

    min_name_length: int = Field(
        default=2, ge=1, description="Shortest accepted generic city name."
    )

    max_name_length: int = Field(
        default=35, ge=1, description="Longest accepted generic city name."
    )

    extra_cities: tuple[str, ...] = Field(
        default=(),
        description="City names matched in addition to the built-in gazetteer.",
    )
