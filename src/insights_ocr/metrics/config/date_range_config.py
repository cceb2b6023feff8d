"""Configuration for date range resolution."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DateRangeConfig(BaseModel):
    """Configuration for resolving "Last N days" phrases."""

    max_days: int = Field(
        default=365, ge=1, description="Largest N accepted in 'Last N days'."
    )
