"""Pydantic models for metrics recovered from Insights screenshots.

Every field of MetricsRecord is optional. A field is set only when its
extractor found a value that passed validation, so serializing a record with
``to_dict()`` yields exactly the keys that were recovered.
"""

from __future__ import annotations

from typing import Annotated, Literal

from annotated_types import Ge, Gt, Le
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from insights_ocr.utils import SerializationMixin

# Percentage value constrained to [0.0, 100.0] range
Percentage = Annotated[float, Ge(0), Le(100)]

# Non-negative count
Count = Annotated[int, Ge(0)]

ContentType = Literal["Stories", "Posts", "Reels"]

AgeRange = Literal["13-17", "18-24", "25-34", "35-44", "45-54", "55-64", "65+"]


class _FrozenModel(SerializationMixin, BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        allow_inf_nan=False,
    )


class ContentShare(_FrozenModel):
    """Share of views/interactions for one content type."""

    type: ContentType
    percentage: Percentage


class CityShare(_FrozenModel):
    """Share of the audience located in one city."""

    name: str
    percentage: Annotated[float, Gt(0), Le(100)]


class AgeRangeShare(_FrozenModel):
    """Share of the audience within one age bucket."""

    range: AgeRange
    percentage: Percentage


class Gender(_FrozenModel):
    """Audience gender split. The side that was not found is 0."""

    men: Percentage = 0.0
    women: Percentage = 0.0


class Growth(_FrozenModel):
    """Follower growth over the reporting window."""

    overall: int | None = None
    follows: Count | None = None
    unfollows: Count | None = None


class MetricsRecord(_FrozenModel):
    """Structured metrics recovered from one OCR text blob."""

    views: Count | None = None
    followers: Count | None = None
    interactions: Count | None = None
    accounts_reached: Count | None = None
    profile_visits: Count | None = None
    external_link_taps: Count | None = None
    saves: Count | None = None
    shares: Count | None = None
    impressions: Count | None = None
    reach: Count | None = None

    views_follower_percent: Percentage | None = None
    non_follower_percent: Percentage | None = None
    interactions_follower_percent: Percentage | None = None
    engagement_rate_percent: Percentage | None = None

    accounts_reached_change: str | None = None
    """Signed percentage string as shown on screen, e.g. "+12.3%"."""

    profile_visits_change: str | None = None
    """Signed percentage string as shown on screen, e.g. "-4%"."""

    follower_change_percent: float | None = None
    """Signed change from a "Followers +N% vs ..." trend row."""

    content_breakdown: tuple[ContentShare, ...] | None = None
    top_cities: tuple[CityShare, ...] | None = None
    age_ranges: tuple[AgeRangeShare, ...] | None = None
    gender: Gender | None = None
    growth: Growth | None = None
    date_range: str | None = None

    def is_empty(self) -> bool:
        """Return True if no metric was recovered."""
        return not self.to_dict()
