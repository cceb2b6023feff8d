"""Configuration for the interactions fallback cascade."""

from __future__ import annotations

from pydantic import BaseModel, Field


class InteractionsConfig(BaseModel):
    """Limits applied by the interactions strategies.

    Small numbers such as 1, 30 and 31 are usually fragments of the date row
    ("Jan 1 - Jan 30") rather than the interactions total.
    """

    section_window: int = Field(
        default=900,
        gt=0,
        description="Maximum characters scanned after the interactions label.",
    )

    max_value: int = Field(
        default=99999, gt=0, description="Largest accepted value in the section."
    )

    block_max_value: int = Field(
        default=999999,
        gt=0,
        description="Largest accepted value in the content-type block fallback.",
    )

    block_padding: int = Field(
        default=400,
        ge=0,
        description="Characters kept after 'by content type' in the block fallback.",
    )

    block_window: int = Field(
        default=1000,
        gt=0,
        description="Maximum characters scanned by the block fallback.",
    )

    excluded_values: frozenset[int] = Field(
        default=frozenset({1, 30, 31}),
        description="Values rejected as date-row artifacts.",
    )
