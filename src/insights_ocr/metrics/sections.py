"""Locate topical sections of an Insights screen inside OCR text.

OCR text has no reliable structure, so a section is approximated as the
substring starting at a heading keyword and bounded by a character window
and/or the next heading that is known to follow it on screen.
"""

from __future__ import annotations

from collections.abc import Sequence

from insights_ocr.metrics.config import InteractionsConfig, SectionConfig

LOCATION_MARKERS = (
    "top cities",
    "top locations",
    "cities",
    "locations",
    "where your followers",
)
LOCATION_END_MARKERS = ("age range", "gender", "by content type")
GENDER_MARKERS = ("gender", "audience")
CONTENT_TYPE_MARKER = "by content type"
INTERACTIONS_MARKERS = ("interactions", "interacti0ns")
GROWTH_MARKER = "growth"


def find_marker(text: str, markers: Sequence[str]) -> int:
    """Return the index of the earliest marker in text, or -1.

    Matching is case-insensitive.
    """
    lowered = text.lower()
    positions = [i for i in (lowered.find(m) for m in markers) if i >= 0]
    return min(positions) if positions else -1


def locate_section(
    text: str,
    markers: Sequence[str],
    *,
    window: int | None = None,
    end_markers: Sequence[str] = (),
    min_end_offset: int = 0,
    end_padding: int = 0,
    default_start: int | None = None,
) -> str:
    """Return the substring of text that belongs to one section.

    The section starts at the earliest of ``markers``. It is first limited to
    ``window`` characters, then cut at each of ``end_markers`` (in order)
    whose first occurrence in the chunk lies beyond ``min_end_offset``. The
    cut keeps ``end_padding`` characters after the end marker.

    Args:
        text: Full OCR text
        markers: Heading phrases that start the section
        window: Maximum section length, or None for no limit
        end_markers: Phrases that end the section
        min_end_offset: End markers at or before this offset are ignored, so
            a heading that contains an end marker does not truncate itself
        end_padding: Characters kept after an end marker
        default_start: Start offset used when no marker is found. When None,
            the full text is returned unchanged in that case.

    Returns:
        The section text; never raises
    """
    start = find_marker(text, markers)
    if start < 0:
        if default_start is None:
            return text
        start = default_start

    chunk = text[start:] if window is None else text[start : start + window]
    for marker in end_markers:
        idx = chunk.lower().find(marker)
        if idx > min_end_offset:
            chunk = chunk[: idx + end_padding]
    return chunk


def locations_section(text: str, config: SectionConfig | None = None) -> str:
    """Section listing top cities, ending before age range/gender/content type."""
    config = config or SectionConfig()
    return locate_section(
        text,
        LOCATION_MARKERS,
        window=config.locations_window,
        end_markers=LOCATION_END_MARKERS,
        min_end_offset=config.locations_min_end_offset,
    )


def gender_section(text: str, config: SectionConfig | None = None) -> str:
    """Section holding the Men/Women split.

    Without a gender or audience heading, the window is taken from the start
    of the text so "Men" in unrelated rows further down is not picked up.
    """
    config = config or SectionConfig()
    return locate_section(
        text, GENDER_MARKERS, window=config.gender_window, default_start=0
    )


def content_type_section(text: str, config: SectionConfig | None = None) -> str:
    """Section following "By content type", or the full text if absent."""
    config = config or SectionConfig()
    return locate_section(
        text, (CONTENT_TYPE_MARKER,), window=config.content_type_window
    )


def interactions_section(
    text: str, config: InteractionsConfig | None = None
) -> str | None:
    """Section from the interactions label up to the growth heading.

    Returns:
        The section, or None when the text has no interactions label
    """
    config = config or InteractionsConfig()
    if find_marker(text, INTERACTIONS_MARKERS) < 0:
        return None
    return locate_section(
        text,
        INTERACTIONS_MARKERS,
        window=config.section_window,
        end_markers=(GROWTH_MARKER,),
    )


def interactions_block(
    text: str, config: InteractionsConfig | None = None
) -> str | None:
    """Wider block from the interactions label through the content-type rows.

    Returns:
        The block, or None when the text has no interactions label
    """
    config = config or InteractionsConfig()
    if find_marker(text, INTERACTIONS_MARKERS) < 0:
        return None
    return locate_section(
        text,
        INTERACTIONS_MARKERS,
        window=config.block_window,
        end_markers=(CONTENT_TYPE_MARKER,),
        end_padding=config.block_padding,
    )
