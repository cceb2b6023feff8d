"""Pydantic models for JSON output serialization."""

from pydantic import BaseModel

from insights_ocr.metrics import MetricsRecord
from insights_ocr.ocr import ImageText
from insights_ocr.utils import SerializationMixin


class ExtractionOutput(SerializationMixin, BaseModel):
    """Metrics for a batch of screenshots.

    ``images`` holds the raw text (or error note) of each screenshot and is
    only included when requested.
    """

    record: MetricsRecord
    images: list[ImageText] | None = None
