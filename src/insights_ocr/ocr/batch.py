"""OCR many screenshots concurrently and combine their text."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PIL import Image as PILImage
from pydantic import BaseModel, ConfigDict
from tqdm.contrib.concurrent import thread_map

from insights_ocr.errors import OCRError
from insights_ocr.ocr.ocr import OCR
from insights_ocr.utils import SerializationMixin

logger = logging.getLogger(__name__)

# Separates the text of consecutive screenshots
TEXT_SEPARATOR = "\n\n"


class ImageText(SerializationMixin, BaseModel):
    """OCR result for one screenshot.

    Exactly one of ``text`` and ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    source: str
    text: str | None = None
    error: str | None = None


def _load_image(path: Path) -> PILImage.Image:
    try:
        with PILImage.open(path) as image:
            image.load()
            return image
    except (
        OSError,
        PILImage.DecompressionBombError,
        PILImage.DecompressionBombWarning,
    ) as e:
        raise OCRError(str(path), f"cannot read image: {e}") from e


def ocr_image(ocr: OCR, index: int, path: Path) -> ImageText:
    """OCR one screenshot, turning a failure into an error note.

    Args:
        ocr: OCR engine
        index: Position of the screenshot in the batch
        path: Path to the screenshot

    Returns:
        ImageText with either the text or the error message
    """
    try:
        text = ocr.extract_text(_load_image(path), source=str(path))
    except OCRError as e:
        logger.warning("Screenshot %d failed: %s", index + 1, e)
        return ImageText(index=index, source=str(path), error=str(e))
    logger.debug("Screenshot %d processed (%d chars)", index + 1, len(text))
    return ImageText(index=index, source=str(path), text=text)


def ocr_images(
    paths: Sequence[Path],
    ocr: OCR | None = None,
    max_workers: int = 2,
    progress: bool = True,
) -> list[ImageText]:
    """OCR screenshots concurrently.

    One screenshot failing does not stop the others.

    Args:
        paths: Screenshot paths
        ocr: OCR engine (default: OCR())
        max_workers: Number of worker threads
        progress: Show a progress bar

    Returns:
        One ImageText per path, in the order of ``paths``
    """
    ocr = ocr or OCR()
    return thread_map(
        lambda item: ocr_image(ocr, item[0], item[1]),
        list(enumerate(paths)),
        max_workers=max_workers,
        desc="OCR",
        unit="image",
        disable=not progress,
    )


def combine_texts(results: Sequence[ImageText]) -> str:
    """Join the text of successful results in screenshot order."""
    ordered = sorted(results, key=lambda r: r.index)
    return TEXT_SEPARATOR.join(r.text for r in ordered if r.text is not None)
