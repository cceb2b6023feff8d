"""
OCR utilities for extracting text from Insights screenshots.

Provides an abstraction layer over OCR libraries (currently pytesseract) so
the extraction engine never depends on image handling and tests can swap in
a fake.
"""

from __future__ import annotations

import logging
import shutil

import pytesseract
from PIL import Image as PILImage

from insights_ocr.errors import OCRError

logger = logging.getLogger(__name__)

# --psm 6: treat the screenshot as a single uniform block of text, which is
# faster than full page segmentation on dashboard screens
DEFAULT_TESSERACT_CONFIG = r"--psm 6"

# Wide enough to keep dashboard labels readable, small enough to OCR quickly
DEFAULT_MAX_WIDTH = 720


def get_tesseract_path() -> str | None:
    """Find the tesseract executable path."""
    return shutil.which("tesseract")


def prepare_image(
    image: PILImage.Image, max_width: int = DEFAULT_MAX_WIDTH
) -> PILImage.Image:
    """Downscale a screenshot to at most max_width pixels wide.

    Args:
        image: PIL Image.
        max_width: Maximum width in pixels; narrower images are returned as is.

    Returns:
        The resized image, keeping the aspect ratio.
    """
    if image.width <= max_width:
        return image
    height = round(image.height * max_width / image.width)
    return image.resize((max_width, height), PILImage.Resampling.LANCZOS)


class OCR:
    """OCR engine for extracting text from screenshots."""

    def __init__(
        self,
        lang: str = "eng",
        config: str = DEFAULT_TESSERACT_CONFIG,
        max_width: int | None = DEFAULT_MAX_WIDTH,
    ) -> None:
        """Initialize OCR engine.

        Args:
            lang: Tesseract language code.
            config: Extra tesseract command-line options.
            max_width: Downscale wider images to this width before OCR, or
                None to keep the original size.
        """
        self.lang = lang
        self.config = config
        self.max_width = max_width
        # Set the tesseract command explicitly to avoid PATH issues in sandboxes
        tesseract_path = get_tesseract_path()
        if tesseract_path:
            pytesseract.pytesseract.tesseract_cmd = tesseract_path

    def extract_text(self, image: PILImage.Image, source: str = "<image>") -> str:
        """Extract text from a screenshot.

        Args:
            image: PIL Image.
            source: Name of the image, used in error messages.

        Returns:
            The recognized text; may be empty.

        Raises:
            OCRError: If tesseract is not installed or fails on the image.
        """
        if not get_tesseract_path():
            raise OCRError(source, "tesseract is not available")

        if self.max_width is not None:
            image = prepare_image(image, self.max_width)

        try:
            return pytesseract.image_to_string(
                image, lang=self.lang, config=self.config
            )
        except (pytesseract.TesseractError, OSError, RuntimeError) as e:
            raise OCRError(source, f"OCR failed: {e}") from e
