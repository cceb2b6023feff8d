"""OCR of Insights screenshots."""

from insights_ocr.ocr.batch import ImageText, combine_texts, ocr_image, ocr_images
from insights_ocr.ocr.ocr import OCR, prepare_image

__all__ = [
    "ImageText",
    "OCR",
    "combine_texts",
    "ocr_image",
    "ocr_images",
    "prepare_image",
]
