"""Exceptions raised by insights_ocr."""


class InsightsOCRError(Exception):
    """Base class for errors raised outside the extraction engine.

    The engine itself never raises on malformed text; these errors belong to
    the OCR and I/O layers around it.
    """


class OCRError(InsightsOCRError):
    """Raised when text cannot be recognized from a screenshot."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source
