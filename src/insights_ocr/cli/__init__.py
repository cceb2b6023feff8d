"""Command-line interface helpers."""

from insights_ocr.cli.config import ProcessingConfig, parse_arguments
from insights_ocr.cli.io import load_texts, write_output
from insights_ocr.cli.output_models import ExtractionOutput

__all__ = [
    "ExtractionOutput",
    "ProcessingConfig",
    "load_texts",
    "parse_arguments",
    "write_output",
]
