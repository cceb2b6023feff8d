"""Input/Output operations for metrics extraction."""

import logging
from pathlib import Path

from insights_ocr.cli.output_models import ExtractionOutput
from insights_ocr.ocr import ImageText

logger = logging.getLogger(__name__)


def load_texts(paths: list[Path]) -> list[ImageText]:
    """Load OCR text files as if they had been OCR'd in order.

    Args:
        paths: Text file paths

    Returns:
        One ImageText per path; unreadable files carry an error note
    """
    results = []
    for index, path in enumerate(paths):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read %s: %s", path, e)
            results.append(ImageText(index=index, source=str(path), error=str(e)))
            continue
        results.append(ImageText(index=index, source=str(path), text=text))
    return results


def write_output(output: ExtractionOutput, output_path: Path | None) -> None:
    """Write the result as JSON to a file, or to stdout when no path is given.

    Args:
        output: Extraction result
        output_path: Destination file, or None for stdout
    """
    data = output.to_json(indent=2)
    if output_path is None:
        print(data)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(data + "\n", encoding="utf-8")
    logger.info("Saved: %s", output_path)
