"""Main CLI entry point for Insights metrics extraction."""

import logging
from pathlib import Path

from insights_ocr.cli import (
    ExtractionOutput,
    ProcessingConfig,
    load_texts,
    parse_arguments,
    write_output,
)
from insights_ocr.metrics import MetricsRecord, extract_metrics, merge_records
from insights_ocr.ocr import ImageText, combine_texts, ocr_images

logger = logging.getLogger(__name__)


def _setup_logging(log_level: str) -> None:
    """Configure logging based on level.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _validate_input_path(path: Path) -> bool:
    """Validate that an input file exists.

    Args:
        path: Path to a screenshot or text file

    Returns:
        True if file exists, False otherwise
    """
    if not path.exists():
        logger.error("File not found: %s", path)
        return False
    return True


def _read_inputs(config: ProcessingConfig) -> list[ImageText]:
    """OCR the screenshots, or load the text files, named in config."""
    if config.text_input:
        return load_texts(config.input_paths)
    return ocr_images(
        config.input_paths,
        max_workers=config.workers,
        progress=config.progress,
    )


def _extract(config: ProcessingConfig, results: list[ImageText]) -> MetricsRecord:
    """Extract metrics from the combined text, or per image and merged."""
    if not config.per_image:
        return extract_metrics(combine_texts(results), today=config.today)

    records = [
        extract_metrics(r.text, today=config.today)
        for r in sorted(results, key=lambda r: r.index)
        if r.text is not None
    ]
    return merge_records(records)


def process(config: ProcessingConfig) -> int:
    """Process the inputs named in config and write the JSON result.

    Args:
        config: Processing configuration

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    results = _read_inputs(config)
    failed = sum(1 for r in results if r.error is not None)
    if failed:
        logger.warning("%d of %d input(s) could not be read", failed, len(results))

    record = _extract(config, results)
    logger.info("Found %d metric field(s)", len(record.to_dict()))

    output = ExtractionOutput(
        record=record,
        images=results if config.include_raw else None,
    )
    write_output(output, config.output_path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the Insights metrics CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = parse_arguments(argv)
    _setup_logging(args.log_level)

    try:
        config = ProcessingConfig.from_args(args)
    except ValueError as e:
        logger.error("Invalid --today: %s", e)
        return 2

    # Validate inputs
    for path in config.input_paths:
        if not _validate_input_path(path):
            return 2

    return process(config)


if __name__ == "__main__":
    raise SystemExit(main())
