"""CLI configuration and argument parsing."""

from __future__ import annotations

import argparse
import datetime
from dataclasses import dataclass
from pathlib import Path


@dataclass
class ProcessingConfig:
    """Configuration for screenshot processing."""

    input_paths: list[Path]
    output_path: Path | None = None

    # Input flags
    text_input: bool = False
    per_image: bool = False
    today: datetime.date | None = None
    workers: int = 2

    # Output flags
    include_raw: bool = False
    progress: bool = True

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ProcessingConfig:
        """Create config from parsed arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            ProcessingConfig instance

        Raises:
            ValueError: If --today is not an ISO date
        """
        today = datetime.date.fromisoformat(args.today) if args.today else None

        return cls(
            input_paths=[Path(p) for p in args.input_paths],
            output_path=args.output,
            text_input=args.text,
            per_image=args.per_image,
            today=today,
            workers=args.workers,
            include_raw=args.include_raw,
            progress=not args.no_progress,
        )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and return command-line arguments.

    Args:
        argv: Arguments to parse (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description=(
            "Extract Instagram Insights metrics from screenshots (or from "
            "their OCR text) and print them as JSON."
        ),
        allow_abbrev=False,
    )

    # Basic arguments
    parser.add_argument(
        "input_paths",
        nargs="+",
        help="Screenshot images, or OCR text files when --text is given.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the JSON result to this file instead of stdout.",
    )

    # Input options group
    input_group = parser.add_argument_group("input options")
    input_group.add_argument(
        "--text",
        action="store_true",
        help="Treat inputs as OCR text files instead of images.",
    )
    input_group.add_argument(
        "--per-image",
        action="store_true",
        help=(
            "Extract metrics from each input separately and merge the records, "
            "instead of extracting once from the combined text."
        ),
    )
    input_group.add_argument(
        "--today",
        type=str,
        help=(
            "Date (YYYY-MM-DD) that ends a 'Last N days' window. "
            "(default: the current date)"
        ),
    )
    input_group.add_argument(
        "--workers",
        type=int,
        default=2,
        help="Number of concurrent OCR workers (default: 2).",
    )

    # Output options group
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--include-raw",
        action="store_true",
        help="Include the raw per-image text and errors in the output.",
    )
    output_group.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the OCR progress bar.",
    )
    output_group.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING).",
    )

    return parser.parse_args(argv)
