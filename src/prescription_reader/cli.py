#!/usr/bin/env python3
"""
Prescription Reader command line

Parses OCR text of a prescription and prints what was found.

Usage:
    prescription-reader ocr_output.txt
    prescription-reader ocr_output.txt --json       # Wire-format JSON
    tesseract rx.png - | prescription-reader --validate
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import logging_settings
from .core.pipeline import PrescriptionParser
from .core.summary import format_prescription_text
from .utils.logging import setup_logging
from .validators import validate_prescription

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prescription-reader",
        description="Extract doctor, patient, date, medications and notes from OCR text"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Text file with OCR output (reads stdin when omitted)"
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a text summary")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Report completeness warnings; exit 1 when any are found"
    )
    parser.add_argument(
        "--log-level",
        default=logging_settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging level (default from RX_READER_LOG_LEVEL)"
    )
    return parser


def read_input(path: Optional[Path]) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_bytes().decode("utf-8", errors="replace")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(level=args.log_level, format_json=logging_settings.LOG_JSON)

    try:
        text = read_input(args.file)
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return EXIT_UNREADABLE

    data = PrescriptionParser().parse(text)
    validation = validate_prescription(data) if args.validate else None

    if args.json:
        payload = data.to_dict()
        if validation is not None:
            payload["validation"] = validation.to_dict()
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(format_prescription_text(data), end="")
        if validation is not None and validation.warnings:
            print("\nWarnings:")
            for warning in validation.warnings:
                print(f"  - {warning}")

    if validation is not None and not validation.is_valid:
        return EXIT_INVALID
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
