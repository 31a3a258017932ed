"""CLI entry point for the date/time normalizer."""

import argparse
import logging
import sys

from .modules.cli import run_parse
from .modules.config import OUTPUT_FORMATS, load_config
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="datetime-normalizer",
        description="Normalize loosely formatted date/time lines to RFC 3339 with a fixed UTC offset.",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        default=["-"],
        help="Files, http(s) URLs, or '-' for stdin (default: stdin)",
    )
    parser.add_argument("-c", "--config", default=None, help="Path to config JSON file (default: built-in settings)")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format (default: value from config)")
    parser.add_argument("-o", "--output", default=None, help="Also write all results to this JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    return parser.parse_args(argv)


def main(argv=None):
    """Application entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    config = load_config(args.config)
    logger.debug("Sources: %s", ", ".join(args.sources))
    return run_parse(config, args.sources, output_format=args.format, output_path=args.output)


if __name__ == "__main__":
    sys.exit(main())
