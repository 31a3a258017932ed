"""CLI command implementations for the date/time normalizer."""

import logging

import requests

from .cascade import parse
from .clock import LocalClockContext
from .report import build_record, format_json, format_text, write_report
from .result import ParseFailure
from .source import read_lines

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERRORS = 1
EXIT_SOURCE_ERROR = 2


def run_parse(config, sources, output_format=None, output_path=None, clock=None):
    """Parse every line of every source and print one result per line.

    Parameters
    ----------
    config : AppConfig
        Application configuration.
    sources : list[str]
        File paths, ``-`` for stdin, or http(s) URLs.
    output_format : str, optional
        ``text`` or ``json``; defaults to ``config.output.format``.
    output_path : str, optional
        Also write all records to this JSON file.
    clock : LocalClockContext, optional
        Shared by every line; sampled once when omitted.

    Returns
    -------
    int
        Process exit status.
    """
    output_format = output_format or config.output.format
    clock = clock or LocalClockContext.now()
    logger.debug("Local clock: %s, offset %s", clock.today.isoformat(), clock.utc_offset)

    records = []
    failed = 0
    source_error = False

    for source in sources:
        try:
            lines = read_lines(source)
        except (OSError, requests.RequestException) as exc:
            logger.error("Failed to read %s: %s", source, exc)
            source_error = True
            continue

        for line in lines:
            try:
                result = parse(line, clock, config.settings)
                record = build_record(line, result=result)
            except ParseFailure as exc:
                record = build_record(line, error=exc)
                failed += 1
            records.append(record)
            if output_format == "json":
                print(format_json(record))
            else:
                print(format_text(record, config.output.width))

    if output_path:
        write_report(output_path, records)

    logger.info("%d line(s) parsed, %d failed", len(records) - failed, failed)

    if source_error:
        return EXIT_SOURCE_ERROR
    if failed:
        return EXIT_PARSE_ERRORS
    return EXIT_OK
