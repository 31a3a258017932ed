"""Configuration loading and validation."""

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from ..utils.timezone_table import DEFAULT_OFFSETS, build_table

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ParserSettings:
    """Settings the strategies consult.

    ``timezones`` maps upper-case abbreviations to offsets in minutes.
    """

    epoch_numerals: bool = True
    timezones: dict = field(default_factory=lambda: dict(DEFAULT_OFFSETS))


@dataclass
class OutputConfig:
    """Driver output settings."""

    format: str = "text"
    width: int = 35


@dataclass
class AppConfig:
    """Application configuration."""

    settings: ParserSettings
    output: OutputConfig


def default_config():
    """Return the configuration used when no config file is given."""
    return AppConfig(settings=ParserSettings(), output=OutputConfig())


def load_config(config_path):
    """Load and validate configuration from a JSON file.

    Exits the process if the config file is missing or invalid.
    """
    if not config_path:
        return default_config()

    path = Path(config_path).resolve()
    if not path.exists():
        logger.error("Config file not found: %s", config_path)
        sys.exit(1)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        logger.error("Failed to read config %s: %s", config_path, exc)
        sys.exit(1)

    try:
        return parse_config(raw)
    except ValueError as exc:
        logger.error("Invalid config %s: %s", config_path, exc)
        sys.exit(1)


def parse_config(raw):
    """Build an ``AppConfig`` from already-decoded JSON.

    Raises
    ------
    ValueError
        If a value has the wrong type or an offset is malformed.
    """
    if not isinstance(raw, dict):
        raise ValueError("top-level value must be an object")

    epoch_numerals = raw.get("epoch_numerals", True)
    if not isinstance(epoch_numerals, bool):
        raise ValueError("epoch_numerals must be true or false")

    tz_raw = raw.get("timezones", {})
    if not isinstance(tz_raw, dict):
        raise ValueError("timezones must be an object")
    timezones = build_table(tz_raw)
    if tz_raw:
        logger.debug("Timezone table: %d abbreviation(s) after overrides", len(timezones))

    output_raw = raw.get("output", {})
    if not isinstance(output_raw, dict):
        raise ValueError("output must be an object")
    fmt = output_raw.get("format", "text")
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"output.format must be one of {', '.join(OUTPUT_FORMATS)}")
    width = output_raw.get("width", 35)
    if isinstance(width, bool) or not isinstance(width, int) or width < 0:
        raise ValueError("output.width must be a non-negative integer")

    return AppConfig(
        settings=ParserSettings(epoch_numerals=epoch_numerals, timezones=timezones),
        output=OutputConfig(format=fmt, width=width),
    )
