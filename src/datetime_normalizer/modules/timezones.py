"""Trailing timezone-abbreviation detection and resolution."""

import logging

from ..utils.timezone_table import ALIASES, DEFAULT_OFFSETS

logger = logging.getLogger(__name__)


def split_trailing_timezone(text):
    """Split *text* into ``(datetime_part, tz_token)`` at the last whitespace.

    Returns ``None`` unless the trailing token is purely alphabetic and
    something precedes it, so numeric offsets such as ``+0500`` are left for
    the strict strategies.
    """
    parts = text.strip().rsplit(None, 1)
    if len(parts) != 2:
        return None
    dt_part, tz_token = parts
    if not tz_token.isalpha():
        return None
    return dt_part, tz_token


def canonicalize(tz_token):
    """Upper-case *tz_token* and fold UT/UTC/Z onto GMT."""
    token = tz_token.strip().upper()
    return ALIASES.get(token, token)


def resolve_offset(tz_token, table=None):
    """Return the offset in minutes for *tz_token*, or ``None`` if unknown.

    Unknown abbreviations are never guessed; the caller must fail.
    """
    table = DEFAULT_OFFSETS if table is None else table
    name = canonicalize(tz_token)
    offset = table.get(name)
    if offset is None:
        logger.debug("Unrecognized timezone abbreviation: %s", tz_token)
    return offset
