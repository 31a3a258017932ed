"""Cascade engine: standardize the input, then try each strategy in order."""

import dataclasses
import logging

from .config import ParserSettings
from .result import FailureKind, ParseFailure
from .standardizer import normalize
from .strategies import CATALOG

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = ParserSettings()


def try_strategies(text, clock, settings=None, catalog=CATALOG):
    """Run *catalog* over already-standardized *text*; first success wins.

    Returns
    -------
    NormalizedOffsetTimestamp
        Result tagged with the name of the winning strategy.

    Raises
    ------
    ParseFailure
        When every strategy misses. The message is the last diagnostic seen;
        an unrecognized timezone abbreviation outranks other failure kinds.
    """
    settings = settings or _DEFAULT_SETTINGS
    last_error = None
    kind = FailureKind.NO_STRATEGY_MATCHED
    zone_error = None

    for strategy in catalog:
        try:
            result = strategy.func(text, clock, settings)
        except (ValueError, OverflowError) as exc:
            last_error = exc
            miss_kind = getattr(exc, "kind", FailureKind.NO_STRATEGY_MATCHED)
            if miss_kind is FailureKind.UNRECOGNIZED_TIMEZONE and zone_error is None:
                zone_error = exc
            kind = miss_kind
            logger.debug("%s: %s", strategy.name, exc)
            continue
        logger.debug("Matched %r with %s", text, strategy.name)
        return dataclasses.replace(result, strategy=strategy.name)

    if zone_error is not None:
        raise ParseFailure(str(zone_error), FailureKind.UNRECOGNIZED_TIMEZONE)
    raise ParseFailure(str(last_error) if last_error else "", kind)


def parse(text, clock, settings=None):
    """Parse loosely formatted date/time *text* into a fixed-offset timestamp.

    Parameters
    ----------
    text : str
        Arbitrary input, e.g. ``Mon, 6 Jul 1970 15:30:00 PDT`` or ``1970/12/31``.
    clock : LocalClockContext
        Local date, time and offset used to fill in missing fields.
    settings : ParserSettings, optional
        Timezone table and optional strategies.

    Returns
    -------
    NormalizedOffsetTimestamp

    Raises
    ------
    ParseFailure
        If no strategy accepts the input.
    """
    if not isinstance(text, str):
        raise ParseFailure(f"expected str, got {type(text).__name__}")
    return try_strategies(normalize(text), clock, settings)


def try_parse(text, clock, settings=None):
    """Like ``parse`` but return ``None`` instead of raising ``ParseFailure``."""
    try:
        return parse(text, clock, settings)
    except ParseFailure:
        return None
