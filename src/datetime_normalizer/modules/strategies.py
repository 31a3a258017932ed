"""Ordered catalog of parsing strategies.

Each strategy is a pure function ``func(text, clock, settings)`` that either
returns a ``NormalizedOffsetTimestamp`` or raises ``StrategyMiss`` (plain
``ValueError`` from ``strptime`` is treated the same way). The catalog is
ordered from the least to the most ambiguous grammar; the cascade engine
takes the first success, so the order below decides how ambiguous input is
read.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime

from .heuristic import brute_force
from .result import FailureKind, NormalizedOffsetTimestamp, StrategyMiss
from .timezones import resolve_offset, split_trailing_timezone
from ..utils.date_utils import combine, expand_name_variants, split_fraction, strptime_first, weekday_index


@dataclass(frozen=True)
class Strategy:
    """Named catalog entry."""

    name: str
    family: str
    func: Callable


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

_TIME_24 = ("%H:%M:%S", "%H:%M:%S.%f")
_TIME_12 = ("%I:%M%p", "%I:%M %p", "%I:%M:%S%p", "%I:%M:%S %p")

STRICT_TEMPLATES = expand_name_variants(
    combine(("%Y-%m-%d",), ("%H:%M:%S%z", "%H:%M:%S %z", "%H:%M:%S.%f%z", "%H:%M:%S.%f %z"))
    + combine(
        ("%B %d, %Y;", "%B %d %Y", "%B, %d %Y", "%A, %d %B %Y", "%A %d %B %Y"),
        ("%H:%M:%S %z", "%H:%M:%S.%f %z"),
    )
)

LOCAL_TEMPLATES = expand_name_variants(
    ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S.%f", "%a %b %d %H:%M:%S %Y")
    + combine(("%Y-%m-%d",), _TIME_24 + ("%H:%M",))
    + combine(("%B %d %Y", "%B %d, %Y"), _TIME_24)
    + combine(("%A, %d %B %Y", "%A %d %B %Y"), _TIME_24 + _TIME_12)
    + combine(("%A %d %m %Y", "%A, %d %m %Y", "%d %B %Y", "%d %m %Y"), _TIME_12)
    + combine(("%m-%d-%Y",), _TIME_24 + ("%H:%M",) + _TIME_12)
)

DATE_TEMPLATES = expand_name_variants(
    (
        "%Y-%m-%d",
        "%m-%d-%y",
        "%m-%d-%Y",
        "%d-%b-%Y",
        "%B %d %Y",
        "%B %d, %Y",
        "%B, %d %Y",
        "%d %B %Y",
        "%d %B, %Y",
    )
)

TIME_TEMPLATES = _TIME_24 + ("%H:%M",) + _TIME_12

# Date/time part left over once a trailing abbreviation is split off.
ZONE_TEMPLATES = expand_name_variants(
    combine(("%Y-%m-%d",), _TIME_24 + ("%I:%M%p", "%I:%M %p", "%H:%M"))
    + combine(("%d %B, %Y", "%d %B %Y"), _TIME_24)
    + ("%d %B, %Y; %H:%M:%S", "%d %B, %Y; %H:%M:%S.%f")
    + combine(("%B %d, %Y", "%B %d %Y"), ("%H:%M",) + _TIME_24)
    + combine(("%B %d %Y;", "%B %d, %Y;"), _TIME_24)
    + combine(
        ("%A, %B %d %Y", "%A, %d %B %Y", "%A %B %d %Y", "%A %d %B %Y", "%A, %d %m %Y", "%A %d %m %Y"),
        _TIME_24 + ("%H:%M",),
    )
)

_RE_NUMERIC_OFFSET = re.compile(r"[+-]\d{4}$")

# Second 60 right after the date and hour:minute of an ISO 8601 timestamp.
_RE_LEAP_SECOND = re.compile(r"^(\d{4}-\d\d-\d\dT\d\d:\d\d:)60(?!\d)")

_LEAP_NANOSECONDS = 1_000_000_000

# Digit count -> units per second.
_EPOCH_UNITS = {
    10: 1,
    13: 1_000,
    16: 1_000_000,
    19: 1_000_000_000,
}


# ---------------------------------------------------------------------------
# Strategy functions
# ---------------------------------------------------------------------------


def _build(value, nanosecond=0):
    return NormalizedOffsetTimestamp.from_datetime(value, nanosecond or None)


def strict_iso(text, clock, settings):
    """RFC 3339 / ISO 8601 extended text with an explicit offset."""
    candidate = text
    if len(candidate) > 10 and candidate[10] in "tT ":
        candidate = candidate[:10] + "T" + candidate[11:]
    if candidate.endswith(("z", "Z")):
        candidate = candidate[:-1] + "+00:00"
    candidate, leap = _RE_LEAP_SECOND.subn(r"\g<1>59", candidate)
    candidate, nanosecond = split_fraction(candidate)
    value = datetime.fromisoformat(candidate)
    if value.tzinfo is None:
        raise StrategyMiss("ISO 8601 text has no UTC offset")
    if leap:
        # Kept as second 59 with the extra second in the nanosecond field.
        return _build(value, nanosecond + _LEAP_NANOSECONDS)
    return _build(value, nanosecond)


def strict_rfc2822(text, clock, settings):
    """RFC 2822 text ending in a numeric ``+HHMM`` offset."""
    candidate = text.strip()
    if not _RE_NUMERIC_OFFSET.search(candidate):
        raise StrategyMiss("RFC 2822 text has no numeric offset")
    try:
        value = parsedate_to_datetime(candidate)
    except (TypeError, IndexError) as exc:
        raise StrategyMiss(f"not an RFC 2822 date: {exc}") from exc
    weekday = weekday_index(candidate.split(None, 1)[0])
    if weekday is not None and weekday != value.weekday():
        raise StrategyMiss(f"weekday in '{candidate}' does not match {value.date().isoformat()}")
    if value.tzinfo is None:
        # RFC 2822 reads -0000 as UTC with no local information.
        value = value.replace(tzinfo=timezone.utc)
    return _build(value)


def strict_templates(text, clock, settings):
    """Common layouts with an explicit ``%z`` offset."""
    candidate, nanosecond = split_fraction(text)
    value, _ = strptime_first(candidate, STRICT_TEMPLATES)
    return _build(value, nanosecond)


def epoch_numeral(text, clock, settings):
    """Unix time as 10/13/16/19 digits: seconds, ms, us or ns."""
    if not settings.epoch_numerals:
        raise StrategyMiss("epoch numerals are disabled")
    digits = text.strip()
    if not (digits.isascii() and digits.isdigit()) or len(digits) not in _EPOCH_UNITS:
        raise StrategyMiss("not an epoch numeral")
    per_second = _EPOCH_UNITS[len(digits)]
    seconds, fraction = divmod(int(digits), per_second)
    nanosecond = fraction * (1_000_000_000 // per_second)
    value = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=nanosecond // 1000)
    return _build(value, nanosecond)


def local_implied(text, clock, settings):
    """Date and time without an offset; the local offset is assumed."""
    candidate, nanosecond = split_fraction(text)
    value, _ = strptime_first(candidate, LOCAL_TEMPLATES)
    return _build(value.replace(tzinfo=clock.tzinfo), nanosecond)


def date_only(text, clock, settings):
    """Date without time; local midnight."""
    value, _ = strptime_first(text, DATE_TEMPLATES)
    return _build(value.replace(tzinfo=clock.tzinfo))


def time_only(text, clock, settings):
    """Time without date; today's local date."""
    candidate, nanosecond = split_fraction(text)
    value, _ = strptime_first(candidate, TIME_TEMPLATES)
    return _build(datetime.combine(clock.today, value.time(), tzinfo=clock.tzinfo), nanosecond)


def _with_trailing_zone(dt_part, tz_token, settings):
    candidate, nanosecond = split_fraction(dt_part)
    naive, _ = strptime_first(candidate, ZONE_TEMPLATES)
    offset = resolve_offset(tz_token, settings.timezones)
    if offset is None:
        raise StrategyMiss(
            f"unrecognized timezone abbreviation '{tz_token}'",
            kind=FailureKind.UNRECOGNIZED_TIMEZONE,
        )
    return _build(naive.replace(tzinfo=timezone(timedelta(minutes=offset))), nanosecond)


def alpha_zone_time(text, clock, settings):
    """Time followed by a zone abbreviation, e.g. ``16:16:16 PST``."""
    split = split_trailing_timezone(text)
    if split is None:
        raise StrategyMiss("no trailing timezone abbreviation")
    dt_part, tz_token = split
    return _with_trailing_zone(f"{clock.today.isoformat()} {dt_part}", tz_token, settings)


def alpha_zone(text, clock, settings):
    """Date and time followed by a zone abbreviation, e.g. ``1 Jan 1970 22:00:00 PDT``."""
    split = split_trailing_timezone(text)
    if split is None:
        raise StrategyMiss("no trailing timezone abbreviation")
    dt_part, tz_token = split
    return _with_trailing_zone(dt_part, tz_token, settings)


CATALOG = (
    Strategy("strict-iso", "strict", strict_iso),
    Strategy("strict-rfc2822", "strict", strict_rfc2822),
    Strategy("strict-templates", "strict", strict_templates),
    Strategy("epoch", "epoch", epoch_numeral),
    Strategy("local-implied", "local-implied", local_implied),
    Strategy("date-only", "date-only", date_only),
    Strategy("time-only", "time-only", time_only),
    Strategy("alpha-tz-time", "alpha-tz", alpha_zone_time),
    Strategy("alpha-tz", "alpha-tz", alpha_zone),
    Strategy("heuristic", "heuristic", brute_force),
)
