"""Template matching helpers shared by the parsing strategies."""

import itertools
import re
from datetime import datetime

# Seconds followed by a fraction of up to nine digits.
_RE_FRACTION = re.compile(r"(?<=:\d\d)\.(\d{1,9})(?!\d)")

_NAME_DIRECTIVES = (("%B", "%b"), ("%A", "%a"))

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def split_fraction(text):
    """Cut a fractional-seconds part down to what ``strptime`` accepts.

    ``%f`` takes at most six digits, while inputs may carry up to nine.
    The fraction is truncated to microseconds in the returned text and the
    full value is returned separately in nanoseconds.

    Returns
    -------
    tuple[str, int]
        ``(text, nanosecond)``; ``nanosecond`` is 0 when no fraction is present.
    """
    match = _RE_FRACTION.search(text)
    if not match:
        return text, 0
    digits = match.group(1)
    nanosecond = int(digits.ljust(9, "0"))
    return text[: match.start(1)] + digits[:6] + text[match.end(1) :], nanosecond


def expand_name_variants(templates):
    """Add abbreviated month/weekday variants of each template.

    ``strptime`` treats ``%B`` as full month names only; every template using
    ``%B`` or ``%A`` is repeated with ``%b``/``%a`` in every combination.
    Order is preserved, full names first.
    """
    expanded = []
    for template in templates:
        present = [pair for pair in _NAME_DIRECTIVES if pair[0] in template]
        for choice in itertools.product(*[(full, short) for full, short in present]):
            variant = template
            for (full, _), picked in zip(present, choice):
                variant = variant.replace(full, picked)
            if variant not in expanded:
                expanded.append(variant)
    return tuple(expanded)


def combine(dates, times, separators=(" ",)):
    """Build date/time templates as the product of *dates* and *times*."""
    return tuple(f"{d}{sep}{t}" for d in dates for sep in separators for t in times)


def weekday_index(token):
    """Return 0-6 (Monday first) for an English weekday name, else ``None``.

    Full names and three-letter abbreviations are accepted, with or without
    a trailing comma.
    """
    name = token.strip().rstrip(",").lower()
    for index, full in enumerate(_WEEKDAYS):
        if name in (full, full[:3]):
            return index
    return None


def strptime_first(text, templates):
    """Parse *text* with the first matching ``strptime`` template.

    ``strptime`` does not check ``%a``/``%A`` against the date, so a leading
    weekday name that contradicts the parsed date rejects the template.

    Returns
    -------
    tuple[datetime.datetime, str]
        The parsed value and the template that matched.

    Raises
    ------
    ValueError
        With the last ``strptime`` error when no template matches, or the
        weekday mismatch when that was the only reason for rejection.
    """
    last_error = None
    weekday_error = None
    for template in templates:
        try:
            value = datetime.strptime(text, template)
        except ValueError as exc:
            last_error = exc
            continue
        if template.startswith(("%a", "%A")) and weekday_index(text.split(None, 1)[0]) != value.weekday():
            weekday_error = ValueError(f"weekday in '{text}' does not match {value.date().isoformat()}")
            continue
        return value, template
    if weekday_error is not None:
        raise weekday_error
    raise ValueError(str(last_error) if last_error else f"no template for '{text}'")
