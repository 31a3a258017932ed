"""Last-resort token heuristic for loosely written dates.

The input is split on whitespace and classified by token count and by
whether the first or second token is a bare word (taken to be a month
name). A full date string is rebuilt with the current year and matched
against a small template set:

    Feb 12              -> Month Day
    12 Feb              -> Day Month
    Feb 12 14:00:01     -> Month Day <time>
    12 Feb, 14:00       -> Day Month <time>
    Feb 12 3:33 pm      -> Month Day <hour:minute> <meridiem>

Any other layout is rejected.
"""

import logging

from .result import FailureKind, NormalizedOffsetTimestamp, StrategyMiss
from ..utils.date_utils import expand_name_variants, strptime_first

logger = logging.getLogger(__name__)

LAYOUT_ERROR = "failed brute force parsing"

_MONTH_FIRST = {
    2: expand_name_variants(("%B %d %Y",)),
    3: expand_name_variants(("%B %d %Y %H:%M", "%B %d %Y %H:%M:%S", "%B %d %Y %I:%M%p")),
    4: expand_name_variants(("%B %d %Y %I:%M %p",)),
}
_DAY_FIRST = {
    2: expand_name_variants(("%d %B %Y",)),
    3: expand_name_variants(("%d %B %Y %H:%M", "%d %B %Y %H:%M:%S", "%d %B %Y %I:%M%p")),
    4: expand_name_variants(("%d %B %Y %I:%M %p",)),
}


def _is_word(token):
    return token.replace(",", "").isalpha()


def classify(tokens):
    """Return the template set for *tokens*, or ``None`` for an unknown layout."""
    if len(tokens) not in _MONTH_FIRST:
        return None
    if _is_word(tokens[0]):
        return _MONTH_FIRST[len(tokens)]
    if _is_word(tokens[1]):
        return _DAY_FIRST[len(tokens)]
    return None


def brute_force(text, clock, settings):
    """Rebuild *text* around the current year and parse it as local time."""
    tokens = text.split()
    templates = classify(tokens)
    if templates is None:
        raise StrategyMiss(LAYOUT_ERROR, kind=FailureKind.UNSUPPORTED_TOKEN_LAYOUT)

    year = str(clock.today.year)
    rebuilt = " ".join(tokens[:2] + [year] + tokens[2:]).replace(",", "")
    logger.debug("Heuristic candidate: %r", rebuilt)
    value, _ = strptime_first(rebuilt, templates)
    return NormalizedOffsetTimestamp.from_datetime(value.replace(tzinfo=clock.tzinfo))
