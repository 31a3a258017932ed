"""Parse result and failure types."""

import enum
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

_MAX_OFFSET = timedelta(hours=24)
_NANOS_PER_SECOND = 1_000_000_000


class FailureKind(enum.Enum):
    """Closed set of reasons a parse can fail."""

    NO_STRATEGY_MATCHED = "no_strategy_matched"
    UNRECOGNIZED_TIMEZONE = "unrecognized_timezone"
    UNSUPPORTED_TOKEN_LAYOUT = "unsupported_token_layout"


class ParseFailure(ValueError):
    """Raised when no strategy could interpret the input.

    Attributes
    ----------
    message : str
        Human-readable diagnostic, typically the last underlying error.
    kind : FailureKind
        Failure class, for callers that need to branch without inspecting
        the message.
    """

    def __init__(self, message, kind=FailureKind.NO_STRATEGY_MATCHED):
        self.message = message or "no strategy matched"
        self.kind = kind
        super().__init__(self.message)


class StrategyMiss(ValueError):
    """A single strategy did not apply; the cascade moves on."""

    def __init__(self, message, kind=FailureKind.NO_STRATEGY_MATCHED):
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True, eq=False)
class NormalizedOffsetTimestamp:
    """A calendar instant paired with a fixed UTC offset.

    ``instant`` is an aware datetime carrying a fixed ``datetime.timezone``.
    ``nanosecond`` is the complete sub-second part; the datetime itself is
    truncated to microseconds. A leap second is stored as second 59 with
    ``nanosecond`` of one second or more, and printed as second 60.
    """

    instant: datetime
    nanosecond: int = 0
    strategy: str = field(default="", compare=False)

    def __post_init__(self):
        offset = self.instant.utcoffset()
        if offset is None:
            raise ValueError("instant must carry a UTC offset")
        if offset % timedelta(minutes=1):
            raise ValueError(f"UTC offset must be whole minutes: {offset}")
        if not -_MAX_OFFSET < offset < _MAX_OFFSET:
            raise ValueError(f"UTC offset out of range: {offset}")
        if not 0 <= self.nanosecond < 2 * _NANOS_PER_SECOND:
            raise ValueError(f"nanosecond out of range: {self.nanosecond}")
        if self.nanosecond >= _NANOS_PER_SECOND and self.instant.second != 59:
            raise ValueError("leap second must follow second 59")
        if self.nanosecond % _NANOS_PER_SECOND // 1000 != self.instant.microsecond:
            raise ValueError("nanosecond does not agree with instant.microsecond")
        if not isinstance(self.instant.tzinfo, timezone):
            # Pin named zones to the offset in effect at this instant.
            object.__setattr__(self, "instant", self.instant.replace(tzinfo=timezone(offset)))

    @classmethod
    def from_datetime(cls, value, nanosecond=None, strategy=""):
        """Wrap an aware datetime; *nanosecond* defaults to its microseconds."""
        if nanosecond is None:
            nanosecond = value.microsecond * 1000
        return cls(instant=value, nanosecond=nanosecond, strategy=strategy)

    @property
    def is_leap_second(self):
        """True for the 60th second of a minute."""
        return self.nanosecond >= _NANOS_PER_SECOND

    @property
    def offset_minutes(self):
        """Signed UTC offset in minutes."""
        return int(self.instant.utcoffset() // timedelta(minutes=1))

    def to_datetime(self):
        """Return the aware datetime (microsecond precision)."""
        return self.instant

    def to_rfc3339(self):
        """Serialize as RFC 3339, e.g. ``1970-07-06T15:30:00-07:00``.

        The fraction is omitted when zero, otherwise printed with 3, 6 or 9
        digits, the shortest that is exact.
        """
        i = self.instant
        second = i.second + 1 if self.is_leap_second else i.second
        fraction = self.nanosecond % _NANOS_PER_SECOND
        text = f"{i.year:04d}-{i.month:02d}-{i.day:02d}T{i.hour:02d}:{i.minute:02d}:{second:02d}"
        if fraction:
            if fraction % 1_000_000 == 0:
                text += f".{fraction // 1_000_000:03d}"
            elif fraction % 1000 == 0:
                text += f".{fraction // 1000:06d}"
            else:
                text += f".{fraction:09d}"
        minutes = self.offset_minutes
        sign = "-" if minutes < 0 else "+"
        hours, mins = divmod(abs(minutes), 60)
        return f"{text}{sign}{hours:02d}:{mins:02d}"

    def _key(self):
        return (self.instant.replace(tzinfo=None, microsecond=0), self.nanosecond, self.offset_minutes)

    def __eq__(self, other):
        if not isinstance(other, NormalizedOffsetTimestamp):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.to_rfc3339()
