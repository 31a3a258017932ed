"""Local clock context consulted when a date, time or offset is missing."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone


@dataclass(frozen=True)
class LocalClockContext:
    """Snapshot of the caller's local date, time and UTC offset.

    Strategies read it to fill in fields the input leaves out; they never
    read the system clock themselves.
    """

    today: date
    time: time
    utc_offset: timedelta

    @classmethod
    def now(cls):
        """Sample the system clock once."""
        current = datetime.now().astimezone()
        return cls(
            today=current.date(),
            time=current.time().replace(tzinfo=None),
            utc_offset=current.utcoffset(),
        )

    @classmethod
    def fixed(cls, today, offset_minutes=0, at=None):
        """Build a context from plain values (handy for tests and replays)."""
        return cls(today=today, time=at or time(0, 0), utc_offset=timedelta(minutes=offset_minutes))

    @property
    def tzinfo(self):
        """The local offset as a fixed ``datetime.timezone``."""
        return timezone(self.utc_offset)
