from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from datetime_normalizer.modules.result import FailureKind, NormalizedOffsetTimestamp, ParseFailure


def _tz(minutes: int) -> timezone:
    return timezone(timedelta(minutes=minutes))


def test_to_rfc3339_formats_offset() -> None:
    ts = NormalizedOffsetTimestamp(datetime(1970, 7, 6, 15, 30, tzinfo=_tz(-420)))
    assert ts.to_rfc3339() == "1970-07-06T15:30:00-07:00"
    assert str(ts) == ts.to_rfc3339()
    assert ts.offset_minutes == -420


def test_to_rfc3339_utc_uses_numeric_offset() -> None:
    ts = NormalizedOffsetTimestamp(datetime(2023, 1, 5, 7, 27, 19, tzinfo=timezone.utc))
    assert ts.to_rfc3339() == "2023-01-05T07:27:19+00:00"


@pytest.mark.parametrize(
    ("nanosecond", "suffix"),
    [(123_000_000, ".123"), (123_456_000, ".123456"), (123_456_789, ".123456789"), (500_000_000, ".500")],
)
def test_to_rfc3339_fraction_digits(nanosecond: int, suffix: str) -> None:
    instant = datetime(2001, 2, 3, 4, 5, 6, nanosecond // 1000, tzinfo=_tz(330))
    ts = NormalizedOffsetTimestamp(instant, nanosecond)
    assert ts.to_rfc3339() == f"2001-02-03T04:05:06{suffix}+05:30"


def test_from_datetime_defaults_nanosecond() -> None:
    ts = NormalizedOffsetTimestamp.from_datetime(datetime(2001, 2, 3, 4, 5, 6, 250000, tzinfo=timezone.utc))
    assert ts.nanosecond == 250_000_000


def test_equality_includes_offset() -> None:
    a = NormalizedOffsetTimestamp(datetime(2020, 1, 1, 12, tzinfo=timezone.utc))
    b = NormalizedOffsetTimestamp(datetime(2020, 1, 1, 13, tzinfo=_tz(60)))
    c = NormalizedOffsetTimestamp(datetime(2020, 1, 1, 12, tzinfo=timezone.utc), strategy="strict-iso")
    assert a.to_datetime() == b.to_datetime()
    assert a != b
    assert a == c
    assert hash(a) == hash(c)


def test_sub_microsecond_difference_is_not_equal() -> None:
    instant = datetime(2020, 1, 1, 0, 0, 0, 1, tzinfo=timezone.utc)
    assert NormalizedOffsetTimestamp(instant, 1000) != NormalizedOffsetTimestamp(instant, 1001)


def test_rejects_naive_instant() -> None:
    with pytest.raises(ValueError, match="UTC offset"):
        NormalizedOffsetTimestamp(datetime(2020, 1, 1))


def test_rejects_offset_with_seconds() -> None:
    with pytest.raises(ValueError, match="whole minutes"):
        NormalizedOffsetTimestamp(datetime(2020, 1, 1, tzinfo=timezone(timedelta(seconds=30))))


def test_rejects_inconsistent_nanosecond() -> None:
    with pytest.raises(ValueError):
        NormalizedOffsetTimestamp(datetime(2020, 1, 1, tzinfo=timezone.utc), 5_000)


def test_parse_failure_always_has_message() -> None:
    exc = ParseFailure("")
    assert exc.message
    assert exc.kind is FailureKind.NO_STRATEGY_MATCHED
    assert isinstance(exc, ValueError)


def test_leap_second_prints_as_sixty() -> None:
    instant = datetime(1990, 12, 31, 15, 59, 59, 500000, tzinfo=_tz(-480))
    ts = NormalizedOffsetTimestamp(instant, 1_500_000_000)
    assert ts.is_leap_second
    assert ts.to_rfc3339() == "1990-12-31T15:59:60.500-08:00"
    assert ts != NormalizedOffsetTimestamp(instant, 500_000_000)


def test_leap_second_only_after_second_59() -> None:
    with pytest.raises(ValueError, match="second 59"):
        NormalizedOffsetTimestamp(datetime(1990, 12, 31, 23, 59, 58, tzinfo=timezone.utc), 1_000_000_000)
    with pytest.raises(ValueError, match="out of range"):
        NormalizedOffsetTimestamp(datetime(1990, 12, 31, 23, 59, 59, tzinfo=timezone.utc), 2_000_000_000)
