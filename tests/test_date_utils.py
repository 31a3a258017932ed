from __future__ import annotations

import pytest

from datetime_normalizer.utils.date_utils import (
    combine,
    expand_name_variants,
    split_fraction,
    strptime_first,
    weekday_index,
)


def test_split_fraction_keeps_nanoseconds() -> None:
    assert split_fraction("2001-02-03 04:05:06.123456789") == ("2001-02-03 04:05:06.123456", 123456789)
    assert split_fraction("04:05:06.5 PST") == ("04:05:06.5 PST", 500000000)


def test_split_fraction_ignores_date_dots() -> None:
    assert split_fraction("1970.12.31") == ("1970.12.31", 0)
    assert split_fraction("04:05:06") == ("04:05:06", 0)


def test_expand_name_variants_full_names_first() -> None:
    out = expand_name_variants(("%A %d %B %Y", "%Y-%m-%d"))
    assert out[0] == "%A %d %B %Y"
    assert set(out[:4]) == {"%A %d %B %Y", "%a %d %B %Y", "%A %d %b %Y", "%a %d %b %Y"}
    assert out[4:] == ("%Y-%m-%d",)


def test_combine_is_product() -> None:
    assert combine(("%Y-%m-%d", "%d %B %Y"), ("%H:%M",)) == ("%Y-%m-%d %H:%M", "%d %B %Y %H:%M")
    assert combine(("D",), ("T",), separators=("T", " ")) == ("DTT", "D T")


def test_strptime_first_returns_matching_template() -> None:
    value, template = strptime_first("1970-12-31", ("%d %B %Y", "%Y-%m-%d"))
    assert template == "%Y-%m-%d"
    assert (value.year, value.month, value.day) == (1970, 12, 31)


def test_strptime_first_raises_last_error() -> None:
    with pytest.raises(ValueError, match="does not match format"):
        strptime_first("nothing", ("%Y-%m-%d", "%H:%M"))


@pytest.mark.parametrize(
    ("token", "index"),
    [("Mon,", 0), ("tuesday", 1), ("SUN", 6), ("Thurs", None), ("Jul", None)],
)
def test_weekday_index(token: str, index: int | None) -> None:
    assert weekday_index(token) == index


def test_strptime_first_checks_weekday() -> None:
    value, _ = strptime_first("Mon 6 Jul 1970", ("%a %d %b %Y",))
    assert value.weekday() == 0
    with pytest.raises(ValueError, match="weekday"):
        strptime_first("Fri 6 Jul 1970", ("%a %d %b %Y", "%Y-%m-%d"))
