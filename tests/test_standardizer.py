from __future__ import annotations

import pytest

from datetime_normalizer.modules.standardizer import normalize


def test_normalize_date_separators_are_equivalent() -> None:
    assert normalize("1970.12.31") == normalize("1970/12/31") == normalize("1970-12-31") == "1970-12-31"


def test_normalize_leaves_text_after_eighth_character() -> None:
    assert normalize("2020-01-01.extra") == "2020-01-01.extra"
    assert normalize("12/13/2000 12:12:12.14") == "12-13-2000 12:12:12.14"
    assert normalize("2020.01.01 10.30") == "2020-01-01 10.30"


def test_normalize_short_input() -> None:
    assert normalize("1/2/70") == "1-2-70"
    assert normalize("") == ""


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Mon, 6 Jul 1970 15:30:00 UTC", "Mon, 6 Jul 1970 15:30:00 GMT"),
        ("Mon, 6 Jul 1970 15:30:00 UT", "Mon, 6 Jul 1970 15:30:00 GMT"),
        ("Mon, 6 Jul 1970 15:30:00 GMT", "Mon, 6 Jul 1970 15:30:00 GMT"),
    ],
)
def test_normalize_utc_aliases(raw: str, expected: str) -> None:
    assert normalize(raw) == expected


def test_normalize_alias_rewrite_is_case_sensitive() -> None:
    # lower-case forms are folded later by the timezone resolver
    assert normalize("16:16:16 utc") == "16:16:16 utc"
