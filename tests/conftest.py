from __future__ import annotations

from datetime import date, time, timedelta

import pytest

from datetime_normalizer.modules.clock import LocalClockContext


@pytest.fixture
def clock() -> LocalClockContext:
    # Monday 19 October 2026, 09:30 local, five hours behind UTC.
    return LocalClockContext(today=date(2026, 10, 19), time=time(9, 30), utc_offset=timedelta(hours=-5))
