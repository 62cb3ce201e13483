"""Tests for the mission clock."""

from datetime import datetime, timedelta, timezone

import pytest

from app.services.system import mission_clock


@pytest.mark.parametrize("moment,expected", [
    (datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc), "001.00:00:00 UTC"),
    (datetime(2024, 2, 11, 7, 5, 9, tzinfo=timezone.utc), "042.07:05:09 UTC"),
    (datetime(2024, 10, 26, 23, 59, 59, tzinfo=timezone.utc), "300.23:59:59 UTC"),
])
def test_clock_format(moment, expected):
    assert mission_clock(moment)["utc"] == expected


def test_clock_fields():
    clock = mission_clock(datetime(2023, 4, 9, 14, 3, 0, tzinfo=timezone.utc))
    assert clock["year"] == 2023
    assert (clock["days"], clock["hours"], clock["minutes"], clock["seconds"]) == ("099", "14", "03", "00")
    assert clock["today"] == "2023-04-09T14:03:00+00:00"


def test_clock_converts_to_utc():
    local = datetime(2024, 1, 1, 1, 30, 0, tzinfo=timezone(timedelta(hours=2)))
    assert mission_clock(local)["utc"] == "365.23:30:00 UTC"
