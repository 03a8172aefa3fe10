from __future__ import annotations

import pytest

from weathernow.entities import PLACEHOLDER
from weathernow.timefmt import format_local_date, format_local_time


@pytest.mark.parametrize("value", ["", None])
def test_empty_input_yields_placeholder(value) -> None:
    assert format_local_date(value) == PLACEHOLDER
    assert format_local_time(value) == PLACEHOLDER


def test_format_local_date_without_zone_returns_text() -> None:
    result = format_local_date("2025-02-12T15:30:00Z")

    assert isinstance(result, str)
    assert result
    assert result != PLACEHOLDER


def test_format_local_time_without_zone_returns_text() -> None:
    result = format_local_time("2025-02-12T12:30:00Z")

    assert result
    assert result != PLACEHOLDER


def test_format_local_date_in_pinned_zone() -> None:
    assert format_local_date("2025-02-12T15:30:00Z", "America/Chicago") == "Wed, Feb 12, 2025"


def test_format_local_date_crosses_midnight_in_zone() -> None:
    assert format_local_date("2025-02-13T03:00:00Z", "America/Los_Angeles") == "Wed, Feb 12, 2025"


def test_format_local_time_in_pinned_zone() -> None:
    assert format_local_time("2025-02-12T12:05:00Z", "America/Chicago") == "6:05 AM"
    assert format_local_time("2025-02-12T18:00:00-06:00", "America/Chicago") == "6:00 PM"


def test_format_local_time_accepts_offset_timestamps() -> None:
    assert format_local_time("2025-02-12T12:00:00+00:00", "UTC") == "12:00 PM"


@pytest.mark.parametrize("value, zone", [
    ("not-a-date", "America/Chicago"),
    ("2025-02-12T15:30:00Z", "Mars/Olympus_Mons"),
    ("2025-02-12T15:30:00Z", "../etc/passwd"),
    (12345, None),
])
def test_failures_are_swallowed(value, zone) -> None:
    assert format_local_date(value, zone) == PLACEHOLDER
    assert format_local_time(value, zone) == PLACEHOLDER
