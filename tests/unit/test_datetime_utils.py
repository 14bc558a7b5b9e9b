from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from fraud_sync.shared.utils.datetime_utils import DateTimeUtils


def test_parse_rfc3339_with_z_suffix():
    dt = DateTimeUtils.parse_rfc3339("2024-03-01T10:15:00Z")
    assert dt == datetime(2024, 3, 1, 10, 15, 0, tzinfo=timezone.utc)


def test_parse_rfc3339_truncates_nanoseconds():
    dt = DateTimeUtils.parse_rfc3339("2024-03-01T10:15:00.123456789Z")
    assert dt.microsecond == 123456
    assert dt.utcoffset() == timedelta(0)


def test_parse_rfc3339_keeps_offset():
    dt = DateTimeUtils.parse_rfc3339("2024-03-01T12:15:00+02:00")
    assert dt.utcoffset() == timedelta(hours=2)
    assert dt == datetime(2024, 3, 1, 10, 15, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["", "2024-03-01", "2024-03-01T10:15:00", "no es fecha"])
def test_parse_rfc3339_rejects_invalid(value):
    with pytest.raises(ValueError):
        DateTimeUtils.parse_rfc3339(value)


def test_to_rfc3339_utc_uses_z_and_drops_fraction():
    dt = datetime(2024, 3, 1, 10, 15, 0, 987654, tzinfo=timezone.utc)
    assert DateTimeUtils.to_rfc3339(dt) == "2024-03-01T10:15:00Z"


def test_to_rfc3339_keeps_non_utc_offset():
    dt = datetime(2024, 3, 1, 12, 15, 0, tzinfo=timezone(timedelta(hours=2)))
    assert DateTimeUtils.to_rfc3339(dt) == "2024-03-01T12:15:00+02:00"


def test_to_rfc3339_assumes_utc_for_naive():
    assert DateTimeUtils.to_rfc3339(datetime(2024, 3, 1, 10, 15)) == "2024-03-01T10:15:00Z"


@pytest.mark.parametrize(
    "value, expected_micros, expected_offset",
    [
        ("2024-03-01T10:15:00.5Z", 500000, timedelta(0)),
        ("2024-03-01T10:15:00.12Z", 120000, timedelta(0)),
        ("2024-03-01T10:15:00.12345Z", 123450, timedelta(0)),
        ("2024-03-01T10:15:00.1234567Z", 123456, timedelta(0)),
        ("2024-03-01T10:15:00.5+02:00", 500000, timedelta(hours=2)),
    ],
)
def test_parse_rfc3339_accepts_trimmed_fractions(value, expected_micros, expected_offset):
    """Go recorta los ceros finales de la fraccion: cualquier largo es valido."""
    dt = DateTimeUtils.parse_rfc3339(value)

    assert dt.microsecond == expected_micros
    assert dt.utcoffset() == expected_offset
