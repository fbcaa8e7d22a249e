from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from platform_common.kernel.time import (
    coerce_utc,
    get_formatted_date,
    isoformat_z,
    parse_iso8601,
    utc_now,
)


@pytest.mark.unit
def test_utc_now_is_tz_aware():
    assert utc_now().tzinfo is not None


@pytest.mark.unit
def test_isoformat_z_uses_z_suffix():
    dt = datetime(2026, 2, 10, 12, 0, 0, tzinfo=timezone.utc)
    assert isoformat_z(dt) == "2026-02-10T12:00:00Z"


@pytest.mark.unit
def test_parse_iso8601_accepts_z_suffix():
    assert parse_iso8601("2026-02-10T12:00:00Z") == datetime(2026, 2, 10, 12, tzinfo=timezone.utc)


@pytest.mark.unit
def test_parse_iso8601_rejects_naive_values():
    with pytest.raises(ValueError):
        parse_iso8601("2026-02-10T12:00:00")


@pytest.mark.unit
def test_coerce_utc_converts_offsets():
    dt = datetime(2026, 2, 10, 14, 0, tzinfo=timezone(timedelta(hours=2)))
    assert coerce_utc(dt) == datetime(2026, 2, 10, 12, 0, tzinfo=timezone.utc)


@pytest.mark.unit
def test_get_formatted_date_layout():
    dt = datetime(2026, 12, 31, 23, 5, 9, 123456, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert get_formatted_date(dt) == "2026-12-31 23:05:09:123+0530"


@pytest.mark.unit
def test_get_formatted_date_treats_naive_as_utc():
    assert get_formatted_date(datetime(2026, 1, 2, 3, 4, 5)) == "2026-01-02 03:04:05:000+0000"
