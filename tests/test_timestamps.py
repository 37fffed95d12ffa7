from datetime import datetime, timezone

import pytest

from floodwatch.core.timestamps import resolve_timestamp, to_iso

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
NOW_ISO = "2026-01-02T03:04:05.000Z"


def _valid(value: str) -> bool:
    return datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ") is not None


class TestResolveTimestamp:
    def test_epoch_wins(self):
        assert resolve_timestamp("1766030400", "2025-01-01", "00:00") == "2025-12-18T04:00:00.000Z"

    def test_fractional_epoch(self):
        assert resolve_timestamp("1766030400.5", "", "") == "2025-12-18T04:00:00.500Z"

    def test_local_fields_with_offset(self):
        assert resolve_timestamp("", "2025-12-18", "09:30") == "2025-12-18T04:00:00.000Z"

    @pytest.mark.parametrize("ut", ["abc", "0", "-5", "nan", "inf", "1e300", None])
    def test_bad_epoch_falls_back_to_fields(self, ut):
        assert resolve_timestamp(ut, "2025-12-17", "15:30") == "2025-12-17T10:00:00.000Z"

    def test_missing_time_uses_now(self):
        assert resolve_timestamp(None, "2025-12-18", "", now=NOW) == NOW_ISO

    def test_garbage_fields_use_now(self):
        assert resolve_timestamp("x", "yesterday", "noon", now=NOW) == NOW_ISO

    @pytest.mark.parametrize("args", [
        ("", "", ""),
        (None, None, None),
        ("not-a-number", "2025-13-45", "25:99"),
        ("1766030400", "", ""),
        ("-1e20", "2025-12-18", "09:30:00"),
    ])
    def test_never_raises_and_always_valid(self, args):
        assert _valid(resolve_timestamp(*args))

    def test_to_iso_converts_to_utc(self):
        dt = datetime.strptime("2025-12-18T09:30:00+05:30", "%Y-%m-%dT%H:%M:%S%z")
        assert to_iso(dt) == "2025-12-18T04:00:00.000Z"
