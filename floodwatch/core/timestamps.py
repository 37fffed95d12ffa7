"""Report timestamp normalization."""

import math
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from floodwatch.utils.constants import SOURCE_UTC_OFFSET


def to_iso(dt: datetime) -> str:
    """Render as UTC ISO-8601 with millisecond precision and a Z suffix."""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def utc_now_iso() -> str:
    return to_iso(datetime.now(timezone.utc))


def _from_epoch(ut: Optional[str]) -> Optional[datetime]:
    if not ut:
        return None
    try:
        seconds = float(ut)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(seconds) or seconds <= 0:
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def _from_local_fields(date_str: str, time_str: str) -> Optional[datetime]:
    if not date_str or not time_str:
        return None
    try:
        return datetime.strptime(
            f"{date_str}T{time_str}:00{SOURCE_UTC_OFFSET}", "%Y-%m-%dT%H:%M:%S%z"
        )
    except ValueError:
        return None


def resolve_timestamp(
    ut: Optional[str],
    date_str: str = "",
    time_str: str = "",
    now: Optional[datetime] = None,
) -> str:
    """Resolve a report's effective timestamp. Never raises.

    Tries the epoch seconds field, then the local date and time strings, then
    falls back to the current time.
    """
    dt = _from_epoch(ut)
    if dt is None:
        dt = _from_local_fields(date_str or "", time_str or "")
    if dt is None:
        logger.debug(f"No usable timestamp in ut={ut!r} date={date_str!r} time={time_str!r}, using now")
        dt = now or datetime.now(timezone.utc)
    return to_iso(dt)
