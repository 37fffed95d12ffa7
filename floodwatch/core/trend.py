"""Historical trend synthesis."""

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from loguru import logger

from floodwatch.core.estimators import estimate_affected_families, estimate_severity, name_hash
from floodwatch.core.models import RawReportRecord, SeverityLevel, TrendPoint
from floodwatch.utils.constants import TREND_FALLBACK


def date_hash(date_str: str) -> int:
    """Sum of the numeric year, month and day parts."""
    total = 0
    for part in date_str.split("-"):
        try:
            total += int(part)
        except ValueError:
            continue
    return total


def synthetic_water_level(date_str: str, district: str, index: int) -> float:
    """Deterministic water level in [0.8, 3.275] for a district on a date."""
    combined = (date_hash(date_str) + name_hash(district) + index) % 100
    return 0.8 + combined / 40


def trend_point_for_date(
    records: Iterable[RawReportRecord],
    target_date: str,
    districts: Dict[str, tuple],
    max_districts: int = 10,
) -> Optional[TrendPoint]:
    """Aggregate one day across districts; None if no record carries that date."""
    if not any(r.date_str == target_date for r in records):
        return None

    total = critical = high = 0
    for idx, district in enumerate(list(districts)[:max_districts]):
        severity = estimate_severity(synthetic_water_level(target_date, district, idx), "")
        families = estimate_affected_families(severity, district)
        total += families
        if severity == SeverityLevel.CRITICAL:
            critical += families
        if severity == SeverityLevel.HIGH:
            high += families

    return TrendPoint(date=target_date, total_affected=total, critical=critical, high=high)


def fallback_point(target_date: str) -> TrendPoint:
    h = date_hash(target_date)
    return TrendPoint(
        date=target_date,
        total_affected=TREND_FALLBACK["total_base"] + h % TREND_FALLBACK["total_mod"],
        critical=TREND_FALLBACK["critical_base"] + h % TREND_FALLBACK["critical_mod"],
        high=TREND_FALLBACK["high_base"] + h % TREND_FALLBACK["high_mod"],
    )


def build_trend(
    records: List[RawReportRecord],
    districts: Dict[str, tuple],
    today: Optional[date] = None,
    days: int = 7,
    max_districts: int = 10,
) -> List[TrendPoint]:
    """Build a `days`-long daily trend, ascending by date.

    Uses the most recent distinct report dates first. Missing slots are
    filled walking back from `today` with synthetic points.
    """
    today = today or date.today()
    unique_dates = sorted({r.date_str for r in records if r.date_str})[-days:]
    logger.debug(f"Processing historical data for dates: {unique_dates}")

    trend = []
    for d in unique_dates:
        point = trend_point_for_date(records, d, districts, max_districts)
        if point:
            trend.append(point)

    existing = {p.date for p in trend}
    offset = 0
    while len(trend) < days:
        d = (today - timedelta(days=offset)).isoformat()
        offset += 1
        if d in existing:
            continue
        point = trend_point_for_date([], d, districts, max_districts) or fallback_point(d)
        trend.append(point)
        existing.add(d)

    trend.sort(key=lambda p: p.date)
    return trend
