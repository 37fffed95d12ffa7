"""Core module."""
from floodwatch.core.errors import (
    DetailUnavailableError,
    FloodwatchError,
    MalformedReportError,
    NoEligibleReportError,
    UpstreamFetchError,
    UpstreamUnavailableError,
)
from floodwatch.core.estimators import estimate_affected_families, estimate_severity
from floodwatch.core.models import Location, RawReportRecord, SeverityLevel, Snapshot, TrendPoint
from floodwatch.core.parser import ReportIndexParser, parse_index, select_in_range
from floodwatch.core.timestamps import resolve_timestamp
from floodwatch.core.trend import build_trend
