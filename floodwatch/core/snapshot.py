"""Snapshot builder: selects the latest report and normalizes it per district."""

from datetime import date
from typing import Dict, List, Optional

from loguru import logger

from floodwatch.core.errors import MalformedReportError, NoEligibleReportError
from floodwatch.core.estimators import estimate_affected_families, estimate_severity
from floodwatch.core.models import Location, RawReportRecord, SeverityLevel, Snapshot
from floodwatch.core.parser import ReportIndexParser
from floodwatch.core.timestamps import resolve_timestamp, utc_now_iso
from floodwatch.core.trend import build_trend
from floodwatch.data_sources.dmc_client import DMCClient
from floodwatch.utils.config import Settings, settings as default_settings
from floodwatch.utils.constants import (
    DEFAULT_WATER_LEVEL,
    DISTRICT_COORDINATES,
    FLOOD_WARNING_REMARK,
    NORMAL_REMARK,
    REFERENCE_WATER_LEVELS,
    SEVERITY_THRESHOLDS,
)


class SnapshotBuilder:
    """Build a flood Snapshot from the DMC index and the latest report's details."""

    def __init__(
        self,
        client: Optional[DMCClient] = None,
        districts: Optional[Dict[str, tuple]] = None,
        settings: Optional[Settings] = None,
        water_levels: Optional[List[float]] = None,
    ):
        self.settings = settings or default_settings
        self.client = client or DMCClient()
        self.districts = dict(districts) if districts is not None else dict(DISTRICT_COORDINATES)
        self.water_levels = list(water_levels) if water_levels is not None else list(REFERENCE_WATER_LEVELS)
        self.parser = ReportIndexParser(max_candidates=self.settings.ingest.max_candidates)

    def ingest(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        include_history: Optional[bool] = None,
        today: Optional[date] = None,
    ) -> Snapshot:
        """Fetch the index and build a snapshot, applying configured defaults."""
        cfg = self.settings.ingest
        start_date = start_date or cfg.default_start_date
        end_date = end_date or cfg.default_end_date
        if include_history is None:
            include_history = cfg.include_history

        logger.info(f"Date filter: {start_date}..{end_date}, history={include_history}")
        index_text = self.client.fetch_index()
        return self.build(index_text, start_date, end_date, include_history, today=today)

    def build(
        self,
        index_text: str,
        start_date: str,
        end_date: str,
        include_history: bool = True,
        today: Optional[date] = None,
    ) -> Snapshot:
        records = self.parser.parse(index_text)
        candidates = self.parser.candidates(records, start_date, end_date)
        if not candidates:
            raise NoEligibleReportError("No water level reports found")

        latest = candidates[0]
        logger.info(
            f"Latest report: doc_id={latest.doc_id} date={latest.date_str} "
            f"time={latest.time_str} ut={latest.ut}"
        )
        if not latest.date_str or not latest.doc_id:
            raise MalformedReportError("Invalid report data: missing date_str or doc_id")

        # Only fetch success and payload shape are used; per-station readings are not parsed yet
        self.client.fetch_blocks(latest.date_str, latest.doc_id)

        locations = self._build_locations(latest)
        trend = ()
        if include_history:
            trend = tuple(build_trend(
                records,
                self.districts,
                today=today,
                days=self.settings.ingest.trend_days,
                max_districts=self.settings.ingest.max_districts,
            ))

        snapshot = Snapshot(
            locations=tuple(locations),
            last_sync=utc_now_iso(),
            total_affected=sum(loc.affected_families for loc in locations),
            critical_areas=sum(1 for loc in locations if loc.severity == SeverityLevel.CRITICAL),
            historical_trend=trend,
        )
        logger.info(
            f"Processed {len(snapshot.locations)} locations with "
            f"{len(snapshot.historical_trend)} historical data points"
        )
        return snapshot

    def _build_locations(self, report: RawReportRecord) -> List[Location]:
        last_updated = resolve_timestamp(report.ut, report.date_str, report.time_str)
        districts = list(self.districts.items())[: self.settings.ingest.max_districts]
        return [
            self._build_location(district, coords, idx, last_updated)
            for idx, (district, coords) in enumerate(districts)
        ]

    def _build_location(self, district: str, coords: tuple, idx: int, last_updated: str) -> Location:
        water_level = self.water_levels[idx] if idx < len(self.water_levels) else DEFAULT_WATER_LEVEL
        if water_level > SEVERITY_THRESHOLDS["flood_warning_level_m"]:
            remarks = FLOOD_WARNING_REMARK
        else:
            remarks = NORMAL_REMARK
        severity = estimate_severity(water_level, remarks)

        return Location(
            id=district.lower(),
            name=district,
            district=district,
            coordinates=tuple(coords),
            severity=severity,
            water_level=round(water_level, 2),
            affected_families=estimate_affected_families(severity, district),
            last_updated=last_updated,
            description=remarks,
        )
