"""Data models for normalized flood snapshots."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class SeverityLevel(str, Enum):
    """Flood risk classification, ordered low < medium < high < critical."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self.value]

    def __lt__(self, other):
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, SeverityLevel):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_RANK = {"low": 0, "medium": 1, "high": 2, "critical": 3}


@dataclass
class RawReportRecord:
    """One row of the upstream document index."""
    doc_id: str = ""
    date_str: str = ""
    time_str: str = ""
    ut: str = ""
    description: str = ""
    remarks: str = ""
    cells: dict = field(default_factory=dict)

    @classmethod
    def from_cells(cls, cells: dict) -> "RawReportRecord":
        return cls(
            doc_id=cells.get("doc_id", ""),
            date_str=cells.get("date_str", ""),
            time_str=cells.get("time_str", ""),
            ut=cells.get("ut", ""),
            description=cells.get("description", ""),
            remarks=cells.get("remarks", ""),
            cells=dict(cells),
        )


@dataclass(frozen=True)
class Location:
    """Flood conditions for one district."""
    id: str
    name: str
    district: str
    coordinates: tuple
    severity: SeverityLevel
    water_level: float
    affected_families: int
    last_updated: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "district": self.district,
            "coordinates": list(self.coordinates),
            "severity": self.severity.value,
            "waterLevel": self.water_level,
            "affectedFamilies": self.affected_families,
            "lastUpdated": self.last_updated,
            "description": self.description,
        }


@dataclass(frozen=True)
class TrendPoint:
    """Aggregated impact for one day.

    ``critical`` and ``high`` are computed independently of ``total_affected``;
    their sum is not guaranteed to be bounded by it.
    """
    date: str
    total_affected: int
    critical: int
    high: int

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "totalAffected": self.total_affected,
            "critical": self.critical,
            "high": self.high,
        }


@dataclass(frozen=True)
class Snapshot:
    """Complete output of one ingestion pass."""
    locations: tuple
    last_sync: str
    total_affected: int
    critical_areas: int
    historical_trend: tuple = ()

    def to_dict(self) -> dict:
        return {
            "locations": [loc.to_dict() for loc in self.locations],
            "lastSync": self.last_sync,
            "totalAffected": self.total_affected,
            "criticalAreas": self.critical_areas,
            "historicalTrend": [p.to_dict() for p in self.historical_trend],
        }
