import json

from floodwatch.core.formatter import format_output
from floodwatch.core.models import Location, SeverityLevel, Snapshot, TrendPoint


def _snapshot(locations=None, critical_areas=0):
    if locations is None:
        locations = (
            Location(
                id="colombo", name="Colombo", district="Colombo",
                coordinates=(6.9271, 79.8612), severity=SeverityLevel.HIGH,
                water_level=2.5, affected_families=172,
                last_updated="2025-12-18T04:00:00.000Z", description="Flood warning issued",
            ),
        )
    return Snapshot(
        locations=tuple(locations),
        last_sync="2025-12-18T05:00:00.000Z",
        total_affected=sum(loc.affected_families for loc in locations),
        critical_areas=critical_areas,
        historical_trend=(TrendPoint("2025-12-18", 821, 0, 461),),
    )


class TestFormatter:
    def test_json_wire_shape(self):
        data = json.loads(format_output(_snapshot(), "json"))
        assert set(data) == {"locations", "lastSync", "totalAffected", "criticalAreas", "historicalTrend"}
        loc = data["locations"][0]
        assert loc["severity"] == "high"
        assert loc["waterLevel"] == 2.5
        assert loc["affectedFamilies"] == 172
        assert loc["coordinates"] == [6.9271, 79.8612]
        assert data["historicalTrend"] == [
            {"date": "2025-12-18", "totalAffected": 821, "critical": 0, "high": 461}
        ]

    def test_summary(self):
        text = format_output(_snapshot())
        assert "Monitor" in text
        assert "[HIGH] **Colombo** 2.50m" in text
        assert "2025-12-18: 821 total" in text

    def test_summary_alert_and_empty(self):
        text = format_output(_snapshot(locations=(), critical_areas=2))
        assert "ALERT" in text
        assert "No flood data available" in text
