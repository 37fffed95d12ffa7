"""Output formatters for flood snapshots."""

import json

from floodwatch.core.models import Snapshot

SEVERITY_MARKERS = {"critical": "!!!", "high": "!!", "medium": "!", "low": "-"}


class SummaryFormatter:
    """Markdown overview for operators."""

    def format(self, snapshot: Snapshot) -> str:
        lines = [
            f"**DMC Flood Status: {'ALERT' if snapshot.critical_areas else 'Monitor'}**",
            f"**Synced:** {snapshot.last_sync}",
            f"**Affected families (est.):** {snapshot.total_affected:,}",
            f"**Critical areas:** {snapshot.critical_areas}",
            "",
        ]

        if snapshot.locations:
            lines.append("**DISTRICTS:**")
            for loc in snapshot.locations:
                sev = loc.severity.value
                lines.append(
                    f"{SEVERITY_MARKERS[sev]} [{sev.upper()}] **{loc.name}** "
                    f"{loc.water_level:.2f}m | ~{loc.affected_families} families"
                )
                if loc.description:
                    lines.append(f"   {loc.description}")
            lines.append("")
        else:
            lines.append("**No flood data available.**")

        if snapshot.historical_trend:
            lines.append("**7-DAY TREND:**")
            for p in snapshot.historical_trend:
                lines.append(f"- {p.date}: {p.total_affected} total, {p.critical} critical, {p.high} high")

        return "\n".join(lines)


class JSONFormatter:
    """Wire format consumed by the dashboard."""

    def format(self, snapshot: Snapshot) -> dict:
        return snapshot.to_dict()

    def to_json(self, snapshot: Snapshot) -> str:
        return json.dumps(self.format(snapshot), indent=2)


def format_output(snapshot: Snapshot, style: str = "summary") -> str:
    if style == "json":
        return JSONFormatter().to_json(snapshot)
    return SummaryFormatter().format(snapshot)
