"""Severity and impact estimation.

Both estimators are pure heuristics. Affected-family counts are not
measurements: they are derived from the severity class and a stable hash of
the location name so repeated runs over the same data give the same numbers.
"""

import math

from floodwatch.core.models import SeverityLevel
from floodwatch.utils.constants import (
    CRITICAL_KEYWORDS,
    DEFAULT_BASE_FAMILIES,
    FLOOD_KEYWORDS,
    SEVERITY_BASE_FAMILIES,
    SEVERITY_THRESHOLDS,
)


def name_hash(name: str) -> int:
    """Sum of character codes."""
    return sum(ord(ch) for ch in name)


def estimate_severity(water_level: float, remarks: str = "") -> SeverityLevel:
    """Classify flood severity. Remarks from the source override the numeric thresholds."""
    text = (remarks or "").lower()
    if any(k in text for k in CRITICAL_KEYWORDS):
        return SeverityLevel.CRITICAL
    if any(k in text for k in FLOOD_KEYWORDS) or water_level > SEVERITY_THRESHOLDS["high_water_level_m"]:
        return SeverityLevel.HIGH
    if water_level > SEVERITY_THRESHOLDS["medium_water_level_m"]:
        return SeverityLevel.MEDIUM
    return SeverityLevel.LOW


def location_multiplier(location_name: str) -> float:
    """Deterministic multiplier in [0.80, 1.20)."""
    return 0.8 + (name_hash(location_name) % 40) / 100


def estimate_affected_families(severity, location_name: str) -> int:
    """Estimate affected households for a location.

    Args:
        severity: SeverityLevel or its string value. Unknown values use a base of 50.
        location_name: District or station name used to seed the variation.

    Returns:
        Non-negative integer estimate.
    """
    key = severity.value if isinstance(severity, SeverityLevel) else str(severity)
    base = SEVERITY_BASE_FAMILIES.get(key, DEFAULT_BASE_FAMILIES)
    return math.floor(base * location_multiplier(location_name))
