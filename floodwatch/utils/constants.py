"""Project-wide constants."""

# Affected-household base estimate per severity
SEVERITY_BASE_FAMILIES = {
    "critical": 250,
    "high": 150,
    "medium": 75,
    "low": 25,
}
DEFAULT_BASE_FAMILIES = 50

SEVERITY_THRESHOLDS = {
    "high_water_level_m": 2.5,
    "medium_water_level_m": 1.5,
    "flood_warning_level_m": 2.0,
}

CRITICAL_KEYWORDS = ["critical", "major flood"]
FLOOD_KEYWORDS = ["flood"]
MEASUREMENT_KEYWORD = "water level"

FLOOD_WARNING_REMARK = "Flood warning issued"
NORMAL_REMARK = "Normal conditions"

# Sri Lanka civil time
SOURCE_UTC_OFFSET = "+05:30"

# District -> (lat, lon); order is the reporting order
DISTRICT_COORDINATES = {
    "Colombo": (6.9271, 79.8612),
    "Gampaha": (7.0840, 80.0098),
    "Kalutara": (6.5854, 79.9607),
    "Ratnapura": (6.6828, 80.4034),
    "Kegalle": (7.2523, 80.3436),
    "Galle": (6.0535, 80.2210),
    "Matara": (5.9549, 80.5550),
    "Kurunegala": (7.4863, 80.3623),
    "Anuradhapura": (8.3114, 80.4037),
    "Batticaloa": (7.7310, 81.6747),
    "Hambantota": (6.1429, 81.1212),
    "Trincomalee": (8.5874, 81.2152),
    "Puttalam": (8.0362, 79.8283),
    "Badulla": (6.9934, 81.0550),
    "Ampara": (7.2914, 81.6747),
}

# Index-aligned with DISTRICT_COORDINATES
REFERENCE_WATER_LEVELS = [2.5, 2.3, 1.6, 2.2, 1.4, 2.3, 2.0, 2.7, 2.6, 1.9]
DEFAULT_WATER_LEVEL = 1.5

# Synthetic trend padding
TREND_FALLBACK = {
    "total_base": 900,
    "total_mod": 400,
    "critical_base": 100,
    "critical_mod": 80,
    "high_base": 300,
    "high_mod": 150,
}

