# solarsense_api/analysis/constants.py

from enum import Enum


class Orientation(str, Enum):
    SOUTH = "south"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    EAST = "east"
    WEST = "west"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    NORTH = "north"


class Pitch(str, Enum):
    FLAT = "flat"  # 0-10 degrees
    LOW = "low"  # 10-20 degrees
    OPTIMAL = "optimal"  # 20-40 degrees
    STEEP = "steep"  # 40-50 degrees
    VERY_STEEP = "very_steep"  # 50+ degrees


class Shading(str, Enum):
    NONE = "none"
    MINIMAL = "minimal"  # <5%
    LIGHT = "light"  # 5-15%
    MODERATE = "moderate"  # 15-30%
    HEAVY = "heavy"  # 30-50%
    SEVERE = "severe"  # 50%+


class WeatherCondition(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


# Standard residential panel
PANEL_WIDTH_FT = 6.5
PANEL_HEIGHT_FT = 3.25
PANEL_AREA_SQFT = 21.125
PANEL_POWER_WATTS = 400
PANEL_POWER_KW = 0.4

ORIENTATION_FACTORS = {
    Orientation.SOUTH.value: 0.95,
    Orientation.SOUTHEAST.value: 0.90,
    Orientation.SOUTHWEST.value: 0.90,
    Orientation.EAST.value: 0.85,
    Orientation.WEST.value: 0.85,
    Orientation.NORTHEAST.value: 0.75,
    Orientation.NORTHWEST.value: 0.75,
    Orientation.NORTH.value: 0.65,
}

PITCH_FACTORS = {
    Pitch.FLAT.value: 0.85,
    Pitch.LOW.value: 0.90,
    Pitch.OPTIMAL.value: 0.95,
    Pitch.STEEP.value: 0.88,
    Pitch.VERY_STEEP.value: 0.80,
}

SHADING_FACTORS = {
    Shading.NONE.value: 1.0,
    Shading.MINIMAL.value: 0.95,
    Shading.LIGHT.value: 0.90,
    Shading.MODERATE.value: 0.80,
    Shading.HEAVY.value: 0.65,
    Shading.SEVERE.value: 0.40,
}

WEATHER_FACTORS = {
    WeatherCondition.EXCELLENT.value: 1.0,
    WeatherCondition.GOOD.value: 0.95,
    WeatherCondition.FAIR.value: 0.90,
    WeatherCondition.POOR.value: 0.85,
}

# Multipliers used when a category key is not in its table
DEFAULT_ORIENTATION_FACTOR = 0.85
DEFAULT_PITCH_FACTOR = 0.90
DEFAULT_SHADING_FACTOR = 0.90
DEFAULT_WEATHER_FACTOR = 0.95

# Indian market, rupees
COST_PER_WATT = 45.0
ELECTRICITY_RATE = 6.5
SUN_HOURS_PER_DAY = 5.5
SYSTEM_LIFE_YEARS = 25
MAINTENANCE_RATE = 0.01
CURRENCY_SYMBOL = "₹"

DAYS_PER_YEAR = 365

DEFAULT_MAX_COVERAGE_PERCENT = 35.0
MIN_VIABLE_PANELS = 4

MIN_PANEL_COUNT = 1
# Request upper bounds, keep sizing and savings arithmetic in float range
MAX_REQUEST_PANEL_COUNT = 100_000
MAX_REQUEST_ROOF_AREA_SQFT = 10_000_000.0
MIN_ROOF_AREA_SQFT = 100.0
MAX_RECOMMENDED_COVERAGE_PERCENT = 50.0
