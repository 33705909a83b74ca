# solarsense_api/analysis/models.py
from types import MappingProxyType
from typing import Annotated, Dict, List, Mapping, Optional, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from solarsense_api.analysis.constants import (
    COST_PER_WATT,
    CURRENCY_SYMBOL,
    DEFAULT_MAX_COVERAGE_PERCENT,
    DEFAULT_ORIENTATION_FACTOR,
    DEFAULT_PITCH_FACTOR,
    DEFAULT_SHADING_FACTOR,
    DEFAULT_WEATHER_FACTOR,
    ELECTRICITY_RATE,
    MAINTENANCE_RATE,
    MAX_REQUEST_PANEL_COUNT,
    MAX_REQUEST_ROOF_AREA_SQFT,
    ORIENTATION_FACTORS,
    PANEL_AREA_SQFT,
    PANEL_HEIGHT_FT,
    PANEL_POWER_KW,
    PANEL_POWER_WATTS,
    PANEL_WIDTH_FT,
    PITCH_FACTORS,
    SHADING_FACTORS,
    SUN_HOURS_PER_DAY,
    SYSTEM_LIFE_YEARS,
    WEATHER_FACTORS,
    WeatherCondition,
)


class CamelModel(BaseModel):
    """Immutable value struct serialised with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class MarketStandards(CamelModel):
    panel_width: float = PANEL_WIDTH_FT
    panel_height: float = PANEL_HEIGHT_FT
    panel_area: float = PANEL_AREA_SQFT
    panel_power: float = PANEL_POWER_WATTS
    panel_power_kw: float = Field(default=PANEL_POWER_KW, alias="panelPowerKW")


# Read-only view so a shared profile's tables cannot be edited in place
FactorTable = Annotated[
    Mapping[str, float],
    AfterValidator(lambda table: MappingProxyType(dict(table))),
    PlainSerializer(lambda table: dict(table), return_type=Dict[str, float]),
]


class EfficiencyFactors(CamelModel):
    orientation: FactorTable = Field(
        default_factory=lambda: MappingProxyType(dict(ORIENTATION_FACTORS))
    )
    pitch: FactorTable = Field(
        default_factory=lambda: MappingProxyType(dict(PITCH_FACTORS))
    )
    shading: FactorTable = Field(
        default_factory=lambda: MappingProxyType(dict(SHADING_FACTORS))
    )
    weather_conditions: FactorTable = Field(
        default_factory=lambda: MappingProxyType(dict(WEATHER_FACTORS))
    )
    orientation_fallback: float = DEFAULT_ORIENTATION_FACTOR
    pitch_fallback: float = DEFAULT_PITCH_FACTOR
    shading_fallback: float = DEFAULT_SHADING_FACTOR
    weather_fallback: float = DEFAULT_WEATHER_FACTOR


class MarketRates(CamelModel):
    cost_per_watt: float = COST_PER_WATT
    electricity_rate: float = ELECTRICITY_RATE
    sun_hours_per_day: float = SUN_HOURS_PER_DAY
    system_life_years: int = SYSTEM_LIFE_YEARS
    maintenance_rate: float = MAINTENANCE_RATE


class MarketProfile(CamelModel):
    """Every market constant a calculation depends on, bundled together."""

    standards: MarketStandards = Field(default_factory=MarketStandards)
    efficiency_factors: EfficiencyFactors = Field(default_factory=EfficiencyFactors)
    rates: MarketRates = Field(default_factory=MarketRates)
    currency_symbol: str = CURRENCY_SYMBOL


class InstallationCalculations(CamelModel):
    # Echoes the caller's count, which need not be whole
    total_panels: Union[int, float]
    panel_area: float
    usable_roof_area: float
    coverage_percentage: float
    power_output_kw: float = Field(alias="powerOutputKW")
    efficiency_score: int
    annual_savings: int
    installation_cost: int
    payback_period: float


class ValidationResult(CamelModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)


class LifetimeProjection(CamelModel):
    system_life_years: int
    annual_maintenance_cost: int
    lifetime_savings: int
    lifetime_maintenance_cost: int
    net_lifetime_benefit: int


class InstallationReport(CamelModel):
    calculations: InstallationCalculations
    lifetime_projection: LifetimeProjection


class InstallationRequest(CamelModel):
    model_config = ConfigDict(allow_inf_nan=False)

    # Zero or a missing count sizes the system from the roof area
    panel_count: Optional[int] = Field(default=None, le=MAX_REQUEST_PANEL_COUNT)
    roof_area: float = Field(le=MAX_REQUEST_ROOF_AREA_SQFT)
    max_coverage_percent: float = Field(
        default=DEFAULT_MAX_COVERAGE_PERCENT, gt=0, le=100
    )
    orientation: str
    pitch: str
    shading: str
    weather_conditions: str = WeatherCondition.GOOD.value
