# solarsense_api/analysis/core.py

import logging
import math

from .config import DEFAULT_MARKET_PROFILE
from .constants import (
    DAYS_PER_YEAR,
    DEFAULT_MAX_COVERAGE_PERCENT,
    MAX_RECOMMENDED_COVERAGE_PERCENT,
    MIN_PANEL_COUNT,
    MIN_ROOF_AREA_SQFT,
    MIN_VIABLE_PANELS,
    Orientation,
    Pitch,
    Shading,
    WeatherCondition,
)
from .models import (
    InstallationCalculations,
    LifetimeProjection,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def round_half_up(value, ndigits=0):
    """
    Round halves towards positive infinity, e.g. 2.5 -> 3 and -2.5 -> -2.
    Returns an int when ndigits is 0. inf and nan are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**ndigits
    rounded = math.floor(value * factor + 0.5)
    if ndigits == 0:
        return int(rounded)
    return rounded / factor


def _lookup_factor(table, key, fallback, category):
    factor = table.get(key.lower())
    if factor is None:
        logger.debug(f"Unknown {category} '{key}', using fallback factor {fallback}")
        return fallback
    return factor


def calculate_panel_area(panel_count, profile=DEFAULT_MARKET_PROFILE):
    """Total panel area in square feet"""
    return panel_count * profile.standards.panel_area


def calculate_coverage(panel_count, roof_area, profile=DEFAULT_MARKET_PROFILE):
    """
    Percentage of the roof covered by panels.

    A zero roof area yields inf (nan when there are no panels either) rather
    than raising; validate_calculation_inputs rejects such roofs up front.
    """
    panel_area = calculate_panel_area(panel_count, profile=profile)
    if roof_area == 0:
        if panel_area == 0:
            return math.nan
        return math.copysign(math.inf, panel_area)
    return (panel_area / roof_area) * 100


def calculate_power_output(panel_count, profile=DEFAULT_MARKET_PROFILE):
    """System power in whole kilowatts"""
    return round_half_up(panel_count * profile.standards.panel_power_kw)


def calculate_efficiency_score(
    orientation,
    pitch,
    shading,
    weather_conditions=WeatherCondition.GOOD,
    profile=DEFAULT_MARKET_PROFILE,
):
    """
    Combine orientation, pitch, shading and weather multipliers into a 0-100
    score. Keys are matched case-insensitively; an unknown key falls back to
    the profile's default multiplier for that category.
    """
    factors = profile.efficiency_factors
    orientation_factor = _lookup_factor(
        factors.orientation, orientation, factors.orientation_fallback, "orientation"
    )
    pitch_factor = _lookup_factor(factors.pitch, pitch, factors.pitch_fallback, "pitch")
    shading_factor = _lookup_factor(
        factors.shading, shading, factors.shading_fallback, "shading"
    )
    weather_factor = _lookup_factor(
        factors.weather_conditions,
        weather_conditions,
        factors.weather_fallback,
        "weather condition",
    )
    return round_half_up(
        orientation_factor * pitch_factor * shading_factor * weather_factor * 100
    )


def calculate_annual_savings(
    power_output_kw, efficiency_score, profile=DEFAULT_MARKET_PROFILE
):
    """Yearly electricity bill savings, rounded to a whole currency unit"""
    rates = profile.rates
    actual_power_kw = power_output_kw * (efficiency_score / 100)
    daily_generation_kwh = actual_power_kw * rates.sun_hours_per_day
    annual_generation_kwh = daily_generation_kwh * DAYS_PER_YEAR
    return round_half_up(annual_generation_kwh * rates.electricity_rate)


def calculate_installation_cost(panel_count, profile=DEFAULT_MARKET_PROFILE):
    """Upfront cost of the system"""
    total_watts = panel_count * profile.standards.panel_power
    return total_watts * profile.rates.cost_per_watt


def calculate_payback_period(installation_cost, annual_savings):
    """Years until savings repay the installation, 0 when nothing is saved"""
    if annual_savings <= 0:
        return 0
    return round_half_up(installation_cost / annual_savings, 1)


def calculate_optimal_panel_count(
    roof_area,
    max_coverage_percent=DEFAULT_MAX_COVERAGE_PERCENT,
    user_panel_count=None,
    profile=DEFAULT_MARKET_PROFILE,
):
    """
    A positive user-supplied count is returned as is. Otherwise fill the roof
    up to max_coverage_percent, never going below a minimum viable system of
    four panels, however small the roof.
    """
    if user_panel_count and user_panel_count > 0:
        return user_panel_count

    max_panel_area = roof_area * (max_coverage_percent / 100)
    max_panels = math.floor(max_panel_area / profile.standards.panel_area)
    return max(MIN_VIABLE_PANELS, max_panels)


def perform_installation_calculations(
    panel_count,
    roof_area,
    orientation,
    pitch,
    shading,
    weather_conditions=WeatherCondition.GOOD,
    profile=DEFAULT_MARKET_PROFILE,
):
    """Run every calculation for one proposed installation"""
    panel_area = calculate_panel_area(panel_count, profile=profile)
    coverage_percentage = calculate_coverage(panel_count, roof_area, profile=profile)
    power_output_kw = calculate_power_output(panel_count, profile=profile)
    efficiency_score = calculate_efficiency_score(
        orientation, pitch, shading, weather_conditions, profile=profile
    )
    annual_savings = calculate_annual_savings(
        power_output_kw, efficiency_score, profile=profile
    )
    installation_cost = calculate_installation_cost(panel_count, profile=profile)
    payback_period = calculate_payback_period(installation_cost, annual_savings)

    logger.info(
        f"Calculated {panel_count} panels: {coverage_percentage:.2f}% coverage, "
        f"{power_output_kw}kW, {efficiency_score}% efficiency, "
        f"payback {payback_period} years"
    )

    return InstallationCalculations(
        total_panels=panel_count,
        panel_area=panel_area,
        usable_roof_area=roof_area,
        coverage_percentage=round_half_up(coverage_percentage, 2),
        power_output_kw=round_half_up(power_output_kw, 2),
        efficiency_score=efficiency_score,
        annual_savings=annual_savings,
        installation_cost=round_half_up(installation_cost),
        payback_period=payback_period,
    )


def validate_calculation_inputs(
    panel_count,
    roof_area,
    orientation,
    pitch,
    shading,
    weather_conditions=None,
    profile=DEFAULT_MARKET_PROFILE,
):
    """
    Check installation parameters before calculating.

    Problems are collected as readable messages instead of being raised, so a
    caller can report all of them at once. The weather condition is only
    checked when one is given.
    """
    factors = profile.efficiency_factors
    errors = []

    if panel_count < MIN_PANEL_COUNT:
        errors.append("Panel count must be at least 1")

    if roof_area < MIN_ROOF_AREA_SQFT:
        errors.append("Roof area must be at least 100 square feet")

    if orientation.lower() not in factors.orientation:
        errors.append("Invalid orientation value")

    if pitch.lower() not in factors.pitch:
        errors.append("Invalid pitch value")

    if shading.lower() not in factors.shading:
        errors.append("Invalid shading value")

    if (
        weather_conditions is not None
        and weather_conditions.lower() not in factors.weather_conditions
    ):
        errors.append("Invalid weather condition value")

    # nan never exceeds the limit, matching an empty roof with no panels
    coverage = calculate_coverage(panel_count, roof_area, profile=profile)
    if coverage > MAX_RECOMMENDED_COVERAGE_PERCENT:
        errors.append("Panel coverage exceeds 50% of roof area - not recommended")

    return ValidationResult(is_valid=not errors, errors=errors)


def calculate_lifetime_projection(
    installation_cost, annual_savings, profile=DEFAULT_MARKET_PROFILE
):
    """Savings and maintenance over the expected life of the system"""
    rates = profile.rates
    annual_maintenance_cost = installation_cost * rates.maintenance_rate
    lifetime_savings = annual_savings * rates.system_life_years
    lifetime_maintenance_cost = annual_maintenance_cost * rates.system_life_years
    net_lifetime_benefit = (
        lifetime_savings - installation_cost - lifetime_maintenance_cost
    )
    return LifetimeProjection(
        system_life_years=rates.system_life_years,
        annual_maintenance_cost=round_half_up(annual_maintenance_cost),
        lifetime_savings=round_half_up(lifetime_savings),
        lifetime_maintenance_cost=round_half_up(lifetime_maintenance_cost),
        net_lifetime_benefit=round_half_up(net_lifetime_benefit),
    )


def get_market_standards_summary(profile=DEFAULT_MARKET_PROFILE):
    """Market assumptions as display text"""
    standards = profile.standards
    rates = profile.rates
    currency = profile.currency_symbol
    return "\n".join(
        [
            "Market Standards Used:",
            f"- Panel Size: {standards.panel_width}ft × {standards.panel_height}ft "
            f"({standards.panel_area} sq ft)",
            f"- Panel Power: {standards.panel_power:g}W ({standards.panel_power_kw}kW)",
            f"- Installation Cost: {currency}{rates.cost_per_watt:g}/watt",
            f"- Electricity Rate: {currency}{rates.electricity_rate:g}/kWh",
            f"- Sun Hours: {rates.sun_hours_per_day:g} hours/day",
            f"- System Life: {rates.system_life_years} years",
        ]
    )


def main_cli_execution():
    """
    Print a report for a sample rooftop, for local testing from the command line.
    """
    roof_area = 1000.0
    orientation = Orientation.SOUTH
    pitch = Pitch.OPTIMAL
    shading = Shading.MINIMAL
    weather = WeatherCondition.GOOD

    panel_count = calculate_optimal_panel_count(roof_area)
    validation = validate_calculation_inputs(
        panel_count, roof_area, orientation, pitch, shading, weather
    )
    if not validation.is_valid:
        for error in validation.errors:
            print(f"Error: {error}")
        return

    results = perform_installation_calculations(
        panel_count, roof_area, orientation, pitch, shading, weather
    )
    lifetime = calculate_lifetime_projection(
        results.installation_cost, results.annual_savings
    )
    currency = DEFAULT_MARKET_PROFILE.currency_symbol

    print("\n" + "=" * 50)
    print("        SOLAR INSTALLATION ECONOMICS REPORT")
    print("=" * 50 + "\n")

    print("--- 1. Installation ---")
    print(f"Roof: {roof_area:.0f} sq ft, {orientation.value} facing, {pitch.value} pitch")
    print(f"Shading: {shading.value}, Weather: {weather.value}")
    print(f"Panels: {results.total_panels} ({results.panel_area:.2f} sq ft)")
    print(f"Roof Coverage: {results.coverage_percentage:.2f}%\n")

    print("--- 2. Performance ---")
    print(f"Power Output: {results.power_output_kw:g} kW")
    print(f"Efficiency Score: {results.efficiency_score}%\n")

    print("--- 3. Financials ---")
    print(f"Installation Cost: {currency}{results.installation_cost:,}")
    print(f"Annual Savings: {currency}{results.annual_savings:,}")
    print(f"Payback Period: {results.payback_period} years")
    print(
        f"Net Benefit over {lifetime.system_life_years} years: "
        f"{currency}{lifetime.net_lifetime_benefit:,}\n"
    )

    print(get_market_standards_summary())
    print("=" * 50)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main_cli_execution()
