# solarsense_api/main.py

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .analysis.config import load_market_profile
from .analysis.core import (
    calculate_lifetime_projection,
    calculate_optimal_panel_count,
    get_market_standards_summary,
    perform_installation_calculations,
    validate_calculation_inputs,
)
from .analysis.models import (
    InstallationCalculations,
    InstallationReport,
    InstallationRequest,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SolarSense API",
    description="API for solar installation coverage, output and payback estimates",
)

origins = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5000",
    "http://127.0.0.1:8000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Loaded once; every request is calculated against the same market data
MARKET_PROFILE = load_market_profile()


def _calculate(input_data: InstallationRequest) -> InstallationCalculations:
    panel_count = calculate_optimal_panel_count(
        input_data.roof_area,
        input_data.max_coverage_percent,
        input_data.panel_count,
        profile=MARKET_PROFILE,
    )
    validation = validate_calculation_inputs(
        panel_count,
        input_data.roof_area,
        input_data.orientation,
        input_data.pitch,
        input_data.shading,
        input_data.weather_conditions,
        profile=MARKET_PROFILE,
    )
    if not validation.is_valid:
        logger.warning(f"Rejected installation parameters: {validation.errors}")
        raise HTTPException(status_code=400, detail=validation.errors)

    return perform_installation_calculations(
        panel_count,
        input_data.roof_area,
        input_data.orientation,
        input_data.pitch,
        input_data.shading,
        input_data.weather_conditions,
        profile=MARKET_PROFILE,
    )


@app.get("/")
async def root():
    """
    Root endpoint providing API information and available endpoints.
    """
    return {
        "message": "SolarSense API",
        "description": "API for solar installation coverage, output and payback estimates",
        "version": "1.0.0",
        "endpoints": {
            "root": "/",
            "market_standards": "/api/market-standards",
            "installation_calculations": "/api/installation-calculations",
            "lifetime_projection": "/api/lifetime-projection",
            "docs": "/docs",
            "redoc": "/redoc",
        },
        "usage": {
            "method": "POST",
            "endpoint": "/api/installation-calculations",
            "description": "Submit roof and panel parameters to get an installation projection",
        },
    }


@app.get("/api/market-standards")
async def get_market_standards():
    """
    Market data every calculation is based on.
    """
    return {
        "profile": MARKET_PROFILE.model_dump(by_alias=True),
        "summary": get_market_standards_summary(profile=MARKET_PROFILE),
    }


@app.post("/api/installation-calculations", response_model=InstallationCalculations)
async def get_installation_calculations(input_data: InstallationRequest):
    """
    Validates the installation parameters and returns the projection.
    A missing or zero panel count is sized from the roof area.
    """
    return _calculate(input_data)


@app.post("/api/lifetime-projection", response_model=InstallationReport)
async def get_lifetime_projection(input_data: InstallationRequest):
    """
    Same as /api/installation-calculations, plus savings and maintenance over
    the life of the system.
    """
    calculations = _calculate(input_data)
    lifetime_projection = calculate_lifetime_projection(
        calculations.installation_cost,
        calculations.annual_savings,
        profile=MARKET_PROFILE,
    )
    return InstallationReport(
        calculations=calculations, lifetime_projection=lifetime_projection
    )
