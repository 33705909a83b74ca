# Tests for the HTTP endpoints

import pytest
from fastapi.testclient import TestClient

from solarsense_api.main import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def installation():
    return {
        "roofArea": 1000,
        "orientation": "south",
        "pitch": "optimal",
        "shading": "none",
        "weatherConditions": "excellent",
    }


def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    endpoints = response.json()["endpoints"]
    assert endpoints["installation_calculations"] == "/api/installation-calculations"


def test_market_standards(client):
    response = client.get("/api/market-standards")

    assert response.status_code == 200
    body = response.json()
    assert body["profile"]["standards"]["panelArea"] == 21.125
    assert body["profile"]["rates"]["costPerWatt"] == 45
    assert body["summary"].startswith("Market Standards Used:")


def test_panel_count_is_sized_from_roof_when_missing(client, installation):
    response = client.post("/api/installation-calculations", json=installation)

    assert response.status_code == 200
    assert response.json() == {
        "totalPanels": 16,
        "panelArea": 338.0,
        "usableRoofArea": 1000.0,
        "coveragePercentage": 33.8,
        "powerOutputKW": 6.0,
        "efficiencyScore": 90,
        "annualSavings": 70463,
        "installationCost": 288000,
        "paybackPeriod": 4.1,
    }


def test_user_panel_count_is_used(client, installation):
    installation["panelCount"] = 10
    response = client.post("/api/installation-calculations", json=installation)

    assert response.status_code == 200
    assert response.json()["totalPanels"] == 10
    assert response.json()["installationCost"] == 180000


def test_target_coverage_sizes_the_system(client, installation):
    installation["maxCoveragePercent"] = 20
    response = client.post("/api/installation-calculations", json=installation)

    # 200 sq ft / 21.125 sq ft per panel
    assert response.json()["totalPanels"] == 9


def test_snake_case_body_is_accepted(client):
    response = client.post(
        "/api/installation-calculations",
        json={
            "panel_count": 12,
            "roof_area": 800,
            "orientation": "East",
            "pitch": "low",
            "shading": "light",
        },
    )

    assert response.status_code == 200
    assert response.json()["totalPanels"] == 12


def test_invalid_inputs_return_validation_messages(client):
    response = client.post(
        "/api/installation-calculations",
        json={
            "panelCount": 20,
            "roofArea": 50,
            "orientation": "sideways",
            "pitch": "optimal",
            "shading": "none",
        },
    )

    assert response.status_code == 400
    assert response.json()["detail"] == [
        "Roof area must be at least 100 square feet",
        "Invalid orientation value",
        "Panel coverage exceeds 50% of roof area - not recommended",
    ]


def test_unknown_weather_is_rejected(client, installation):
    installation["weatherConditions"] = "monsoon"
    response = client.post("/api/installation-calculations", json=installation)

    assert response.status_code == 400
    assert response.json()["detail"] == ["Invalid weather condition value"]


def test_zero_roof_area_is_rejected_before_calculating(client, installation):
    installation["roofArea"] = 0
    response = client.post("/api/installation-calculations", json=installation)

    assert response.status_code == 400
    assert "Roof area must be at least 100 square feet" in response.json()["detail"]


def test_missing_fields_are_rejected(client):
    response = client.post("/api/installation-calculations", json={"roofArea": 1000})
    assert response.status_code == 422


@pytest.mark.parametrize(
    "raw_body",
    [
        '{"roofArea": 1e309, "orientation": "south", "pitch": "optimal", "shading": "none"}',
        '{"roofArea": NaN, "orientation": "south", "pitch": "optimal", "shading": "none"}',
        '{"roofArea": 1000, "maxCoveragePercent": 1e309, "orientation": "south", '
        '"pitch": "optimal", "shading": "none"}',
    ],
)
def test_non_finite_numbers_are_rejected(client, raw_body):
    response = client.post(
        "/api/installation-calculations",
        content=raw_body,
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 422


@pytest.mark.parametrize("max_coverage_percent", [-50, 0, 101])
def test_target_coverage_must_be_a_percentage(client, installation, max_coverage_percent):
    installation["maxCoveragePercent"] = max_coverage_percent
    response = client.post("/api/installation-calculations", json=installation)
    assert response.status_code == 422


@pytest.mark.parametrize(
    "field, value", [("panelCount", 10**30), ("roofArea", 1e300)]
)
def test_oversized_requests_are_rejected(client, installation, field, value):
    installation[field] = value
    response = client.post("/api/installation-calculations", json=installation)
    assert response.status_code == 422


def test_lifetime_projection(client, installation):
    response = client.post("/api/lifetime-projection", json=installation)

    assert response.status_code == 200
    body = response.json()
    assert body["calculations"]["annualSavings"] == 70463
    assert body["lifetimeProjection"] == {
        "systemLifeYears": 25,
        "annualMaintenanceCost": 2880,
        "lifetimeSavings": 1761575,
        "lifetimeMaintenanceCost": 72000,
        "netLifetimeBenefit": 1401575,
    }


def test_lifetime_projection_validates_inputs(client, installation):
    installation["panelCount"] = 40
    response = client.post("/api/lifetime-projection", json=installation)
    assert response.status_code == 400
