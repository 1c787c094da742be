"""Shared test fixtures for the ROI engine test suite."""

import pytest

from roi_engine.config.settings import get_settings
from roi_engine.defaults import get_default_inputs
from roi_engine.models.inputs import (
    CalculatorInputs,
    FinancialParameters,
    InitialCosts,
    OngoingCosts,
    QuantifiableBenefits,
)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def default_inputs() -> CalculatorInputs:
    """The canonical benchmark inputs."""
    return get_default_inputs()


@pytest.fixture
def zero_investment_inputs() -> CalculatorInputs:
    """Only recurring costs and benefits -- nothing is spent up front."""
    return CalculatorInputs(
        initial_costs=InitialCosts(software_license_annual_fee=12_000),
        ongoing_costs=OngoingCosts(annual_maintenance_support=3_000),
        benefits=QuantifiableBenefits(
            current_tool_costs=[10_000, 5_000],
            fte_hours_saved_per_week=10,
            blended_hourly_rate=50,
        ),
        financial_params=FinancialParameters(time_horizon_years=3, discount_rate=8),
    )


@pytest.fixture
def loss_making_inputs() -> CalculatorInputs:
    """Default costs with no benefits at all -- net annual benefit is negative."""
    defaults = get_default_inputs()
    return defaults.model_copy(update={"benefits": QuantifiableBenefits()})


@pytest.fixture
def reference_payload() -> dict:
    """Default inputs as a camelCase JSON payload."""
    return {
        "initialCosts": {
            "softwareLicenseAnnualFee": 50000,
            "softwareLicenseSetupFee": 10000,
            "hardwareCosts": 0,
            "implementationHours": 40,
            "implementationHourlyRate": 150,
            "trainingUsers": 10,
            "trainingCostPerUser": 250,
            "otherOneTimeCosts": 0,
        },
        "ongoingCosts": {
            "annualMaintenanceSupport": 10000,
            "personnelFTEs": 0.1,
            "personnelBlendedSalary": 70000,
            "utilitiesInfrastructure": 0,
            "marketingAdoption": 0,
            "otherAnnualOpEx": 0,
        },
        "benefits": {
            "currentToolCosts": [15000, 8000, 5000],
            "fteHoursSavedPerWeek": 5,
            "blendedHourlyRate": 45,
            "clientCurrentRevenue": 10000000,
            "benchmarkImprovementPercent": 15,
            "attributionFactor": 35,
        },
        "financialParams": {
            "timeHorizonYears": 3,
            "discountRate": 10,
        },
    }
