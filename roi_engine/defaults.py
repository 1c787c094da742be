"""Canonical benchmark inputs used before prospect-specific customization."""

from __future__ import annotations

from roi_engine.models.inputs import (
    CalculatorInputs,
    FinancialParameters,
    InitialCosts,
    OngoingCosts,
    QuantifiableBenefits,
)


def get_default_inputs() -> CalculatorInputs:
    """Return the default benchmark inputs.

    Builds a new object on every call so that callers customizing their copy
    never share state.
    """
    return CalculatorInputs(
        initial_costs=InitialCosts(
            software_license_annual_fee=50000,
            software_license_setup_fee=10000,
            hardware_costs=0,
            implementation_hours=40,
            implementation_hourly_rate=150,
            training_users=10,
            training_cost_per_user=250,
            other_one_time_costs=0,
        ),
        ongoing_costs=OngoingCosts(
            annual_maintenance_support=10000,
            personnel_ftes=0.1,
            personnel_blended_salary=70000,
            utilities_infrastructure=0,
            marketing_adoption=0,
            other_annual_op_ex=0,
        ),
        benefits=QuantifiableBenefits(
            current_tool_costs=[15000, 8000, 5000],  # three tools being replaced
            fte_hours_saved_per_week=5,
            blended_hourly_rate=45,
            client_current_revenue=10_000_000,
            benchmark_improvement_percent=15,
            attribution_factor=35,
        ),
        financial_params=FinancialParameters(
            time_horizon_years=3,
            discount_rate=10,
        ),
    )
