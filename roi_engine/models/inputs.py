"""Input value records for the IMPACT cost/benefit model.

Field names are snake_case with camelCase aliases, so camelCase JSON payloads
(``softwareLicenseAnnualFee`` ...) load unchanged.
Only types are checked here; signs and ranges are the caller's concern.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _InputRecord(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class InitialCosts(_InputRecord):
    """One-time costs, plus the annual license fee.

    ``software_license_annual_fee`` is recurring but lives here; it is added
    to the annual operational costs, not to the initial investment.
    """

    software_license_annual_fee: float = 0.0
    software_license_setup_fee: float = 0.0
    hardware_costs: float = 0.0
    implementation_hours: float = 0.0
    implementation_hourly_rate: float = 0.0
    training_users: float = 0.0
    training_cost_per_user: float = 0.0
    other_one_time_costs: float = 0.0


class OngoingCosts(_InputRecord):
    """Recurring annual costs."""

    annual_maintenance_support: float = 0.0
    personnel_ftes: float = Field(default=0.0, alias="personnelFTEs")
    personnel_blended_salary: float = 0.0
    utilities_infrastructure: float = 0.0
    marketing_adoption: float = 0.0
    other_annual_op_ex: float = Field(default=0.0, alias="otherAnnualOpEx")


class QuantifiableBenefits(_InputRecord):
    """Annual benefits. Percent fields are on a 0-100 scale."""

    current_tool_costs: tuple[float, ...] = ()
    fte_hours_saved_per_week: float = 0.0
    blended_hourly_rate: float = 0.0
    client_current_revenue: float = 0.0
    benchmark_improvement_percent: float = 0.0
    attribution_factor: float = 0.0


class FinancialParameters(_InputRecord):
    time_horizon_years: float = 3
    discount_rate: float = 10


class CalculatorInputs(_InputRecord):
    """Everything the engine needs for one calculation."""

    initial_costs: InitialCosts = Field(default_factory=InitialCosts)
    ongoing_costs: OngoingCosts = Field(default_factory=OngoingCosts)
    benefits: QuantifiableBenefits = Field(default_factory=QuantifiableBenefits)
    financial_params: FinancialParameters = Field(default_factory=FinancialParameters)
