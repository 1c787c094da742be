"""IMPACT model formula implementations.

Each function is a pure calculation with no side effects and is exposed on
its own, so callers can recompute a subset of metrics (e.g. for sensitivity
analysis) without running the whole pipeline. Percent inputs are on a 0-100
scale. Nothing is rounded here.
"""

from __future__ import annotations

import math
import operator
from functools import reduce

from roi_engine.engine.registry import register_metric
from roi_engine.models.inputs import (
    InitialCosts,
    OngoingCosts,
    QuantifiableBenefits,
)

WEEKS_PER_YEAR = 52


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Float division that yields inf/NaN on a zero denominator instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def _perpetuity_value(amount: float, base: float) -> float:
    """Limit of amount / base**year summed over years 1, 2, ... (unbounded horizon)."""
    if amount == 0:
        return 0.0
    if abs(base) > 1:
        return amount / (base - 1)
    if 0 < base <= 1:
        return math.copysign(math.inf, amount)
    return math.nan


# -- Costs ------------------------------------------------------------------


@register_metric(
    metric_id="total_initial_investment",
    label="Total Initial Investment",
    abbreviation="TII",
    description=(
        "One-time costs: setup fee + hardware + implementation hours x rate "
        "+ training users x cost per user + other one-time costs."
    ),
    stage="costs",
)
def calculate_total_initial_investment(costs: InitialCosts) -> float:
    return (
        costs.software_license_setup_fee
        + costs.hardware_costs
        + (costs.implementation_hours * costs.implementation_hourly_rate)
        + (costs.training_users * costs.training_cost_per_user)
        + costs.other_one_time_costs
    )


@register_metric(
    metric_id="total_annual_operational_costs",
    label="Total Annual Operational Costs",
    abbreviation="TAOC",
    description=(
        "Recurring costs per year: annual license fee + maintenance + FTEs x "
        "blended salary + infrastructure + marketing/adoption + other opex."
    ),
    stage="costs",
)
def calculate_total_annual_operational_costs(
    costs: OngoingCosts,
    initial_costs: InitialCosts,
) -> float:
    """TAOC. The annual license fee is read from ``initial_costs``."""
    return (
        initial_costs.software_license_annual_fee
        + costs.annual_maintenance_support
        + (costs.personnel_ftes * costs.personnel_blended_salary)
        + costs.utilities_infrastructure
        + costs.marketing_adoption
        + costs.other_annual_op_ex
    )


@register_metric(
    metric_id="total_costs_over_time_horizon",
    label="Total Costs Over Time Horizon",
    abbreviation="TCOT",
    description="TII + TAOC x time horizon (years).",
    stage="costs",
)
def calculate_total_costs_over_time_horizon(
    tii: float,
    taoc: float,
    time_horizon: float,
) -> float:
    return tii + (taoc * time_horizon)


# -- Benefits ---------------------------------------------------------------


@register_metric(
    metric_id="annual_cost_savings",
    label="Annual Cost Savings",
    abbreviation="ACS",
    description="Sum of the annual costs of the tools being displaced.",
    stage="benefits",
)
def calculate_annual_cost_savings(benefits: QuantifiableBenefits) -> float:
    # plain left-to-right addition; sum() compensates float error on 3.12+
    return reduce(operator.add, benefits.current_tool_costs, 0.0)


@register_metric(
    metric_id="annual_efficiency_value",
    label="Annual Efficiency Value",
    abbreviation="AEV",
    description="FTE hours saved per week x 52 x blended hourly rate.",
    stage="benefits",
)
def calculate_annual_efficiency_value(benefits: QuantifiableBenefits) -> float:
    annual_hours_saved = benefits.fte_hours_saved_per_week * WEEKS_PER_YEAR
    return annual_hours_saved * benefits.blended_hourly_rate


@register_metric(
    metric_id="annual_revenue_impact",
    label="Annual Revenue Impact",
    abbreviation="ARI",
    description=(
        "Current revenue x benchmark improvement % x attribution %, "
        "i.e. the share of the improvement credited to the solution."
    ),
    stage="benefits",
)
def calculate_annual_revenue_impact(benefits: QuantifiableBenefits) -> float:
    return (
        benefits.client_current_revenue
        * (benefits.benchmark_improvement_percent / 100)
        * (benefits.attribution_factor / 100)
    )


@register_metric(
    metric_id="total_annual_benefits",
    label="Total Annual Benefits",
    abbreviation="TAB",
    description="Cost savings + efficiency value + revenue impact.",
    stage="benefits",
)
def calculate_total_annual_benefits(
    cost_savings: float,
    efficiency_value: float,
    revenue_impact: float,
) -> float:
    return cost_savings + efficiency_value + revenue_impact


@register_metric(
    metric_id="total_benefits_over_time_horizon",
    label="Total Benefits Over Time Horizon",
    abbreviation="TBOT",
    description="TAB x time horizon (years).",
    stage="benefits",
)
def calculate_total_benefits_over_time_horizon(tab: float, time_horizon: float) -> float:
    return tab * time_horizon


# -- Net figures ------------------------------------------------------------


@register_metric(
    metric_id="net_annual_benefit",
    label="Net Annual Benefit",
    abbreviation="NAB",
    description="TAB - TAOC.",
    stage="net",
)
def calculate_net_annual_benefit(tab: float, taoc: float) -> float:
    return tab - taoc


@register_metric(
    metric_id="net_benefits_over_time_horizon",
    label="Net Benefits Over Time Horizon",
    abbreviation="NBOT",
    description="TBOT - TCOT.",
    stage="net",
)
def calculate_net_benefits_over_time_horizon(tbot: float, tcot: float) -> float:
    return tbot - tcot


# -- Performance ratios -----------------------------------------------------


@register_metric(
    metric_id="roi_percentage",
    label="Return on Investment",
    abbreviation="ROI",
    description="NBOT / TII x 100; 0 when there is no initial investment.",
    unit="percent",
    stage="performance",
)
def calculate_roi_percentage(nbot: float, tii: float) -> float:
    if tii == 0:
        return 0.0
    return (nbot / tii) * 100


@register_metric(
    metric_id="payback_period_years",
    label="Payback Period",
    abbreviation="PBP",
    description="TII / NAB in years; infinite when NAB is not positive.",
    unit="years",
    stage="performance",
)
def calculate_payback_period(tii: float, nab: float) -> float:
    if nab <= 0:
        return math.inf
    return tii / nab


@register_metric(
    metric_id="net_present_value",
    label="Net Present Value",
    abbreviation="NPV",
    description=(
        "-TII + sum over years 1..horizon of NAB / (1 + discount rate)^year, "
        "with NAB held constant every year."
    ),
    stage="performance",
)
def calculate_npv(
    tii: float,
    nab: float,
    time_horizon: float,
    discount_rate: float,
) -> float:
    npv = -tii
    # also catches a NaN horizon
    if not time_horizon >= 1:
        return npv

    base = 1 + discount_rate / 100
    if math.isinf(time_horizon):
        return npv + _perpetuity_value(nab, base)

    for year in range(1, math.floor(time_horizon) + 1):
        try:
            factor = base**year
        except OverflowError:
            factor = math.inf
        npv += _ieee_divide(nab, factor)

    return npv
