"""Core calculation engine.

Takes calculator inputs -> produces CalculatedMetrics and the narrative,
computing every metric exactly once in dependency order:
costs -> benefits -> net figures -> performance ratios.
"""

from __future__ import annotations

import logging
from typing import Optional

from roi_engine.config.settings import get_settings
from roi_engine.engine.formulas import (
    calculate_annual_cost_savings,
    calculate_annual_efficiency_value,
    calculate_annual_revenue_impact,
    calculate_net_annual_benefit,
    calculate_net_benefits_over_time_horizon,
    calculate_npv,
    calculate_payback_period,
    calculate_roi_percentage,
    calculate_total_annual_benefits,
    calculate_total_annual_operational_costs,
    calculate_total_benefits_over_time_horizon,
    calculate_total_costs_over_time_horizon,
    calculate_total_initial_investment,
)
from roi_engine.engine.result import CalculatedMetrics, ROICalculatorResult
from roi_engine.models.inputs import CalculatorInputs
from roi_engine.narrative.formatting import CurrencyFormatter
from roi_engine.narrative.interpretation import generate_interpretation

logger = logging.getLogger(__name__)


def calculate_metrics(inputs: CalculatorInputs) -> CalculatedMetrics:
    """Derive all 13 metrics without generating any text."""
    horizon = inputs.financial_params.time_horizon_years

    # Costs
    tii = calculate_total_initial_investment(inputs.initial_costs)
    taoc = calculate_total_annual_operational_costs(
        inputs.ongoing_costs, inputs.initial_costs
    )
    tcot = calculate_total_costs_over_time_horizon(tii, taoc, horizon)

    # Benefits
    annual_cost_savings = calculate_annual_cost_savings(inputs.benefits)
    annual_efficiency_value = calculate_annual_efficiency_value(inputs.benefits)
    annual_revenue_impact = calculate_annual_revenue_impact(inputs.benefits)
    tab = calculate_total_annual_benefits(
        annual_cost_savings, annual_efficiency_value, annual_revenue_impact
    )
    tbot = calculate_total_benefits_over_time_horizon(tab, horizon)

    # Net figures
    nab = calculate_net_annual_benefit(tab, taoc)
    nbot = calculate_net_benefits_over_time_horizon(tbot, tcot)

    # Performance ratios
    roi_percentage = calculate_roi_percentage(nbot, tii)
    payback_period_years = calculate_payback_period(tii, nab)
    npv = calculate_npv(tii, nab, horizon, inputs.financial_params.discount_rate)

    return CalculatedMetrics(
        total_initial_investment=tii,
        total_annual_operational_costs=taoc,
        total_costs_over_time_horizon=tcot,
        annual_cost_savings=annual_cost_savings,
        annual_efficiency_value=annual_efficiency_value,
        annual_revenue_impact=annual_revenue_impact,
        total_annual_benefits=tab,
        total_benefits_over_time_horizon=tbot,
        net_annual_benefit=nab,
        net_benefits_over_time_horizon=nbot,
        roi_percentage=roi_percentage,
        payback_period_years=payback_period_years,
        net_present_value=npv,
    )


def calculate_roi(
    inputs: CalculatorInputs,
    formatter: Optional[CurrencyFormatter] = None,
) -> ROICalculatorResult:
    """Run the full IMPACT calculation and interpret the results.

    Never raises for numeric input: zero investment yields an ROI of 0 and a
    non-positive net annual benefit yields an infinite payback period.
    When no formatter is given, the configured locale picks one.
    """
    if formatter is None:
        formatter = CurrencyFormatter.for_locale(get_settings().locale)

    metrics = calculate_metrics(inputs)
    logger.debug(
        "ROI calculated: tii=%s nab=%s roi=%s%% npv=%s",
        metrics.total_initial_investment,
        metrics.net_annual_benefit,
        metrics.roi_percentage,
        metrics.net_present_value,
    )
    if metrics.total_initial_investment == 0:
        logger.info("Zero initial investment; ROI reported as 0")
    if not metrics.has_finite_payback:
        logger.info(
            "Net annual benefit %s is not positive; payback is indefinite",
            metrics.net_annual_benefit,
        )

    interpretation = generate_interpretation(
        metrics, inputs.financial_params, formatter
    )
    return ROICalculatorResult(
        inputs=inputs,
        metrics=metrics,
        interpretation=interpretation,
    )
