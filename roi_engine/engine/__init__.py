from .calculator import calculate_metrics, calculate_roi
from .formulas import (
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
from .registry import MetricDefinition, get_all_metrics, get_metric, get_metrics_by_stage
from .result import CalculatedMetrics, ROICalculatorResult
from .sensitivity import SensitivityResult, run_sensitivity

__all__ = [
    "calculate_metrics",
    "calculate_roi",
    "calculate_total_initial_investment",
    "calculate_total_annual_operational_costs",
    "calculate_total_costs_over_time_horizon",
    "calculate_annual_cost_savings",
    "calculate_annual_efficiency_value",
    "calculate_annual_revenue_impact",
    "calculate_total_annual_benefits",
    "calculate_total_benefits_over_time_horizon",
    "calculate_net_annual_benefit",
    "calculate_net_benefits_over_time_horizon",
    "calculate_roi_percentage",
    "calculate_payback_period",
    "calculate_npv",
    "MetricDefinition",
    "get_metric",
    "get_all_metrics",
    "get_metrics_by_stage",
    "CalculatedMetrics",
    "ROICalculatorResult",
    "SensitivityResult",
    "run_sensitivity",
]
