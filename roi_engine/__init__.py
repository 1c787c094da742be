"""ROI engine for the IMPACT cost/benefit model."""

from .defaults import get_default_inputs
from .engine import CalculatedMetrics, ROICalculatorResult, calculate_metrics, calculate_roi
from .loader import inputs_from_dict, load_inputs
from .models import (
    CalculatorInputs,
    FinancialParameters,
    InitialCosts,
    OngoingCosts,
    QuantifiableBenefits,
)

__all__ = [
    "calculate_roi",
    "calculate_metrics",
    "get_default_inputs",
    "load_inputs",
    "inputs_from_dict",
    "CalculatorInputs",
    "InitialCosts",
    "OngoingCosts",
    "QuantifiableBenefits",
    "FinancialParameters",
    "CalculatedMetrics",
    "ROICalculatorResult",
]
