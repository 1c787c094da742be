"""Immutable result structures."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from roi_engine.models.inputs import CalculatorInputs


@dataclass(frozen=True)
class CalculatedMetrics:
    """The 13 derived metrics, in dependency order."""

    total_initial_investment: float
    total_annual_operational_costs: float
    total_costs_over_time_horizon: float
    annual_cost_savings: float
    annual_efficiency_value: float
    annual_revenue_impact: float
    total_annual_benefits: float
    total_benefits_over_time_horizon: float
    net_annual_benefit: float
    net_benefits_over_time_horizon: float
    roi_percentage: float
    payback_period_years: float
    net_present_value: float

    @property
    def has_finite_payback(self) -> bool:
        return self.payback_period_years != math.inf

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ROICalculatorResult:
    """Top-level result: the inputs, their metrics and the narrative."""

    inputs: CalculatorInputs
    metrics: CalculatedMetrics
    interpretation: str

    def to_dict(self, by_alias: bool = False) -> dict[str, Any]:
        """Plain-dict form for export layers.

        With ``by_alias`` the inputs use camelCase keys; metric keys always
        follow the field names.
        """
        return {
            "inputs": self.inputs.model_dump(by_alias=by_alias),
            "metrics": self.metrics.as_dict(),
            "interpretation": self.interpretation,
        }
