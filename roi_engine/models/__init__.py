from .inputs import (
    CalculatorInputs,
    FinancialParameters,
    InitialCosts,
    OngoingCosts,
    QuantifiableBenefits,
)

__all__ = [
    "InitialCosts",
    "OngoingCosts",
    "QuantifiableBenefits",
    "FinancialParameters",
    "CalculatorInputs",
]
