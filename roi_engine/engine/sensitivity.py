"""One-at-a-time sensitivity analysis over calculator inputs.

Each parameter is swung down and up by a fraction of its base value while
every other input is held fixed, and the resulting ROI spread is reported.
Sorting by spread gives the rows of a tornado chart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pydantic import BaseModel

from roi_engine.engine.calculator import calculate_metrics
from roi_engine.models.inputs import CalculatorInputs

DEFAULT_SWING = 0.2


@dataclass(frozen=True)
class SensitivityResult:
    """ROI response to swinging a single input."""

    parameter: str
    base_value: float
    low_value: float
    high_value: float
    roi_at_low: float
    roi_at_base: float
    roi_at_high: float
    impact_range: float  # |high - low|


def numeric_parameters(inputs: CalculatorInputs) -> list[str]:
    """Dotted paths of every scalar numeric input, e.g. ``benefits.attribution_factor``."""
    paths: list[str] = []
    for group_name in type(inputs).model_fields:
        group = getattr(inputs, group_name)
        for field_name in type(group).model_fields:
            value = getattr(group, field_name)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                paths.append(f"{group_name}.{field_name}")
    return paths


def _resolve(inputs: CalculatorInputs, path: str) -> tuple[str, str, float]:
    group_name, _, field_name = path.partition(".")
    group = getattr(inputs, group_name, None)
    if not isinstance(group, BaseModel) or field_name not in type(group).model_fields:
        raise KeyError(f"Unknown input parameter: {path!r}")
    value = getattr(group, field_name)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise KeyError(f"Input parameter {path!r} is not a scalar number")
    return group_name, field_name, value


def with_value(inputs: CalculatorInputs, path: str, value: float) -> CalculatorInputs:
    """Copy of ``inputs`` with the input at ``path`` replaced."""
    group_name, field_name, _ = _resolve(inputs, path)
    group = getattr(inputs, group_name)
    return inputs.model_copy(
        update={group_name: group.model_copy(update={field_name: value})}
    )


def run_sensitivity(
    inputs: CalculatorInputs,
    parameters: Optional[Iterable[str]] = None,
    swing: float = DEFAULT_SWING,
) -> list[SensitivityResult]:
    """Swing each parameter by +/- ``swing`` and rank by ROI impact."""
    if parameters is None:
        parameters = numeric_parameters(inputs)

    roi_at_base = calculate_metrics(inputs).roi_percentage
    results: list[SensitivityResult] = []

    for path in parameters:
        _, _, base_value = _resolve(inputs, path)
        low_value = base_value * (1 - swing)
        high_value = base_value * (1 + swing)

        roi_at_low = calculate_metrics(with_value(inputs, path, low_value)).roi_percentage
        roi_at_high = calculate_metrics(with_value(inputs, path, high_value)).roi_percentage

        results.append(
            SensitivityResult(
                parameter=path,
                base_value=base_value,
                low_value=low_value,
                high_value=high_value,
                roi_at_low=roi_at_low,
                roi_at_base=roi_at_base,
                roi_at_high=roi_at_high,
                impact_range=abs(roi_at_high - roi_at_low),
            )
        )

    results.sort(key=lambda r: r.impact_range, reverse=True)
    return results
