from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

# Dependency order: each stage only consumes metrics from earlier stages
STAGES = ("costs", "benefits", "net", "performance")

# Global registry -- maps metric_id -> MetricDefinition, in registration order
_REGISTRY: dict[str, MetricDefinition] = {}


@dataclass(frozen=True)
class MetricDefinition:
    """One derived metric of the IMPACT model, keyed by its CalculatedMetrics field."""

    id: str
    label: str
    abbreviation: str
    description: str
    formula_fn: Callable[..., float]
    unit: str = "currency"
    stage: str = "costs"


def register_metric(
    metric_id: str,
    label: str,
    abbreviation: str,
    description: str,
    unit: str = "currency",
    stage: str = "costs",
) -> Callable:
    """Decorator adding a formula function to the metric catalogue."""
    if stage not in STAGES:
        raise ValueError(f"Unknown stage '{stage}' for metric '{metric_id}'")

    def decorator(fn: Callable[..., float]) -> Callable[..., float]:
        _REGISTRY[metric_id] = MetricDefinition(
            id=metric_id,
            label=label,
            abbreviation=abbreviation,
            description=description,
            formula_fn=fn,
            unit=unit,
            stage=stage,
        )
        return fn

    return decorator


def get_metric(metric_id: str) -> Optional[MetricDefinition]:
    return _REGISTRY.get(metric_id)


def get_all_metrics() -> dict[str, MetricDefinition]:
    """Return the full catalogue (copy), in registration order."""
    return dict(_REGISTRY)


def get_metrics_by_stage(stage: str) -> list[MetricDefinition]:
    return [m for m in _REGISTRY.values() if m.stage == stage]
