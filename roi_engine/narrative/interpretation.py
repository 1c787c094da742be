"""Rule-based narrative for calculated ROI metrics.

Output is lightweight Markdown (``**bold**`` labels, blank-line paragraphs)
for a downstream renderer. Bands are fixed thresholds:

- ROI: > 100 strong, (0, 100] modest, <= 0 may not recover costs
- Payback: < 2 rapid, [2, 4) reasonable, >= 4 extended, inf indefinite
- NPV: > 0 attractive, <= 0 below the required rate of return
"""

from __future__ import annotations

import math
from typing import Optional

# Ensure all metrics are registered on import
import roi_engine.engine.formulas  # noqa: F401
from roi_engine.engine.registry import STAGES, get_metrics_by_stage
from roi_engine.engine.result import CalculatedMetrics
from roi_engine.models.inputs import FinancialParameters
from roi_engine.narrative.formatting import (
    DEFAULT_FORMATTER,
    CurrencyFormatter,
    format_fixed,
    format_plain_number,
)

INDEFINITE_PAYBACK = "indefinite (negative annual benefit)"

STRONG_ROI_THRESHOLD = 100
RAPID_PAYBACK_YEARS = 2
REASONABLE_PAYBACK_YEARS = 4


def _roi_paragraph(
    metrics: CalculatedMetrics,
    params: FinancialParameters,
    formatter: CurrencyFormatter,
) -> str:
    roi_formatted = format_fixed(metrics.roi_percentage, 1)
    per_dollar = format_fixed(metrics.roi_percentage / 100, 2)
    text = (
        f"**Return on Investment:** {roi_formatted}% over "
        f"{format_plain_number(params.time_horizon_years)} years indicates that "
        f"for every dollar invested, you can expect to receive "
        f"{formatter.symbol}{per_dollar} in return. "
    )

    if metrics.roi_percentage > STRONG_ROI_THRESHOLD:
        text += "This represents a strong financial return."
    elif metrics.roi_percentage > 0:
        text += "This represents a positive but modest return."
    else:
        text += (
            "This indicates the investment may not recover its costs "
            "under current assumptions."
        )
    return text


def _payback_paragraph(metrics: CalculatedMetrics) -> str:
    payback = metrics.payback_period_years
    if not metrics.has_finite_payback:
        # No risk commentary without a finite payback
        return f"**Payback Period:** {INDEFINITE_PAYBACK} years. "

    text = f"**Payback Period:** {format_fixed(payback, 1)} years. "
    if payback < RAPID_PAYBACK_YEARS:
        text += (
            "This rapid payback period suggests quick recovery of "
            "initial investment."
        )
    elif payback < REASONABLE_PAYBACK_YEARS:
        text += "This reasonable payback period indicates moderate risk."
    else:
        text += (
            "This extended payback period suggests higher risk and "
            "requires careful consideration."
        )
    return text


def _npv_paragraph(
    metrics: CalculatedMetrics,
    params: FinancialParameters,
    formatter: CurrencyFormatter,
) -> str:
    rate = format_plain_number(params.discount_rate)
    text = f"**Net Present Value:** {formatter.format(metrics.net_present_value)}. "
    if metrics.net_present_value > 0:
        text += (
            f"A positive NPV indicates the project generates value above the "
            f"required {rate}% rate of return, making it economically attractive."
        )
    else:
        text += (
            f"A negative NPV suggests the project does not meet the required "
            f"{rate}% rate of return under current assumptions."
        )
    return text


def generate_interpretation(
    metrics: CalculatedMetrics,
    params: FinancialParameters,
    formatter: Optional[CurrencyFormatter] = None,
) -> str:
    """Render the ROI, Payback and NPV paragraphs, in that order."""
    formatter = formatter or DEFAULT_FORMATTER
    sections = [
        "**ROI Analysis Summary:**",
        _roi_paragraph(metrics, params, formatter),
        _payback_paragraph(metrics),
        _npv_paragraph(metrics, params, formatter),
    ]
    return "\n\n".join(sections)


def format_metrics_table(
    metrics: CalculatedMetrics,
    formatter: Optional[CurrencyFormatter] = None,
) -> str:
    """Markdown table of every catalogued metric, in dependency order."""
    formatter = formatter or DEFAULT_FORMATTER
    values = metrics.as_dict()

    lines: list[str] = ["| Metric | Abbr. | Value |", "|---|---|---|"]
    definitions = [d for stage in STAGES for d in get_metrics_by_stage(stage)]
    for definition in definitions:
        value = values[definition.id]
        if definition.unit == "percent":
            rendered = f"{format_fixed(value, 1)}%"
        elif definition.unit == "years":
            rendered = (
                "indefinite" if value == math.inf else f"{format_fixed(value, 1)} years"
            )
        else:
            rendered = formatter.format(value)
        lines.append(f"| {definition.label} | {definition.abbreviation} | {rendered} |")

    return "\n".join(lines)
