"""Load calculator inputs from JSON files or plain dicts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from roi_engine.models.inputs import CalculatorInputs


def inputs_from_dict(data: dict[str, Any]) -> CalculatorInputs:
    """Build inputs from a dict with camelCase or snake_case keys."""
    return CalculatorInputs.model_validate(data)


def load_inputs(file_path: Path | str) -> CalculatorInputs:
    """Load and type-check calculator inputs from a JSON file."""
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Calculator inputs not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    return inputs_from_dict(raw)
