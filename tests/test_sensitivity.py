"""Tests for one-at-a-time sensitivity analysis."""

import pytest

from roi_engine.engine.calculator import calculate_metrics
from roi_engine.engine.sensitivity import numeric_parameters, run_sensitivity, with_value


class TestNumericParameters:
    def test_scalar_fields_only(self, default_inputs):
        paths = numeric_parameters(default_inputs)
        assert "benefits.attribution_factor" in paths
        assert "initial_costs.software_license_annual_fee" in paths
        assert "financial_params.discount_rate" in paths
        assert "benefits.current_tool_costs" not in paths

    def test_covers_every_scalar_input(self, default_inputs):
        # 8 initial + 6 ongoing + 5 benefit scalars + 2 financial
        assert len(numeric_parameters(default_inputs)) == 21


class TestWithValue:
    def test_replaces_single_field(self, default_inputs):
        updated = with_value(default_inputs, "benefits.attribution_factor", 50)
        assert updated.benefits.attribution_factor == 50
        assert updated.benefits.client_current_revenue == 10_000_000
        assert default_inputs.benefits.attribution_factor == 35

    def test_unknown_group_raises(self, default_inputs):
        with pytest.raises(KeyError):
            with_value(default_inputs, "taxes.rate", 1)

    def test_unknown_field_raises(self, default_inputs):
        with pytest.raises(KeyError):
            with_value(default_inputs, "benefits.churn", 1)

    def test_non_scalar_raises(self, default_inputs):
        with pytest.raises(KeyError, match="not a scalar"):
            with_value(default_inputs, "benefits.current_tool_costs", 1)


class TestRunSensitivity:
    def test_swing_bounds(self, default_inputs):
        [result] = run_sensitivity(default_inputs, ["benefits.attribution_factor"])
        assert result.base_value == 35
        assert result.low_value == pytest.approx(28)
        assert result.high_value == pytest.approx(42)

    def test_roi_moves_with_benefit(self, default_inputs):
        [result] = run_sensitivity(default_inputs, ["benefits.attribution_factor"])
        assert result.roi_at_low < result.roi_at_base < result.roi_at_high
        assert result.roi_at_base == calculate_metrics(default_inputs).roi_percentage
        assert result.impact_range == pytest.approx(result.roi_at_high - result.roi_at_low)

    def test_roi_falls_with_cost(self, default_inputs):
        [result] = run_sensitivity(default_inputs, ["ongoing_costs.annual_maintenance_support"])
        assert result.roi_at_high < result.roi_at_base < result.roi_at_low

    def test_zero_valued_input_has_no_impact(self, default_inputs):
        [result] = run_sensitivity(default_inputs, ["initial_costs.hardware_costs"])
        assert result.impact_range == 0

    def test_sorted_by_impact(self, default_inputs):
        results = run_sensitivity(default_inputs)
        ranges = [r.impact_range for r in results]
        assert ranges == sorted(ranges, reverse=True)
        assert len(results) == 21

    def test_custom_swing(self, default_inputs):
        [result] = run_sensitivity(default_inputs, ["benefits.blended_hourly_rate"], swing=0.5)
        assert result.low_value == pytest.approx(22.5)
        assert result.high_value == pytest.approx(67.5)

    def test_inputs_untouched(self, default_inputs):
        before = default_inputs.model_dump()
        run_sensitivity(default_inputs)
        assert default_inputs.model_dump() == before

    def test_unknown_parameter_raises(self, default_inputs):
        with pytest.raises(KeyError):
            run_sensitivity(default_inputs, ["benefits.nope"])
