"""Unit tests for weight unit switching."""

import pytest

from domain.goal_engine.core.value_objects import WeightUnit
from domain.goal_engine.normalization.unit_conversion import (
    convert_weight_unit,
    format_weight,
    split_height_cm,
)


class TestConvertWeightUnit:
    """Test display rewrite and stored kg on unit toggle."""

    def test_kg_to_lb(self):
        result = convert_weight_unit(70.0, "kg", "lb")

        assert result.changed
        assert result.display_text == "154.32"
        assert result.stored_kg == 70.0
        assert result.unit == "lb"

    def test_lb_to_kg(self):
        result = convert_weight_unit(154.32, "lb", "kg")

        assert result.display_text == "70.0"
        assert result.stored_kg == pytest.approx(69.998, abs=0.001)

    def test_same_unit_changes_nothing(self):
        result = convert_weight_unit(70.0, "kg", "kg")

        assert not result.changed
        assert result.display_text is None
        assert result.stored_kg is None
        assert result.unit == "kg"

    def test_unknown_target_keeps_number(self):
        result = convert_weight_unit(70.0, "kg", "stone")

        assert result.unit == "stone"
        assert result.display_text == "70.0"
        assert result.stored_kg == 70.0

    def test_unknown_source_keeps_number(self):
        result = convert_weight_unit(150.0, "stone", "lb")

        assert result.display_text == "150.00"
        assert result.stored_kg == pytest.approx(150.0 * 0.45359237)

    @pytest.mark.parametrize("weight_kg", [20.5, 50.0, 70.0, 72.5, 100.3, 150.0, 659.0])
    def test_round_trip_within_display_precision(self, weight_kg):
        """Test kg -> lb -> kg reproduces the weight within 0.1 kg."""
        to_lb = convert_weight_unit(weight_kg, "kg", "lb")
        back = convert_weight_unit(float(to_lb.display_text), "lb", "kg")

        assert abs(float(back.display_text) - weight_kg) <= 0.1


class TestFormatWeight:
    """Test text rebuilt from stored kg."""

    def test_kg(self):
        assert format_weight(72.5, WeightUnit.KG) == "72.5"

    def test_lb(self):
        assert format_weight(70.0, WeightUnit.LB) == "154.32"


class TestSplitHeight:
    """Test stored cm -> feet + inches."""

    def test_default_height(self):
        assert split_height_cm(170.0) == (5, 7)

    def test_exact_six_feet(self):
        assert split_height_cm(182.88) == (6, 0)

    def test_rounding_up_to_next_foot(self):
        # 71.7 in rounds to 72 in
        assert split_height_cm(182.1) == (6, 0)
