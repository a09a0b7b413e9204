"""Unit tests for the input signature cache."""

from domain.goal_engine.core.value_objects import GoalForm, GoalMode
from domain.goal_engine.normalization.signature import (
    InputSignature,
    build_signature,
)


class TestBuildSignature:
    """Test signature composition."""

    def test_field_order_and_trimming(self):
        form = GoalForm(weight_text=" 70 ", feet_text="5", age_text="30")

        assert build_signature(form) == "70|5||30|kg|male|moderate|1.8|0.9|0.5|maintain"

    def test_whitespace_only_edits_do_not_change_signature(self):
        assert build_signature(GoalForm(weight_text="70")) == build_signature(
            GoalForm(weight_text="70  ")
        )

    def test_every_tracked_field_changes_signature(self):
        base = GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30")
        variants = [
            GoalForm(weight_text="71", feet_text="5", inches_text="7", age_text="30"),
            GoalForm(weight_text="70", feet_text="6", inches_text="7", age_text="30"),
            GoalForm(weight_text="70", feet_text="5", inches_text="8", age_text="30"),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="31"),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30", weight_unit="lb"),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30", sex="female"),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30", activity_level="light"),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30", protein_per_kg=2.0),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30", fat_per_kg=1.0),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30", target_rate_kg_per_week=0.0),
            GoalForm(weight_text="70", feet_text="5", inches_text="7", age_text="30", mode=GoalMode.LOSE),
        ]

        signatures = {build_signature(v) for v in variants}

        assert build_signature(base) not in signatures
        assert len(signatures) == len(variants)


class TestInputSignature:
    """Test change detection."""

    def test_first_check_is_a_change(self):
        assert InputSignature().changed(GoalForm())

    def test_repeat_is_not_a_change(self):
        cache = InputSignature()
        cache.changed(GoalForm())

        assert not cache.changed(GoalForm())

    def test_reset_forces_change(self):
        cache = InputSignature()
        cache.changed(GoalForm())
        cache.reset()

        assert cache.last is None
        assert cache.changed(GoalForm())
