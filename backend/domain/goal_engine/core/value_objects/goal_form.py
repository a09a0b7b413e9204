"""GoalForm value object - raw editable state of the goal screen."""

from dataclasses import dataclass

from .goal_inputs import GoalInputs
from .goal_mode import GoalMode
from .weight_unit import WeightUnit


@dataclass(frozen=True)
class GoalForm:
    """Snapshot of everything the user can edit.

    Text fields keep exactly what was typed; parsing happens in the
    normalizer. Selections are kept as their storage tokens so that an
    unrecognized persisted value survives a save/load cycle.

    Attributes:
        weight_text: Weight as typed, in ``weight_unit``
        feet_text: Height feet as typed
        inches_text: Height inches as typed (empty means 0)
        age_text: Age as typed
        weight_unit: Display unit token ("kg" or "lb")
        sex: Sex token ("male" / "female")
        activity_level: Activity storage key
        protein_per_kg: Protein g/kg slider value
        fat_per_kg: Fat g/kg slider value
        target_rate_kg_per_week: Weekly rate stepper value (kg)
        mode: Lose / maintain / gain
    """

    weight_text: str = ""
    feet_text: str = ""
    inches_text: str = ""
    age_text: str = ""
    weight_unit: str = WeightUnit.KG.value
    sex: str = "male"
    activity_level: str = "moderate"
    protein_per_kg: float = 1.8
    fat_per_kg: float = 0.9
    target_rate_kg_per_week: float = 0.5
    mode: GoalMode = GoalMode.MAINTAIN

    def goal_inputs(self) -> GoalInputs:
        """Build the clamped goal tuning for this form."""
        return GoalInputs(
            mode=self.mode,
            target_rate_kg_per_week=self.target_rate_kg_per_week,
            protein_per_kg=self.protein_per_kg,
            fat_per_kg=self.fat_per_kg,
            display_weight_unit=WeightUnit.from_token(self.weight_unit),
        )
