"""GoalOutputs value object - published daily goals."""

from dataclasses import dataclass

from .bmr import BMR
from .macro_split import MacroSplit


@dataclass(frozen=True)
class GoalOutputs:
    """Result of a successful recompute.

    Attributes:
        bmr: Basal metabolic rate behind the maintenance estimate
        maintenance_calories: Rounded BMR x activity factor
        daily_calorie_delta: Deficit/surplus implied by the weekly rate
        suggested_daily_intake: Calorie goal for the selected mode
        macro_split: Protein/carbs/fat grams for the suggested intake
    """

    bmr: BMR
    maintenance_calories: int
    daily_calorie_delta: int
    suggested_daily_intake: int
    macro_split: MacroSplit

    @property
    def protein_grams(self) -> int:
        return self.macro_split.protein_g

    @property
    def fat_grams(self) -> int:
        return self.macro_split.fat_g

    @property
    def carbs_grams(self) -> int:
        return self.macro_split.carbs_g

    @property
    def exceeds_target(self) -> bool:
        """Protein and fat alone already overshoot the suggested intake."""
        return self.macro_split.exceeds(self.suggested_daily_intake)
