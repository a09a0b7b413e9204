"""TargetService - calorie target from mode and weekly rate."""

from ..core.ports.calculators import ITargetCalculator
from ..core.value_objects.goal_mode import GoalMode
from ..core.value_objects.weight_unit import WeightUnit
from .rounding import round_half_away

KCAL_PER_KG = 7700.0
DAYS_PER_WEEK = 7.0


class TargetService(ITargetCalculator):
    """Turn a weekly weight-change rate into a daily calorie goal.

    One kilogram of body mass is taken as 7700 kcal, so the daily
    adjustment is ``rate × 7700 / 7``. The rate is never negative: the
    mode decides whether the adjustment is a deficit or a surplus.

    | mode     | suggested intake                |
    |----------|---------------------------------|
    | maintain | maintenance                     |
    | lose     | max(0, maintenance - delta)     |
    | gain     | maintenance + delta             |
    """

    def daily_delta(self, target_rate_kg_per_week: float) -> int:
        """Daily kcal adjustment for a weekly rate.

        Example:
            >>> TargetService().daily_delta(0.5)
            550
        """
        return round_half_away((target_rate_kg_per_week * KCAL_PER_KG) / DAYS_PER_WEEK)

    def suggested_intake(
        self,
        maintenance_calories: int,
        mode: GoalMode,
        target_rate_kg_per_week: float,
    ) -> int:
        """Suggested daily intake for the selected mode.

        Example:
            >>> TargetService().suggested_intake(2507, GoalMode.LOSE, 0.5)
            1957
        """
        delta = self.daily_delta(target_rate_kg_per_week)
        if mode is GoalMode.LOSE:
            return max(0, maintenance_calories - delta)
        if mode is GoalMode.GAIN:
            return maintenance_calories + delta
        return maintenance_calories

    def describe(self, mode: GoalMode, target_rate_kg_per_week: float) -> str:
        """Explanation line shown under the maintenance estimate."""
        if mode is GoalMode.MAINTAIN:
            return "Maintain current weight, no calorie change."
        delta = self.daily_delta(target_rate_kg_per_week)
        verb, kind = ("lose", "deficit") if mode is GoalMode.LOSE else ("gain", "surplus")
        return (
            f"To {verb} {target_rate_kg_per_week:.1f} kg/week you need an average "
            f"daily {kind} of about {delta} kcal."
        )


def format_rate(target_rate_kg_per_week: float, unit: WeightUnit) -> str:
    """Weekly rate in the display unit.

    Example:
        >>> format_rate(0.5, WeightUnit.LB)
        '1.10 lb/week'
    """
    if unit is WeightUnit.LB:
        return f"{unit.from_kg(target_rate_kg_per_week):.2f} lb/week"
    return f"{target_rate_kg_per_week:.1f} kg/week"
