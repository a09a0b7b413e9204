"""MaintenanceService - maintenance calories (TDEE) calculation."""

from ..core.ports.calculators import IMaintenanceCalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from .rounding import round_half_away


class MaintenanceService(IMaintenanceCalculator):
    """Calculate maintenance calories.

    Formula:
        maintenance = round(BMR × PAL)

    PAL Multipliers:
        - Sedentary: 1.2
        - Light: 1.375
        - Moderate: 1.55
        - Active: 1.725
        - Very Active: 1.9
    """

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> int:
        """Calculate maintenance calories from BMR and activity level.

        Negative products (only possible at the extreme corners of the
        accepted ranges) are floored at zero.

        Example:
            >>> MaintenanceService().calculate(BMR(value=1617.5), ActivityLevel.MODERATE)
            2507
        """
        return max(0, round_half_away(bmr.value * activity_level.pal_multiplier()))
