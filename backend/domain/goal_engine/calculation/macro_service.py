"""MacroService - macronutrient distribution calculation."""

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroSplit,
)
from .rounding import round_half_away


class MacroService(IMacroCalculator):
    """Distribute the daily calorie goal into protein, fat and carbs.

    Protein and fat are set from body weight (g/kg), carbohydrates fill
    whatever calories remain. When protein and fat alone exceed the
    target, carbs are zero and the split overshoots the target; this is
    reported through ``MacroSplit.exceeds`` rather than raised.

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def calculate(
        self,
        calories_target: int,
        weight_kg: float,
        protein_per_kg: float,
        fat_per_kg: float,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Example:
            >>> split = MacroService().calculate(2507, 70.0, 1.8, 0.9)
            >>> (split.protein_g, split.fat_g, split.carbs_g)
            (126, 63, 359)
        """
        # 1. Protein from body weight
        protein_g = max(0, round_half_away(weight_kg * protein_per_kg))
        protein_cal = protein_g * PROTEIN_KCAL_PER_G

        # 2. Fat from body weight
        fat_g = max(0, round_half_away(weight_kg * fat_per_kg))
        fat_cal = fat_g * FAT_KCAL_PER_G

        # 3. Carbs fill the remainder
        remaining_cal = max(0, calories_target - protein_cal - fat_cal)
        carbs_g = max(0, round_half_away(remaining_cal / CARBS_KCAL_PER_G))

        return MacroSplit(protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g)
