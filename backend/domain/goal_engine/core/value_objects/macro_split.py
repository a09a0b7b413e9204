"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        protein_g: Protein in grams (non-negative)
        carbs_g: Carbohydrates in grams (non-negative)
        fat_g: Fat in grams (non-negative)
    """

    protein_g: int
    carbs_g: int
    fat_g: int

    def __post_init__(self) -> None:
        """Validate macronutrients are non-negative.

        Raises:
            ValueError: If any macronutrient is negative
        """
        if self.protein_g < 0:
            raise ValueError(f"Protein must be non-negative, got {self.protein_g}")
        if self.carbs_g < 0:
            raise ValueError(f"Carbs must be non-negative, got {self.carbs_g}")
        if self.fat_g < 0:
            raise ValueError(f"Fat must be non-negative, got {self.fat_g}")

    def total_calories(self) -> int:
        """Calories accounted for by the split.

        Example:
            >>> MacroSplit(protein_g=126, carbs_g=313, fat_g=63).total_calories()
            2323
        """
        return (
            self.protein_g * PROTEIN_KCAL_PER_G
            + self.carbs_g * CARBS_KCAL_PER_G
            + self.fat_g * FAT_KCAL_PER_G
        )

    def exceeds(self, calories_target: int) -> bool:
        """True when protein and fat alone overshoot the calorie target."""
        fixed = self.protein_g * PROTEIN_KCAL_PER_G + self.fat_g * FAT_KCAL_PER_G
        return fixed > calories_target

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
