"""ActivityLevel value object - physical activity level for maintenance."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) used to scale BMR.

    Values are the storage keys persisted in the settings store:
    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Very hard exercise + physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "veryActive"

    @classmethod
    def from_storage_key(cls, key: str) -> "ActivityLevel":
        """Map a persisted key to an activity level.

        Unknown keys resolve to MODERATE.

        Example:
            >>> ActivityLevel.from_storage_key("veryActive")
            <ActivityLevel.VERY_ACTIVE: 'veryActive'>
            >>> ActivityLevel.from_storage_key("couch")
            <ActivityLevel.MODERATE: 'moderate'>
        """
        for level in cls:
            if level.value == key:
                return level
        return cls.MODERATE

    def pal_multiplier(self) -> float:
        """Get PAL multiplier applied to BMR.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        multipliers = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.ACTIVE: 1.725,
            ActivityLevel.VERY_ACTIVE: 1.9,
        }
        return multipliers[self]

    def label(self) -> str:
        """Human-readable label shown in pickers."""
        labels = {
            ActivityLevel.SEDENTARY: "Sedentary",
            ActivityLevel.LIGHT: "Light",
            ActivityLevel.MODERATE: "Moderate",
            ActivityLevel.ACTIVE: "Active",
            ActivityLevel.VERY_ACTIVE: "Very Active",
        }
        return labels[self]
