"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Not validated for sign: at the low end of the accepted ranges
    (e.g. 21 kg, 120 years, female) Mifflin-St Jeor goes negative and
    the downstream rounding/flooring rules handle it.

    Attributes:
        value: BMR in kcal/day
    """

    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
