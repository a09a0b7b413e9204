"""BodyProfile value object - normalized body metrics."""

from dataclasses import dataclass

from .activity_level import ActivityLevel
from .sex import Sex

WEIGHT_KG_MIN = 20.0
WEIGHT_KG_MAX = 660.0
HEIGHT_CM_MIN = 50.0
HEIGHT_CM_MAX = 272.0
AGE_MIN = 10
AGE_MAX = 120


@dataclass(frozen=True)
class BodyProfile:
    """Complete set of body metrics needed for BMR and macros.

    A BodyProfile only exists when weight, height and age were all
    parsed and found in range; the normalizer never builds a partial
    one.

    Attributes:
        sex: Biological sex (selects BMR offset)
        weight_kg: Body weight in kilograms, (20, 660)
        height_cm: Height in centimeters, [50, 272]
        age: Age in years, [10, 120]
        activity_level: Physical activity level
    """

    sex: Sex
    weight_kg: float
    height_cm: float
    age: int
    activity_level: ActivityLevel

    def __post_init__(self) -> None:
        """Validate ranges.

        Raises:
            ValueError: If any metric is outside its range
        """
        if not (WEIGHT_KG_MIN < self.weight_kg < WEIGHT_KG_MAX):
            raise ValueError(
                f"Weight must be {WEIGHT_KG_MIN:.0f}-{WEIGHT_KG_MAX:.0f} kg, "
                f"got {self.weight_kg}"
            )
        if not (HEIGHT_CM_MIN <= self.height_cm <= HEIGHT_CM_MAX):
            raise ValueError(
                f"Height must be {HEIGHT_CM_MIN:.0f}-{HEIGHT_CM_MAX:.0f} cm, "
                f"got {self.height_cm}"
            )
        if not (AGE_MIN <= self.age <= AGE_MAX):
            raise ValueError(f"Age must be {AGE_MIN}-{AGE_MAX} years, got {self.age}")
