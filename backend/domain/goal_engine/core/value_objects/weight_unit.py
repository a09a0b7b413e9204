"""WeightUnit value object - display unit for body weight."""

from enum import Enum
from typing import Optional

KG_PER_LB = 0.45359237
LB_PER_KG = 2.2046226218


class WeightUnit(str, Enum):
    """Presentation unit for weight.

    Stored weights and rates are always kilograms; the unit only changes
    how numbers are typed and displayed.
    """

    KG = "kg"
    LB = "lb"

    @classmethod
    def parse(cls, token: str) -> Optional["WeightUnit"]:
        """Parse a unit token, returning None when it is not recognized."""
        normalized = token.strip().lower()
        if normalized in ("kg", "kgs"):
            return cls.KG
        if normalized in ("lb", "lbs"):
            return cls.LB
        return None

    @classmethod
    def from_token(cls, token: str) -> "WeightUnit":
        """Total variant of parse: unknown tokens are treated as kilograms."""
        return cls.parse(token) or cls.KG

    def display_decimals(self) -> int:
        """Decimal places used when rewriting the weight text field."""
        return 1 if self is WeightUnit.KG else 2

    def to_kg(self, value: float) -> float:
        """Convert a value expressed in this unit to kilograms."""
        if self is WeightUnit.LB:
            return value * KG_PER_LB
        return value

    def from_kg(self, kg: float) -> float:
        """Express a kilogram value in this unit."""
        if self is WeightUnit.LB:
            return kg * LB_PER_KG
        return kg
