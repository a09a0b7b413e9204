"""Weight unit switching and text formatting helpers."""

from dataclasses import dataclass
from typing import Optional

from ..calculation.rounding import round_half_away
from ..core.value_objects.weight_unit import WeightUnit
from .input_normalizer import CM_PER_INCH, INCHES_PER_FOOT


@dataclass(frozen=True)
class UnitConversion:
    """Result of switching the weight display unit.

    Attributes:
        unit: Unit token to persist (always the requested one)
        display_text: New text for the weight field, None when unchanged
        stored_kg: Kilogram value to persist, None when unchanged
    """

    unit: str
    display_text: Optional[str] = None
    stored_kg: Optional[float] = None

    @property
    def changed(self) -> bool:
        return self.display_text is not None


def format_decimal(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def format_weight(weight_kg: float, unit: WeightUnit) -> str:
    """Render a stored kilogram value in the display unit.

    Example:
        >>> format_weight(70.0, WeightUnit.LB)
        '154.32'
    """
    return format_decimal(unit.from_kg(weight_kg), unit.display_decimals())


def convert_weight_unit(current_value: float, from_unit: str, to_unit: str) -> UnitConversion:
    """Reinterpret the displayed weight after a unit toggle.

    ``current_value`` is the number currently shown, expressed in
    ``from_unit``. kg→lb shows 2 decimals, lb→kg shows 1. When the units
    match nothing numeric changes. When either token is unrecognized the
    number is kept as-is and only reformatted for the requested unit.

    Example:
        >>> convert_weight_unit(70.0, "kg", "lb").display_text
        '154.32'
        >>> convert_weight_unit(154.32, "lb", "kg").display_text
        '70.0'
    """
    if from_unit == to_unit:
        return UnitConversion(unit=to_unit)

    source = WeightUnit.parse(from_unit)
    target = WeightUnit.parse(to_unit)

    if source is not None and target is not None:
        stored_kg = source.to_kg(current_value)
        return UnitConversion(
            unit=to_unit,
            display_text=format_weight(stored_kg, target),
            stored_kg=stored_kg,
        )

    fallback = WeightUnit.from_token(to_unit)
    return UnitConversion(
        unit=to_unit,
        display_text=format_decimal(current_value, fallback.display_decimals()),
        stored_kg=fallback.to_kg(current_value),
    )


def split_height_cm(height_cm: float) -> tuple[int, int]:
    """Split a stored height into whole feet and rounded inches.

    Example:
        >>> split_height_cm(170.0)
        (5, 7)
    """
    total_inches = height_cm / CM_PER_INCH
    feet = int(total_inches // INCHES_PER_FOOT)
    inches = round_half_away(total_inches - feet * INCHES_PER_FOOT)
    if inches == INCHES_PER_FOOT:
        feet, inches = feet + 1, 0
    return feet, inches
