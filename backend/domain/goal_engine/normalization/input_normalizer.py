"""Parsing of free-text body metrics into a BodyProfile."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.body_profile import (
    AGE_MAX,
    AGE_MIN,
    HEIGHT_CM_MAX,
    HEIGHT_CM_MIN,
    WEIGHT_KG_MAX,
    WEIGHT_KG_MIN,
    BodyProfile,
)
from ..core.value_objects.goal_form import GoalForm
from ..core.value_objects.sex import Sex
from ..core.value_objects.weight_unit import WeightUnit

CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

WEIGHT_MESSAGE = "Enter a valid weight (20–660)."
HEIGHT_MESSAGE = "Enter a valid height (50–272 cm)."
AGE_MESSAGE = "Enter a valid age (10–120)."

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)$")
_COUNT_RE = re.compile(r"^\d+$")


def parse_decimal(text: str) -> Optional[float]:
    """Parse a decimal typed with either "." or "," as separator.

    Only plain digits are accepted: exponents, underscores, "inf" and
    "nan" are rejected even though ``float()`` would take them.

    Example:
        >>> parse_decimal(" 72,5 ")
        72.5
        >>> parse_decimal("abc") is None
        True
    """
    candidate = text.strip().replace(",", ".")
    if not _DECIMAL_RE.match(candidate):
        return None
    return float(candidate)


def _parse_count(text: str) -> Optional[int]:
    candidate = text.strip()
    if not _COUNT_RE.match(candidate):
        return None
    return int(candidate)


def parse_weight(text: str, unit: Union[WeightUnit, str]) -> Optional[float]:
    """Parse a weight and normalize it to kilograms.

    The (20, 660) range applies to the kilogram value, so "45" lb
    (20.4 kg) is valid while "44" lb (19.96 kg) is not.

    Args:
        text: Weight as typed
        unit: Unit the text is expressed in

    Returns:
        Optional[float]: Weight in kg, or None if unparseable/out of range
    """
    value = parse_decimal(text)
    if value is None:
        return None
    if isinstance(unit, str):
        unit = WeightUnit.from_token(unit)
    kg = unit.to_kg(value)
    if not (WEIGHT_KG_MIN < kg < WEIGHT_KG_MAX):
        return None
    return kg


def parse_height(feet_text: str, inches_text: str) -> Optional[float]:
    """Parse feet + inches into centimeters.

    Both parts must be non-negative integers; empty inches count as 0.

    Example:
        >>> round(parse_height("5", "7"), 2)
        170.18
        >>> parse_height("", "7") is None
        True
    """
    feet = _parse_count(feet_text)
    inches = 0 if not inches_text.strip() else _parse_count(inches_text)
    if feet is None or inches is None:
        return None
    total_inches = feet * INCHES_PER_FOOT + inches
    cm = total_inches * CM_PER_INCH
    if not (HEIGHT_CM_MIN <= cm <= HEIGHT_CM_MAX):
        return None
    return cm


def parse_age(text: str) -> Optional[int]:
    """Parse an age in whole years within [10, 120]."""
    age = _parse_count(text)
    if age is None or not (AGE_MIN <= age <= AGE_MAX):
        return None
    return age


@dataclass(frozen=True)
class NormalizationResult:
    """Outcome of normalizing a form.

    Individual values are kept even when the profile is incomplete so
    that valid fields can still be saved. ``profile`` is set only when
    all three are valid.
    """

    weight_kg: Optional[float]
    height_cm: Optional[float]
    age: Optional[int]
    profile: Optional[BodyProfile]

    @property
    def is_complete(self) -> bool:
        return self.profile is not None

    @property
    def weight_valid(self) -> bool:
        return self.weight_kg is not None

    @property
    def height_valid(self) -> bool:
        return self.height_cm is not None

    @property
    def age_valid(self) -> bool:
        return self.age is not None

    def messages(self) -> list[str]:
        """Validation hints for the invalid fields, in screen order."""
        hints = []
        if not self.weight_valid:
            hints.append(WEIGHT_MESSAGE)
        if not self.height_valid:
            hints.append(HEIGHT_MESSAGE)
        if not self.age_valid:
            hints.append(AGE_MESSAGE)
        return hints


def normalize(form: GoalForm) -> NormalizationResult:
    """Turn the raw form into a complete BodyProfile, or report why not."""
    weight_kg = parse_weight(form.weight_text, form.weight_unit)
    height_cm = parse_height(form.feet_text, form.inches_text)
    age = parse_age(form.age_text)

    profile = None
    if weight_kg is not None and height_cm is not None and age is not None:
        profile = BodyProfile(
            sex=Sex.from_token(form.sex),
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=age,
            activity_level=ActivityLevel.from_storage_key(form.activity_level),
        )

    return NormalizationResult(
        weight_kg=weight_kg,
        height_cm=height_cm,
        age=age,
        profile=profile,
    )
