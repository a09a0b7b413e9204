"""Input signature used to skip redundant recomputes."""

from typing import Optional

from ..core.value_objects.goal_form import GoalForm

SIGNATURE_DELIMITER = "|"


def _canonical_float(value: float) -> str:
    return repr(float(value))


def build_signature(form: GoalForm) -> str:
    """Join every tracked input into one comparable string.

    Order: weight, feet, inches, age (trimmed text), display unit, sex,
    activity level, protein/kg, fat/kg, weekly rate, mode.

    Example:
        >>> build_signature(GoalForm(weight_text=" 70 ", feet_text="5", age_text="30"))
        '70|5||30|kg|male|moderate|1.8|0.9|0.5|maintain'
    """
    parts = [
        form.weight_text.strip(),
        form.feet_text.strip(),
        form.inches_text.strip(),
        form.age_text.strip(),
        form.weight_unit,
        form.sex,
        form.activity_level,
        _canonical_float(form.protein_per_kg),
        _canonical_float(form.fat_per_kg),
        _canonical_float(form.target_rate_kg_per_week),
        form.mode.value,
    ]
    return SIGNATURE_DELIMITER.join(parts)


class InputSignature:
    """Remembers the last signature seen by the engine."""

    def __init__(self) -> None:
        self._last: Optional[str] = None

    @property
    def last(self) -> Optional[str]:
        return self._last

    def changed(self, form: GoalForm) -> bool:
        """Record the form's signature, returning False if it was already current."""
        signature = build_signature(form)
        if signature == self._last:
            return False
        self._last = signature
        return True

    def reset(self) -> None:
        """Forget the last signature so the next check always recomputes."""
        self._last = None
