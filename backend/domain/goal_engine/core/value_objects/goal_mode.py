"""GoalMode value object - direction of the weekly weight change."""

from enum import Enum


class GoalMode(str, Enum):
    """Whether the user wants to lose, keep or gain weight.

    The weekly rate is always non-negative; the mode alone carries the
    sign of the calorie adjustment.
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    @classmethod
    def from_storage_key(cls, key: str) -> "GoalMode":
        """Map a persisted key (any case) to a mode, defaulting to MAINTAIN."""
        normalized = key.strip().lower()
        for mode in cls:
            if mode.value == normalized:
                return mode
        return cls.MAINTAIN

    def label(self) -> str:
        """Capitalized label, as shown in the segmented picker."""
        return self.value.capitalize()
