"""ISettingsStore port - key-value persistence for goal settings."""

from abc import ABC, abstractmethod
from typing import Any, Mapping


class SettingsKeys:
    """Keys shared with the food-diary screens that read the goals."""

    USER_WEIGHT = "userWeight"
    WEIGHT_UNIT = "weightUnit"
    USER_HEIGHT_CM = "userHeightCm"
    USER_AGE = "userAge"
    USER_SEX = "userSex"
    USER_ACTIVITY_LEVEL = "userActivityLevel"

    PROTEIN_PER_KG = "proteinPerKg"
    FAT_PER_KG = "fatPerKg"
    WEEKLY_TARGET_KG_PER_WEEK = "weeklyTargetKgPerWeek"
    WEIGHT_GOAL_MODE = "weightGoalMode"

    DAILY_CALORIE_GOAL = "dailyCalorieGoal"
    DAILY_PROTEIN_GOAL = "dailyProteinGoal"
    DAILY_CARB_GOAL = "dailyCarbGoal"
    DAILY_FAT_GOAL = "dailyFatGoal"


class ISettingsStore(ABC):
    """Port for the persistent key-value store.

    Values are JSON-compatible scalars (str, int, float, bool).
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Read a value.

        Args:
            key: Setting key
            default: Returned when the key is missing

        Returns:
            Any: Stored value or default
        """
        pass

    @abstractmethod
    def set_many(self, values: Mapping[str, Any]) -> None:
        """Write several values as one batch.

        Either every value is written or none is.

        Args:
            values: Key/value pairs to store

        Raises:
            SettingsStoreError: If the write fails
        """
        pass

    def set(self, key: str, value: Any) -> None:
        """Write a single value."""
        self.set_many({key: value})
