"""Calculator ports - interfaces for BMR/maintenance/target/macro steps."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.body_profile import BodyProfile
from ..value_objects.goal_mode import GoalMode
from ..value_objects.macro_split import MacroSplit


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, profile: BodyProfile) -> BMR:
        """Calculate BMR from a complete body profile.

        Args:
            profile: Normalized body metrics

        Returns:
            BMR: Basal metabolic rate
        """
        pass


class IMaintenanceCalculator(ABC):
    """Port for maintenance calories (BMR scaled by activity)."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> int:
        """Calculate rounded maintenance calories.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            int: Maintenance calories in kcal/day
        """
        pass


class ITargetCalculator(ABC):
    """Port for the mode-driven calorie target."""

    @abstractmethod
    def daily_delta(self, target_rate_kg_per_week: float) -> int:
        """Daily kcal change implied by a weekly rate."""
        pass

    @abstractmethod
    def suggested_intake(
        self,
        maintenance_calories: int,
        mode: GoalMode,
        target_rate_kg_per_week: float,
    ) -> int:
        """Suggested daily intake for the mode and rate."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution."""

    @abstractmethod
    def calculate(
        self,
        calories_target: int,
        weight_kg: float,
        protein_per_kg: float,
        fat_per_kg: float,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            calories_target: Suggested daily intake
            weight_kg: Body weight in kg
            protein_per_kg: Protein grams per kg
            fat_per_kg: Fat grams per kg

        Returns:
            MacroSplit: Protein/carbs/fat in grams
        """
        pass
