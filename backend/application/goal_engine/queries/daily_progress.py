"""Daily progress query - how far today's intake is towards the goals."""

from dataclasses import dataclass

from domain.goal_engine.calculation.rounding import round_half_away
from domain.goal_engine.core.ports.settings_store import (
    ISettingsStore,
    SettingsKeys,
)

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_PROTEIN_GOAL = 100
DEFAULT_CARB_GOAL = 250
DEFAULT_FAT_GOAL = 70

MIN_CALORIE_GOAL = 800
MAX_CALORIE_GOAL = 6000
CALORIE_GOAL_STEP = 50


def _read_goal(store: ISettingsStore, key: str, default: int) -> int:
    value = store.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return int(value)


@dataclass(frozen=True)
class DailyGoals:
    """Daily goals as persisted by the goal engine (or set manually)."""

    calories: int = DEFAULT_CALORIE_GOAL
    protein_g: int = DEFAULT_PROTEIN_GOAL
    carbs_g: int = DEFAULT_CARB_GOAL
    fat_g: int = DEFAULT_FAT_GOAL

    @classmethod
    def from_store(cls, store: ISettingsStore) -> "DailyGoals":
        """Read goals, using the app defaults for missing or zero values."""
        return cls(
            calories=_read_goal(store, SettingsKeys.DAILY_CALORIE_GOAL, DEFAULT_CALORIE_GOAL),
            protein_g=_read_goal(store, SettingsKeys.DAILY_PROTEIN_GOAL, DEFAULT_PROTEIN_GOAL),
            carbs_g=_read_goal(store, SettingsKeys.DAILY_CARB_GOAL, DEFAULT_CARB_GOAL),
            fat_g=_read_goal(store, SettingsKeys.DAILY_FAT_GOAL, DEFAULT_FAT_GOAL),
        )


@dataclass(frozen=True)
class NutrientTotals:
    """Sum of today's diary entries."""

    calories: int = 0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0


@dataclass(frozen=True)
class DailyProgress:
    """Progress fractions in [0, 1] for each tracked goal."""

    calories: float
    protein: float
    carbs: float
    fat: float


def progress_fraction(total: float, goal: int) -> float:
    """Fraction of the goal reached, capped at 1.0.

    A zero goal is treated as 1 so the bar never divides by zero.

    Example:
        >>> progress_fraction(1500, 2000)
        0.75
        >>> progress_fraction(2500, 2000)
        1.0
    """
    return min(total / max(1, goal), 1.0)


def calculate_progress(totals: NutrientTotals, goals: DailyGoals) -> DailyProgress:
    """Progress of today's totals towards the daily goals."""
    return DailyProgress(
        calories=progress_fraction(totals.calories, goals.calories),
        protein=progress_fraction(totals.protein_g, goals.protein_g),
        carbs=progress_fraction(totals.carbs_g, goals.carbs_g),
        fat=progress_fraction(totals.fat_g, goals.fat_g),
    )


def clamp_calorie_goal(value: int) -> int:
    """Snap a manually entered calorie goal to the 50 kcal grid within [800, 6000].

    Example:
        >>> clamp_calorie_goal(2024)
        2000
        >>> clamp_calorie_goal(100)
        800
    """
    snapped = round_half_away(value / CALORIE_GOAL_STEP) * CALORIE_GOAL_STEP
    return max(MIN_CALORIE_GOAL, min(MAX_CALORIE_GOAL, snapped))
