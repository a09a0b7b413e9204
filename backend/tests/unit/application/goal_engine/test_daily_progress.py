"""Unit tests for the daily progress query."""

import pytest

from application.goal_engine.queries.daily_progress import (
    DailyGoals,
    NutrientTotals,
    calculate_progress,
    clamp_calorie_goal,
    progress_fraction,
)
from application.goal_engine.services.goal_engine_service import GoalEngineService
from domain.goal_engine.core.ports.settings_store import SettingsKeys
from infrastructure.persistence.in_memory.settings_store import (
    InMemorySettingsStore,
)


class TestDailyGoals:
    """Test reading goals from the store."""

    def test_defaults_when_empty(self):
        goals = DailyGoals.from_store(InMemorySettingsStore())

        assert goals == DailyGoals(calories=2000, protein_g=100, carbs_g=250, fat_g=70)

    def test_zero_and_garbage_fall_back(self):
        store = InMemorySettingsStore(
            {
                SettingsKeys.DAILY_CALORIE_GOAL: 0,
                SettingsKeys.DAILY_PROTEIN_GOAL: "lots",
                SettingsKeys.DAILY_CARB_GOAL: True,
                SettingsKeys.DAILY_FAT_GOAL: 55,
            }
        )

        goals = DailyGoals.from_store(store)

        assert goals.calories == 2000
        assert goals.protein_g == 100
        assert goals.carbs_g == 250
        assert goals.fat_g == 55

    def test_reads_goals_written_by_engine(self):
        store = InMemorySettingsStore()
        GoalEngineService.load(store)

        goals = DailyGoals.from_store(store)

        assert goals == DailyGoals(calories=2509, protein_g=126, carbs_g=360, fat_g=63)


class TestProgress:
    """Test progress fractions."""

    @pytest.mark.parametrize(
        "total,goal,expected",
        [
            (0, 2000, 0.0),
            (1500, 2000, 0.75),
            (2000, 2000, 1.0),
            (2500, 2000, 1.0),
            (5, 0, 1.0),
            (0.5, 0, 0.5),
        ],
    )
    def test_progress_fraction(self, total, goal, expected):
        assert progress_fraction(total, goal) == pytest.approx(expected)

    def test_calculate_progress(self):
        totals = NutrientTotals(calories=1000, protein_g=50.0, carbs_g=300.0, fat_g=35.0)
        goals = DailyGoals()

        progress = calculate_progress(totals, goals)

        assert progress.calories == pytest.approx(0.5)
        assert progress.protein == pytest.approx(0.5)
        assert progress.carbs == 1.0
        assert progress.fat == pytest.approx(0.5)


class TestClampCalorieGoal:
    """Test manual calorie goal entry."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (2024, 2000),
            (2025, 2050),
            (2509, 2500),
            (100, 800),
            (9000, 6000),
            (800, 800),
        ],
    )
    def test_snaps_and_clamps(self, value, expected):
        assert clamp_calorie_goal(value) == expected
