"""Unit tests for GoalEngineRuntime wiring."""

import asyncio

import pytest

from application.goal_engine.runtime import GoalEngineRuntime
from domain.goal_engine.core.ports.settings_store import SettingsKeys
from infrastructure.config import GoalEngineSettings
from infrastructure.persistence.in_memory.settings_store import (
    InMemorySettingsStore,
)

WINDOW_MS = 100


class TestGoalEngineRuntime:
    """Test debounced recompute through the composed runtime."""

    def setup_method(self):
        """Set up test fixtures."""
        self.store = InMemorySettingsStore()
        self.runtime = GoalEngineRuntime.create(
            settings=GoalEngineSettings(debounce_ms=WINDOW_MS),
            store=self.store,
        )

    def test_create_computes_immediately(self):
        assert self.runtime.service.maintenance_calories == 2509
        assert self.store.write_count == 1

    @pytest.mark.asyncio
    async def test_edits_are_debounced(self):
        self.runtime.start()
        try:
            for age in ("3", "31", "32"):
                self.runtime.service.update(age_text=age)

            assert self.store.write_count == 1
            await asyncio.sleep(WINDOW_MS / 1000 * 4)

            assert self.runtime.scheduler.fired == 1
            assert self.store.write_count == 2
            assert self.store.get(SettingsKeys.USER_AGE) == 32
            # (700 + 1063.625 - 160 + 5) x 1.55 = 2493.37
            assert self.runtime.service.maintenance_calories == 2493
        finally:
            self.runtime.shutdown()

    @pytest.mark.asyncio
    async def test_unit_toggle_is_immediate(self):
        self.runtime.start()
        try:
            self.runtime.service.convert_weight_unit("lb")

            assert self.store.get(SettingsKeys.WEIGHT_UNIT) == "lb"
            assert self.runtime.scheduler.pending is False
        finally:
            self.runtime.shutdown()

    @pytest.mark.asyncio
    async def test_shutdown_discards_pending_edit(self):
        self.runtime.start()
        self.runtime.service.update(age_text="45")
        self.runtime.shutdown()
        await asyncio.sleep(WINDOW_MS / 1000 * 4)

        assert self.store.get(SettingsKeys.USER_AGE) == 30
        assert self.runtime.scheduler.fired == 0

    @pytest.mark.asyncio
    async def test_no_op_edit_does_not_schedule(self):
        self.runtime.start()
        try:
            self.runtime.service.update(age_text="30")

            assert self.runtime.scheduler.pending is False
        finally:
            self.runtime.shutdown()
