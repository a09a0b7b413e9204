"""Composition root wiring the engine, its store and the debounce scheduler."""

from typing import Optional

import structlog

from domain.goal_engine.core.ports.settings_store import ISettingsStore
from infrastructure.config import GoalEngineSettings
from infrastructure.persistence.settings_store_factory import (
    create_settings_store,
)
from infrastructure.scheduler.debounce_scheduler import (
    DebouncedRecomputeScheduler,
)

from .services.goal_engine_service import GoalEngineService

logger = structlog.get_logger(__name__)


class GoalEngineRuntime:
    """
    Engine plus scheduler, as used by an input layer.

    Typical use from inside a running event loop:

        runtime = GoalEngineRuntime.create()
        runtime.start()
        runtime.service.update(weight_text="72.5")   # debounced
        runtime.service.convert_weight_unit("lb")    # immediate
        ...
        runtime.shutdown()
    """

    def __init__(
        self,
        service: GoalEngineService,
        scheduler: DebouncedRecomputeScheduler,
    ):
        self.service = service
        self.scheduler = scheduler

    @classmethod
    def create(
        cls,
        settings: Optional[GoalEngineSettings] = None,
        store: Optional[ISettingsStore] = None,
    ) -> "GoalEngineRuntime":
        """Load the engine from the store and compute once, non-debounced."""
        settings = settings or GoalEngineSettings.from_env()
        store = store or create_settings_store(settings)
        service = GoalEngineService.load(store)
        scheduler = DebouncedRecomputeScheduler(
            callback=service.compute_and_persist_if_needed,
            debounce_seconds=settings.debounce_seconds,
        )
        return cls(service=service, scheduler=scheduler)

    def start(self) -> None:
        """Start debouncing edits. Must be called with a running event loop."""
        self.scheduler.start()
        self.service.set_on_change(self.scheduler.notify)
        logger.info("Goal engine runtime started")

    def shutdown(self) -> None:
        """Stop listening for edits; a pending recompute is discarded."""
        self.service.set_on_change(None)
        self.scheduler.cancel()
        self.scheduler.shutdown(wait=False)
        logger.info("Goal engine runtime stopped")
