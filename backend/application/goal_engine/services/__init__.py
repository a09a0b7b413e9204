"""Goal engine application services."""

from .goal_engine_service import GoalEngineService, load_form

__all__ = [
    "GoalEngineService",
    "load_form",
]
