"""Goal engine orchestrators."""

from .goal_orchestrator import GoalCalculation, GoalOrchestrator

__all__ = [
    "GoalCalculation",
    "GoalOrchestrator",
]
