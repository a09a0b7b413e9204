"""
Scheduler infrastructure for debounced recomputation.
"""

from .debounce_scheduler import DebouncedRecomputeScheduler

__all__ = ["DebouncedRecomputeScheduler"]
