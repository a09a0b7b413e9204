"""Nutrition goal engine: maintenance calories, targets and macros."""
