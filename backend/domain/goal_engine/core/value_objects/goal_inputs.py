"""GoalInputs value object - user-tunable goal parameters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .goal_mode import GoalMode
from .weight_unit import WeightUnit

TARGET_RATE_MIN = 0.0
TARGET_RATE_MAX = 1.5
PROTEIN_PER_KG_MIN = 1.2
PROTEIN_PER_KG_MAX = 2.4
FAT_PER_KG_MIN = 0.6
FAT_PER_KG_MAX = 1.2


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class GoalInputs(BaseModel):
    """Goal tuning persisted alongside the body metrics.

    Numeric fields are clamped into the ranges the UI controls allow
    instead of being rejected, so an odd stored value never blocks a
    recompute.

    Example:
        >>> inputs = GoalInputs(mode=GoalMode.LOSE, target_rate_kg_per_week=3.0)
        >>> inputs.target_rate_kg_per_week
        1.5
    """

    model_config = ConfigDict(frozen=True)

    mode: GoalMode = GoalMode.MAINTAIN
    target_rate_kg_per_week: float = Field(default=0.5, description="Always kg/week")
    protein_per_kg: float = Field(default=1.8, description="Protein g per kg body weight")
    fat_per_kg: float = Field(default=0.9, description="Fat g per kg body weight")
    display_weight_unit: WeightUnit = WeightUnit.KG

    @field_validator("target_rate_kg_per_week")
    @classmethod
    def clamp_rate(cls, v: float) -> float:
        """Keep the weekly rate within [0.0, 1.5] kg."""
        return _clamp(v, TARGET_RATE_MIN, TARGET_RATE_MAX)

    @field_validator("protein_per_kg")
    @classmethod
    def clamp_protein(cls, v: float) -> float:
        """Keep protein per kg within [1.2, 2.4] g."""
        return _clamp(v, PROTEIN_PER_KG_MIN, PROTEIN_PER_KG_MAX)

    @field_validator("fat_per_kg")
    @classmethod
    def clamp_fat(cls, v: float) -> float:
        """Keep fat per kg within [0.6, 1.2] g."""
        return _clamp(v, FAT_PER_KG_MIN, FAT_PER_KG_MAX)
