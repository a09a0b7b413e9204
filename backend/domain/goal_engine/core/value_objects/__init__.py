"""Value objects for the goal engine domain."""

from .activity_level import ActivityLevel
from .bmr import BMR
from .body_profile import BodyProfile
from .goal_form import GoalForm
from .goal_inputs import GoalInputs
from .goal_mode import GoalMode
from .goal_outputs import GoalOutputs
from .macro_split import MacroSplit
from .sex import Sex
from .weight_unit import WeightUnit

__all__ = [
    "ActivityLevel",
    "BMR",
    "BodyProfile",
    "GoalForm",
    "GoalInputs",
    "GoalMode",
    "GoalOutputs",
    "MacroSplit",
    "Sex",
    "WeightUnit",
]
