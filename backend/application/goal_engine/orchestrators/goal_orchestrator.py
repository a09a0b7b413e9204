"""GoalOrchestrator - coordinates normalization and calculation services."""

from dataclasses import dataclass
from typing import Optional

from domain.goal_engine.calculation.bmr_service import BMRService
from domain.goal_engine.calculation.macro_service import MacroService
from domain.goal_engine.calculation.maintenance_service import (
    MaintenanceService,
)
from domain.goal_engine.calculation.target_service import TargetService
from domain.goal_engine.core.value_objects.body_profile import BodyProfile
from domain.goal_engine.core.value_objects.goal_form import GoalForm
from domain.goal_engine.core.value_objects.goal_inputs import GoalInputs
from domain.goal_engine.core.value_objects.goal_outputs import GoalOutputs
from domain.goal_engine.normalization.input_normalizer import (
    NormalizationResult,
    normalize,
)


@dataclass(frozen=True)
class GoalCalculation:
    """Result of a recompute.

    ``outputs`` is None whenever the normalization is incomplete.
    """

    normalization: NormalizationResult
    inputs: GoalInputs
    outputs: Optional[GoalOutputs]


class GoalOrchestrator:
    """
    Orchestrates the goal pipeline. Holds no state between calls.

    Flow:
    1. Normalize raw text into a BodyProfile (or stop: incomplete)
    2. Calculate BMR from the profile
    3. Scale BMR by activity into maintenance calories
    4. Apply mode and weekly rate to get the suggested intake
    5. Split the suggested intake into protein, fat and carbs
    """

    def __init__(
        self,
        bmr_service: BMRService,
        maintenance_service: MaintenanceService,
        target_service: TargetService,
        macro_service: MacroService,
    ):
        self._bmr_service = bmr_service
        self._maintenance_service = maintenance_service
        self._target_service = target_service
        self._macro_service = macro_service

    @classmethod
    def default(cls) -> "GoalOrchestrator":
        """Orchestrator wired with the standard calculation services."""
        return cls(
            bmr_service=BMRService(),
            maintenance_service=MaintenanceService(),
            target_service=TargetService(),
            macro_service=MacroService(),
        )

    @property
    def target_service(self) -> TargetService:
        return self._target_service

    def calculate(self, profile: BodyProfile, inputs: GoalInputs) -> GoalOutputs:
        """
        Calculate goals for a complete profile.

        Args:
            profile: Normalized body metrics
            inputs: Goal tuning (mode, rate, g/kg ratios)

        Returns:
            GoalOutputs with every published value
        """
        # Step 1: BMR
        bmr = self._bmr_service.calculate(profile)

        # Step 2: Maintenance
        maintenance = self._maintenance_service.calculate(
            bmr=bmr,
            activity_level=profile.activity_level,
        )

        # Step 3: Target intake
        delta = self._target_service.daily_delta(inputs.target_rate_kg_per_week)
        suggested = self._target_service.suggested_intake(
            maintenance_calories=maintenance,
            mode=inputs.mode,
            target_rate_kg_per_week=inputs.target_rate_kg_per_week,
        )

        # Step 4: Macros
        macro_split = self._macro_service.calculate(
            calories_target=suggested,
            weight_kg=profile.weight_kg,
            protein_per_kg=inputs.protein_per_kg,
            fat_per_kg=inputs.fat_per_kg,
        )

        return GoalOutputs(
            bmr=bmr,
            maintenance_calories=maintenance,
            daily_calorie_delta=delta,
            suggested_daily_intake=suggested,
            macro_split=macro_split,
        )

    def recompute(self, form: GoalForm) -> GoalCalculation:
        """
        Run the whole pipeline on a raw form.

        Never raises for bad input: an incomplete profile yields
        ``outputs=None``.
        """
        normalization = normalize(form)
        inputs = form.goal_inputs()

        outputs = None
        if normalization.profile is not None:
            outputs = self.calculate(normalization.profile, inputs)

        return GoalCalculation(
            normalization=normalization,
            inputs=inputs,
            outputs=outputs,
        )
