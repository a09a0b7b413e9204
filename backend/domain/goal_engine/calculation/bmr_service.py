"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.body_profile import BodyProfile
from ..core.value_objects.sex import Sex


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, profile: BodyProfile) -> BMR:
        """Calculate BMR from a body profile.

        Args:
            profile: Complete body metrics

        Returns:
            BMR: Basal metabolic rate in kcal/day

        Example:
            >>> service = BMRService()
            >>> profile = BodyProfile(
            ...     sex=Sex.MALE,
            ...     weight_kg=70.0,
            ...     height_cm=170.0,
            ...     age=30,
            ...     activity_level=ActivityLevel.MODERATE,
            ... )
            >>> service.calculate(profile).value
            1617.5
        """
        return BMR(
            value=bmr(
                sex=profile.sex.value,
                weight_kg=profile.weight_kg,
                height_cm=profile.height_cm,
                age=profile.age,
            )
        )


def bmr(sex: str, weight_kg: float, height_cm: float, age: int) -> float:
    """Mifflin-St Jeor on plain values.

    ``sex`` follows the "starts with m" rule of ``Sex.from_token``.
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + Sex.from_token(sex).bmr_offset()
