"""Sex value object - selects the Mifflin-St Jeor offset."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_token(cls, token: str) -> "Sex":
        """Resolve a free-form token.

        Anything whose lowercase form starts with "m" is MALE; every
        other value, empty included, is FEMALE.

        Example:
            >>> Sex.from_token("Male")
            <Sex.MALE: 'male'>
            >>> Sex.from_token("x")
            <Sex.FEMALE: 'female'>
        """
        if token.lower().startswith("m"):
            return cls.MALE
        return cls.FEMALE

    def bmr_offset(self) -> float:
        """Constant added to the shared BMR base."""
        return 5.0 if self is Sex.MALE else -161.0
