"""Domain models describing a user's physical profile."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class Gender(str, Enum):
    """Biological sex used by the BMR equation and DRI tables."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: object) -> "Gender | None":
        """Return the matching gender, or None when unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class ActivityLevel(str, Enum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> "ActivityLevel":
        """Return the matching level; unrecognised values map to UNKNOWN."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN


class FitnessGoal(str, Enum):
    """Training goal that drives calorie and macro targets."""

    MUSCLE_GAIN = "muscle_gain"
    FAT_LOSS = "fat_loss"
    ENDURANCE = "endurance"
    GENERAL_FITNESS = "general_fitness"
    SPORT_SPECIFIC = "sport_specific"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> "FitnessGoal":
        """Return the matching goal; unrecognised values map to UNKNOWN."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class PhysicalProfile:
    """Validated physical data for one nutrition calculation."""

    age: int
    gender: Gender
    weight: float
    height: float
    activity_level: ActivityLevel
    fitness_goal: FitnessGoal


@dataclass(frozen=True)
class UserProfileRecord:
    """Stored profile row; any field may still be missing."""

    user_id: UUID
    age: int | None = None
    gender: str | None = None
    weight: float | None = None
    height: float | None = None
    activity_level: str | None = None
    fitness_goal: str | None = None
