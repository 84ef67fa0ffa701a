"""Profile lookups that gate the metabolic calculator."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.nutrition import NutritionTargets
from nutrition_planner.domain.profile import (
    ActivityLevel,
    FitnessGoal,
    Gender,
    PhysicalProfile,
    UserProfileRecord,
)
from nutrition_planner.errors import IncompleteProfileError
from nutrition_planner.services.calculator import calculate_nutrition_plan

_REQUIRED_FIELDS = (
    "age",
    "gender",
    "weight",
    "height",
    "activity_level",
    "fitness_goal",
)

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfileRecord | None:
        """Return the stored profile, if any."""

    def update_current_weight(self, user_id: UUID, weight: float) -> None:
        """Set the profile's current weight."""


@dataclass
class ProfileService:
    """Builds physical profiles and nutrition targets from stored data."""

    repository: ProfileRepository

    def get_physical_profile(self, user_id: UUID) -> PhysicalProfile:
        """Return a complete profile or raise IncompleteProfileError."""
        record = self.repository.get_profile(user_id)
        if record is None:
            raise IncompleteProfileError(list(_REQUIRED_FIELDS))
        return build_physical_profile(record)

    def calculate_plan(self, user_id: UUID) -> NutritionTargets:
        """Calculate targets for a user with a complete profile."""
        return calculate_nutrition_plan(self.get_physical_profile(user_id))

    def get_targets(self, user_id: UUID) -> NutritionTargets | None:
        """Return targets, or None when the profile is incomplete."""
        try:
            return self.calculate_plan(user_id)
        except IncompleteProfileError as exc:
            _logger.info(
                "No targets for user %s, missing %s", user_id, exc.missing_fields
            )
            return None


def build_physical_profile(record: UserProfileRecord) -> PhysicalProfile:
    """Convert a stored profile, raising when required fields are absent."""
    missing = [name for name in _REQUIRED_FIELDS if getattr(record, name) in (None, "")]
    gender = Gender.parse(record.gender) if record.gender else None
    if record.gender and gender is None:
        missing.append("gender")
    if missing:
        raise IncompleteProfileError(missing)
    return PhysicalProfile(
        age=int(record.age),
        gender=gender,
        weight=float(record.weight),
        height=float(record.height),
        activity_level=ActivityLevel.parse(record.activity_level),
        fitness_goal=FitnessGoal.parse(record.fitness_goal),
    )
