"""Application errors raised by services and mapped by the HTTP layer."""

from uuid import UUID

PROFILE_FIELD_LABELS = {
    "age": "age",
    "gender": "gender",
    "weight": "weight",
    "height": "height",
    "activity_level": "activity level",
    "fitness_goal": "fitness goal",
}


class NutritionPlannerError(Exception):
    """Base class for application errors."""


class IncompleteProfileError(NutritionPlannerError):
    """Raised when a profile lacks the data needed for a nutrition plan."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        labels = ", ".join(PROFILE_FIELD_LABELS.values())
        super().__init__(
            f"Please complete your profile ({labels}) "
            "to calculate nutrition targets"
        )


class NotFoundError(NutritionPlannerError):
    """Raised when a referenced record does not exist."""

    resource = "Record"

    def __init__(self, identifier: UUID) -> None:
        self.identifier = identifier
        super().__init__(f"{self.resource} {identifier} not found")


class FoodNotFoundError(NotFoundError):
    resource = "Food"


class LogNotFoundError(NotFoundError):
    resource = "Food log"


class PresetNotFoundError(NotFoundError):
    resource = "Meal preset"
