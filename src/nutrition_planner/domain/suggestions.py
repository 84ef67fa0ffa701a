"""Domain models for food suggestions."""

from dataclasses import dataclass

from nutrition_planner.domain.foods import FoodItem


@dataclass(frozen=True)
class Suggestion:
    """A catalog food ranked against the remaining budget."""

    food: FoodItem
    score: int
    reason: str
