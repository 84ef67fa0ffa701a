"""Domain models for food logging and daily summaries."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from uuid import UUID

from nutrition_planner.domain.foods import FoodItem, NutrientTotals


class MealType(str, Enum):
    """Meal slot a food log belongs to."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @classmethod
    def parse(cls, value: object) -> "MealType":
        """Return the matching meal slot; anything else is a snack."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.SNACK


@dataclass(frozen=True)
class FoodLogEntry:
    """A logged portion with totals snapshotted at write time."""

    id: UUID
    user_id: UUID
    food: FoodItem
    servings: float
    meal_type: str
    logged_at: datetime
    totals: NutrientTotals

    @property
    def total_calories(self) -> float:
        return self.totals.calories


@dataclass(frozen=True)
class MacroBudget:
    """Calories and macros, signed (negative when over target)."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class DailySummary:
    """Aggregated food logs for one calendar day."""

    day: date
    meals: dict[str, list[FoodLogEntry]]
    totals: NutrientTotals
    remaining: MacroBudget | None
    progress: dict[str, int] | None
    log_count: int


@dataclass(frozen=True)
class RecentFood:
    """A food logged recently, with the last servings used."""

    food: FoodItem
    last_logged: datetime
    default_servings: float


@dataclass(frozen=True)
class FrequentFood:
    """A food with how often it was logged."""

    food: FoodItem
    log_count: int


@dataclass(frozen=True)
class RecentFoods:
    """Quick-add lists built from a user's log history."""

    recent: list[RecentFood]
    frequent: list[FrequentFood]
