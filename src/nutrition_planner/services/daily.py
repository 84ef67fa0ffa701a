"""Daily aggregation of food logs against nutrition targets."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from uuid import UUID
from zoneinfo import ZoneInfo

from nutrition_planner.domain.foods import NutrientTotals
from nutrition_planner.domain.meals import (
    DailySummary,
    FoodLogEntry,
    MacroBudget,
    MealType,
)
from nutrition_planner.domain.nutrition import NutritionTargets
from nutrition_planner.services.calculator import calculate_nutrient_percentages
from nutrition_planner.services.meals import FoodLogRepository
from nutrition_planner.services.profiles import ProfileService


@dataclass
class DailySummaryService:
    """Loads a day's logs and targets and summarises them."""

    repository: FoodLogRepository
    profile_service: ProfileService

    def get_day(self, user_id: UUID, day: date, timezone_name: str) -> DailySummary:
        """Return the summary for a calendar day in the user's timezone."""
        start, end = day_bounds(day, timezone_name)
        entries = self.repository.list_logs(user_id, start, end)
        targets = self.profile_service.get_targets(user_id)
        return summarize_day(day, entries, targets)


def day_bounds(day: date, timezone_name: str) -> tuple[datetime, datetime]:
    """Return the UTC half-open range [start, end) covering a local day."""
    tz = ZoneInfo(timezone_name)
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = start + timedelta(days=1)
    return start.astimezone(UTC), end.astimezone(UTC)


def summarize_day(
    day: date, entries: list[FoodLogEntry], targets: NutritionTargets | None
) -> DailySummary:
    """Group a day's entries by meal and compare totals with targets."""
    meals = group_by_meal(entries)
    totals = sum_totals(entries)
    if targets is None:
        remaining = None
        progress = None
    else:
        remaining = compute_remaining(targets, totals)
        progress = calculate_nutrient_percentages(
            totals.as_dict(), targets.as_nutrient_map()
        )
    return DailySummary(
        day=day,
        meals=meals,
        totals=totals,
        remaining=remaining,
        progress=progress,
        log_count=len(entries),
    )


def group_by_meal(entries: list[FoodLogEntry]) -> dict[str, list[FoodLogEntry]]:
    """Bucket entries by meal slot; unrecognised slots go to snack."""
    meals: dict[str, list[FoodLogEntry]] = {meal.value: [] for meal in MealType}
    for entry in entries:
        meals[MealType.parse(entry.meal_type).value].append(entry)
    return meals


def sum_totals(entries: list[FoodLogEntry]) -> NutrientTotals:
    """Sum the snapshotted totals of every entry."""
    total = NutrientTotals()
    for entry in entries:
        total = total + entry.totals
    return total


def compute_remaining(
    targets: NutritionTargets, totals: NutrientTotals
) -> MacroBudget:
    """Return targets minus consumed; values go negative when over."""
    return MacroBudget(
        calories=targets.target_calories - totals.calories,
        protein=targets.macros.protein - totals.protein,
        carbs=targets.macros.carbs - totals.carbs,
        fat=targets.macros.fat - totals.fat,
    )
