"""Food logging service.

Creating a log snapshots the food's per-serving values times servings.
Editing servings re-snapshots from the catalog food as it is at edit time,
so an edit can pick up catalog corrections that creation never sees.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol
from uuid import UUID

from nutrition_planner.domain.foods import FoodItem, MealPreset, NutrientTotals
from nutrition_planner.domain.meals import (
    FoodLogEntry,
    FrequentFood,
    MealType,
    RecentFood,
    RecentFoods,
)
from nutrition_planner.domain.streaks import StreakUpdate
from nutrition_planner.errors import (
    FoodNotFoundError,
    LogNotFoundError,
    PresetNotFoundError,
)
from nutrition_planner.services.streaks import StreakService

RECENT_DAYS = 7

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Read-only access to the food catalog."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return the foods that exist among the given ids."""

    def list_foods(self) -> list[FoodItem]:
        """Return the whole catalog ordered by name."""


class FoodLogRepository(Protocol):
    """Persistence interface for food logs."""

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        food: FoodItem,
        servings: float,
        meal_type: MealType,
        logged_at: datetime,
        totals: NutrientTotals,
    ) -> FoodLogEntry:
        """Insert a food log and return it."""

    def get_log(self, log_id: UUID) -> FoodLogEntry | None:
        """Return a food log by id, if present."""

    def update_log(  # noqa: PLR0913
        self,
        log_id: UUID,
        servings: float,
        meal_type: MealType,
        logged_at: datetime,
        totals: NutrientTotals,
    ) -> FoodLogEntry:
        """Update a food log and return it."""

    def delete_log(self, log_id: UUID) -> None:
        """Delete a food log."""

    def list_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return logs with start <= logged_at < end, oldest first."""

    def list_logged_food_ids(self, user_id: UUID) -> list[UUID]:
        """Return the food id of every log the user has made."""


class MealPresetRepository(Protocol):
    """Persistence interface for meal presets."""

    def get_preset(self, preset_id: UUID) -> MealPreset | None:
        """Return a preset with its items, if present."""


@dataclass
class LogResult:
    """Entries written by one logging action and the streak outcome."""

    entries: list[FoodLogEntry]
    streak: StreakUpdate


@dataclass
class FoodLogService:
    """Writes food logs and keeps the streak in step."""

    repository: FoodLogRepository
    food_repository: FoodRepository
    preset_repository: MealPresetRepository
    streak_service: StreakService

    def log_food(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        servings: float,
        meal_type: str,
        logged_at: datetime,
        today: date,
    ) -> LogResult:
        """Log servings of a catalog food and record the day for the streak."""
        food = self._require_food(food_id)
        entry = self.repository.create_log(
            user_id=user_id,
            food=food,
            servings=servings,
            meal_type=MealType.parse(meal_type),
            logged_at=logged_at,
            totals=snapshot_totals(food, servings),
        )
        _logger.info(
            "Food logged: user=%s food=%s servings=%s", user_id, food_id, servings
        )
        streak = self.streak_service.record_log_for_today(user_id, today)
        return LogResult(entries=[entry], streak=streak)

    def log_preset(  # noqa: PLR0913
        self,
        user_id: UUID,
        preset_id: UUID,
        meal_type: str,
        logged_at: datetime,
        today: date,
    ) -> LogResult:
        """Log every item of a preset as one logging action."""
        preset = self.preset_repository.get_preset(preset_id)
        if preset is None or preset.user_id != user_id:
            raise PresetNotFoundError(preset_id)
        meal = MealType.parse(meal_type)
        entries = []
        for item in preset.items:
            food = self._require_food(item.food_id)
            entries.append(
                self.repository.create_log(
                    user_id=user_id,
                    food=food,
                    servings=item.servings,
                    meal_type=meal,
                    logged_at=logged_at,
                    totals=snapshot_totals(food, item.servings),
                )
            )
        _logger.info(
            "Preset logged: user=%s preset=%s items=%s",
            user_id,
            preset_id,
            len(entries),
        )
        streak = self.streak_service.record_log_for_today(user_id, today)
        return LogResult(entries=entries, streak=streak)

    def update_log(
        self,
        user_id: UUID,
        log_id: UUID,
        *,
        servings: float | None = None,
        meal_type: str | None = None,
        logged_at: datetime | None = None,
    ) -> FoodLogEntry:
        """Edit a log; a servings change re-snapshots from the current food.

        A food no longer in the catalog falls back to the logged snapshot.
        """
        entry = self._require_log(user_id, log_id)
        totals = entry.totals
        new_servings = entry.servings
        if servings is not None and servings != entry.servings:
            food = self.food_repository.get_food(entry.food.id) or entry.food
            new_servings = servings
            totals = snapshot_totals(food, servings)
        updated = self.repository.update_log(
            log_id,
            servings=new_servings,
            meal_type=MealType.parse(
                meal_type if meal_type is not None else entry.meal_type
            ),
            logged_at=logged_at or entry.logged_at,
            totals=totals,
        )
        _logger.info("Food log updated: user=%s log=%s", user_id, log_id)
        return updated

    def delete_log(self, user_id: UUID, log_id: UUID) -> None:
        """Delete a log owned by the user."""
        self._require_log(user_id, log_id)
        self.repository.delete_log(log_id)
        _logger.info("Food log deleted: user=%s log=%s", user_id, log_id)

    def get_recent_foods(
        self, user_id: UUID, now: datetime, limit: int = 10
    ) -> RecentFoods:
        """Return recently and frequently logged foods."""
        recent_logs = self.repository.list_logs(
            user_id, now - timedelta(days=RECENT_DAYS), now
        )
        food_ids = self.repository.list_logged_food_ids(user_id)
        return build_recent_foods(
            recent_logs,
            food_ids,
            self.food_repository.get_foods(list(dict.fromkeys(food_ids))),
            limit,
        )

    def _require_food(self, food_id: UUID) -> FoodItem:
        food = self.food_repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food

    def _require_log(self, user_id: UUID, log_id: UUID) -> FoodLogEntry:
        entry = self.repository.get_log(log_id)
        if entry is None or entry.user_id != user_id:
            raise LogNotFoundError(log_id)
        return entry


def snapshot_totals(food: FoodItem, servings: float) -> NutrientTotals:
    """Return the food's per-serving nutrients multiplied by servings."""
    return food.per_serving().scaled(servings)


def build_recent_foods(
    recent_logs: list[FoodLogEntry],
    logged_food_ids: list[UUID],
    foods: list[FoodItem],
    limit: int,
) -> RecentFoods:
    """Build quick-add lists from recent logs and all-time log counts."""
    recent: dict[UUID, RecentFood] = {}
    for entry in sorted(recent_logs, key=lambda log: log.logged_at, reverse=True):
        if entry.food.id in recent:
            continue
        recent[entry.food.id] = RecentFood(
            food=entry.food,
            last_logged=entry.logged_at,
            default_servings=entry.servings,
        )

    by_id = {food.id: food for food in foods}
    frequent = [
        FrequentFood(food=by_id[food_id], log_count=count)
        for food_id, count in Counter(logged_food_ids).most_common()
        if food_id in by_id
    ]
    return RecentFoods(recent=list(recent.values())[:limit], frequent=frequent[:limit])
