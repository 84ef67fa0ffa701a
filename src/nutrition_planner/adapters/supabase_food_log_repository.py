"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrition_planner.adapters.supabase_food_repository import (
    FOOD_COLUMNS,
    parse_food_row,
)
from nutrition_planner.domain.foods import FoodItem, NutrientTotals
from nutrition_planner.domain.meals import FoodLogEntry, MealType
from nutrition_planner.services.meals import FoodLogRepository

_TOTAL_FIELDS = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "fiber",
    "sugar",
    "sodium",
    "potassium",
    "calcium",
    "magnesium",
    "phosphorus",
    "iron",
)
_LOG_COLUMNS = (
    "id, user_id, servings, meal_type, logged_at, "
    + ", ".join(f"total_{name}" for name in _TOTAL_FIELDS)
    + f", food:foods({FOOD_COLUMNS})"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food logs."""

    client: Client

    def create_log(  # noqa: PLR0913
        self,
        user_id: UUID,
        food: FoodItem,
        servings: float,
        meal_type: MealType,
        logged_at: datetime,
        totals: NutrientTotals,
    ) -> FoodLogEntry:
        """Insert a food log row and return it."""
        response = (
            self.client.table("nutrition_logs")
            .insert(
                {
                    "user_id": str(user_id),
                    "food_id": str(food.id),
                    "servings": servings,
                    "meal_type": meal_type.value,
                    "logged_at": logged_at.isoformat(),
                    **_totals_payload(totals),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log")
        return _parse_log(response.data[0], food)

    def get_log(self, log_id: UUID) -> FoodLogEntry | None:
        """Return a food log by id."""
        response = (
            self.client.table("nutrition_logs")
            .select(_LOG_COLUMNS)
            .eq("id", str(log_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def update_log(  # noqa: PLR0913
        self,
        log_id: UUID,
        servings: float,
        meal_type: MealType,
        logged_at: datetime,
        totals: NutrientTotals,
    ) -> FoodLogEntry:
        """Update a food log row and return it."""
        self.client.table("nutrition_logs").update(
            {
                "servings": servings,
                "meal_type": meal_type.value,
                "logged_at": logged_at.isoformat(),
                **_totals_payload(totals),
            }
        ).eq("id", str(log_id)).execute()
        updated = self.get_log(log_id)
        if updated is None:
            raise RuntimeError("Failed to update food log")
        return updated

    def delete_log(self, log_id: UUID) -> None:
        """Delete a food log row."""
        self.client.table("nutrition_logs").delete().eq("id", str(log_id)).execute()

    def list_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food logs in the half-open time range."""
        response = (
            self.client.table("nutrition_logs")
            .select(_LOG_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def list_logged_food_ids(self, user_id: UUID) -> list[UUID]:
        """Return the food id of every log for the user."""
        response = (
            self.client.table("nutrition_logs")
            .select("food_id")
            .eq("user_id", str(user_id))
            .execute()
        )
        return [UUID(str(row["food_id"])) for row in response.data or []]


def _totals_payload(totals: NutrientTotals) -> dict[str, float]:
    return {f"total_{name}": value for name, value in totals.as_dict().items()}


def _parse_log(row: dict[str, object], food: FoodItem | None = None) -> FoodLogEntry:
    resolved_food = food or parse_food_row(row["food"])
    return FoodLogEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food=resolved_food,
        servings=float(row.get("servings") or 0.0),
        meal_type=str(row.get("meal_type") or MealType.SNACK.value),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        totals=NutrientTotals(
            **{name: float(row.get(f"total_{name}") or 0.0) for name in _TOTAL_FIELDS}
        ),
    )
