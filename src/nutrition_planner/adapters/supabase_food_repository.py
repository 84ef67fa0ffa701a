"""Supabase repository for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.foods import FoodItem
from nutrition_planner.services.meals import FoodRepository

FOOD_COLUMNS = (
    "id, name, brand, category, serving_size, serving_unit, calories, protein, "
    "carbs, fat, fiber, sugar, sodium, potassium, calcium, magnesium, phosphorus, "
    "iron"
)
_OPTIONAL_NUTRIENTS = (
    "fiber",
    "sugar",
    "sodium",
    "potassium",
    "calcium",
    "magnesium",
    "phosphorus",
    "iron",
)


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for catalog reads."""

    client: Client

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id."""
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_row(response.data[0])

    def get_foods(self, food_ids: list[UUID]) -> list[FoodItem]:
        """Return foods for the given ids."""
        if not food_ids:
            return []
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .in_("id", [str(food_id) for food_id in food_ids])
            .execute()
        )
        return [parse_food_row(row) for row in response.data or []]

    def list_foods(self) -> list[FoodItem]:
        """Return every catalog food ordered by name."""
        response = (
            self.client.table("foods")
            .select(FOOD_COLUMNS)
            .order("name", desc=False)
            .execute()
        )
        return [parse_food_row(row) for row in response.data or []]


def parse_food_row(row: dict[str, object]) -> FoodItem:
    """Build a FoodItem from a foods row."""
    optional = {
        name: float(row[name]) if row.get(name) is not None else None
        for name in _OPTIONAL_NUTRIENTS
    }
    return FoodItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        brand=row.get("brand"),
        category=row.get("category"),
        serving_size=float(row.get("serving_size") or 0.0),
        serving_unit=str(row.get("serving_unit") or "g"),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        **optional,
    )
