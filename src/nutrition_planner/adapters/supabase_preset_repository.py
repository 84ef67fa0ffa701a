"""Supabase repository for meal presets."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrition_planner.domain.foods import MealPreset, MealPresetItem
from nutrition_planner.services.meals import MealPresetRepository


@dataclass
class SupabaseMealPresetRepository(MealPresetRepository):
    """Supabase implementation for meal presets."""

    client: Client

    def get_preset(self, preset_id: UUID) -> MealPreset | None:
        """Return a preset with its items."""
        response = (
            self.client.table("meal_presets")
            .select("id, user_id, name, items:meal_preset_items(food_id, servings)")
            .eq("id", str(preset_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return MealPreset(
            id=UUID(str(row["id"])),
            user_id=UUID(str(row["user_id"])),
            name=str(row.get("name", "")),
            items=[
                MealPresetItem(
                    food_id=UUID(str(item["food_id"])),
                    servings=float(item.get("servings") or 1.0),
                )
                for item in row.get("items") or []
            ],
        )
