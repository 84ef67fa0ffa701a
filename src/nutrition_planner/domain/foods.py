"""Domain models for the food catalog."""

from dataclasses import dataclass, fields
from uuid import UUID


@dataclass(frozen=True)
class NutrientTotals:
    """Macro and micronutrient amounts for a portion or a whole day."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    potassium: float = 0.0
    calcium: float = 0.0
    magnesium: float = 0.0
    phosphorus: float = 0.0
    iron: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            **{
                field.name: getattr(self, field.name) + getattr(other, field.name)
                for field in fields(self)
            }
        )

    def scaled(self, factor: float) -> "NutrientTotals":
        """Return every amount multiplied by factor."""
        return NutrientTotals(
            **{field.name: getattr(self, field.name) * factor for field in fields(self)}
        )

    def as_dict(self) -> dict[str, float]:
        """Return amounts keyed by field name."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


@dataclass(frozen=True)
class FoodItem:
    """Catalog food with per-serving nutrition."""

    id: UUID
    name: str
    category: str | None
    serving_size: float
    serving_unit: str
    calories: float
    protein: float
    carbs: float
    fat: float
    brand: str | None = None
    fiber: float | None = None
    sugar: float | None = None
    sodium: float | None = None
    potassium: float | None = None
    calcium: float | None = None
    magnesium: float | None = None
    phosphorus: float | None = None
    iron: float | None = None

    def per_serving(self) -> NutrientTotals:
        """Return one serving's nutrients with missing values as zero."""
        return NutrientTotals(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            fiber=self.fiber or 0.0,
            sugar=self.sugar or 0.0,
            sodium=self.sodium or 0.0,
            potassium=self.potassium or 0.0,
            calcium=self.calcium or 0.0,
            magnesium=self.magnesium or 0.0,
            phosphorus=self.phosphorus or 0.0,
            iron=self.iron or 0.0,
        )


@dataclass(frozen=True)
class MealPresetItem:
    """One food inside a saved meal preset."""

    food_id: UUID
    servings: float


@dataclass(frozen=True)
class MealPreset:
    """Named group of foods logged together."""

    id: UUID
    user_id: UUID
    name: str
    items: list[MealPresetItem]
