"""Nutrition target domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroDistribution:
    """Daily macronutrient targets in grams and share of calories."""

    protein: int
    carbs: int
    fat: int
    protein_percentage: int
    carbs_percentage: int
    fat_percentage: int


@dataclass(frozen=True)
class MicronutrientTargets:
    """Daily micronutrient reference intakes."""

    vitamin_a: int  # mcg RAE
    vitamin_c: int  # mg
    vitamin_d: int  # mcg
    calcium: int  # mg
    iron: int  # mg
    potassium: int  # mg
    sodium: int  # mg, upper limit


@dataclass(frozen=True)
class PlanExplanation:
    """Human-readable account of how targets were derived."""

    bmr_formula: str
    tdee_calculation: str
    calorie_adjustment: str
    macro_rationale: str


@dataclass(frozen=True)
class NutritionTargets:
    """Result of one nutrition plan calculation."""

    bmr: int
    tdee: int
    target_calories: int
    macros: MacroDistribution
    micronutrients: MicronutrientTargets
    explanation: PlanExplanation

    def as_nutrient_map(self) -> dict[str, float]:
        """Return targets keyed like NutrientTotals fields."""
        return {
            "calories": self.target_calories,
            "protein": self.macros.protein,
            "carbs": self.macros.carbs,
            "fat": self.macros.fat,
            "calcium": self.micronutrients.calcium,
            "iron": self.micronutrients.iron,
            "potassium": self.micronutrients.potassium,
            "sodium": self.micronutrients.sodium,
        }
