"""Metabolic calculator: BMR, TDEE, calorie and macro targets.

BMR uses the Mifflin-St Jeor equation, TDEE applies a standard activity
multiplier, and the goal adjusts calories before macros are allocated.
Micronutrient targets follow the Dietary Reference Intakes.
"""

import logging
import math
from collections.abc import Mapping

from nutrition_planner.domain.nutrition import (
    MacroDistribution,
    MicronutrientTargets,
    NutritionTargets,
    PlanExplanation,
)
from nutrition_planner.domain.profile import (
    ActivityLevel,
    FitnessGoal,
    Gender,
    PhysicalProfile,
)

_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
_DEFAULT_ACTIVITY_MULTIPLIER = 1.2

_CALORIE_FACTORS = {
    FitnessGoal.MUSCLE_GAIN: 1.15,
    FitnessGoal.FAT_LOSS: 0.80,
    FitnessGoal.ENDURANCE: 1.05,
    FitnessGoal.SPORT_SPECIFIC: 1.10,
}

# goal -> (protein g/kg, fat % of calories)
_MACRO_RULES = {
    FitnessGoal.MUSCLE_GAIN: (2.0, 25),
    FitnessGoal.FAT_LOSS: (2.3, 25),
    FitnessGoal.ENDURANCE: (1.6, 20),
    FitnessGoal.SPORT_SPECIFIC: (1.8, 25),
}
_DEFAULT_MACRO_RULE = (1.6, 25)

_CALORIE_ADJUSTMENTS = {
    FitnessGoal.MUSCLE_GAIN: (
        "+15% calorie surplus to support muscle protein synthesis and recovery"
    ),
    FitnessGoal.FAT_LOSS: (
        "-20% calorie deficit to create energy deficit while preserving muscle mass"
    ),
    FitnessGoal.ENDURANCE: "+5% surplus to fuel high-volume training demands",
    FitnessGoal.SPORT_SPECIFIC: "+10% surplus to support performance and recovery",
}
_MACRO_RATIONALES = {
    FitnessGoal.MUSCLE_GAIN: (
        "High protein (2.0g/kg) for muscle synthesis, moderate fat for hormones, "
        "remaining carbs for training energy"
    ),
    FitnessGoal.FAT_LOSS: (
        "Very high protein (2.3g/kg) to preserve muscle in deficit, "
        "balanced fat and carbs"
    ),
    FitnessGoal.ENDURANCE: (
        "Moderate protein (1.6g/kg), lower fat (20%), high carbs for sustained energy"
    ),
    FitnessGoal.SPORT_SPECIFIC: (
        "Balanced protein (1.8g/kg) for recovery, adequate carbs and fats "
        "for performance"
    ),
}

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
STEP_KCAL_FACTOR = 0.0005

_logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def calculate_bmr(profile: PhysicalProfile) -> int:
    """Return basal metabolic rate in kcal/day."""
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    bmr = base + 5 if profile.gender == Gender.MALE else base - 161
    return round_half_up(bmr)


def calculate_tdee(bmr: int, activity_level: ActivityLevel | str) -> int:
    """Scale BMR by the activity multiplier; unknown levels count as sedentary."""
    level = ActivityLevel.parse(activity_level)
    multiplier = _ACTIVITY_MULTIPLIERS.get(level, _DEFAULT_ACTIVITY_MULTIPLIER)
    return round_half_up(bmr * multiplier)


def calculate_target_calories(tdee: int, goal: FitnessGoal | str) -> int:
    """Apply the goal's surplus or deficit; other goals keep maintenance."""
    factor = _CALORIE_FACTORS.get(FitnessGoal.parse(goal), 1.0)
    return round_half_up(tdee * factor)


def calculate_macros(
    target_calories: int, weight: float, goal: FitnessGoal | str
) -> MacroDistribution:
    """Allocate protein by body weight, fat by share, and carbs from the rest.

    Protein percentage comes from the rounded protein grams and carbs
    percentage from the unrounded carb calories; fat percentage is the
    residual so the three sum to 100.
    """
    protein_per_kg, fat_share = _MACRO_RULES.get(
        FitnessGoal.parse(goal), _DEFAULT_MACRO_RULE
    )

    protein = round_half_up(weight * protein_per_kg)
    protein_calories = protein * PROTEIN_KCAL_PER_G

    fat_calories = target_calories * (fat_share / 100)
    fat = round_half_up(fat_calories / FAT_KCAL_PER_G)

    carb_calories = target_calories - protein_calories - fat_calories
    carbs = round_half_up(carb_calories / CARBS_KCAL_PER_G)

    protein_percentage = round_half_up(protein_calories / target_calories * 100)
    carbs_percentage = round_half_up(carb_calories / target_calories * 100)
    return MacroDistribution(
        protein=protein,
        carbs=carbs,
        fat=fat,
        protein_percentage=protein_percentage,
        carbs_percentage=carbs_percentage,
        fat_percentage=100 - protein_percentage - carbs_percentage,
    )


def calculate_micronutrient_targets(
    age: int, gender: Gender | str
) -> MicronutrientTargets:
    """Look up daily reference intakes by age and gender."""
    is_male = Gender.parse(gender) == Gender.MALE
    over_50 = age > 50
    return MicronutrientTargets(
        vitamin_a=900 if is_male else 700,
        vitamin_c=90 if is_male else 75,
        vitamin_d=15,
        calcium=1200 if over_50 else 1000,
        iron=8 if is_male or over_50 else 18,
        potassium=3400,
        sodium=2300,
    )


def calculate_nutrition_plan(profile: PhysicalProfile) -> NutritionTargets:
    """Run the full calculation for a validated profile."""
    bmr = calculate_bmr(profile)
    tdee = calculate_tdee(bmr, profile.activity_level)
    target_calories = calculate_target_calories(tdee, profile.fitness_goal)
    macros = calculate_macros(target_calories, profile.weight, profile.fitness_goal)
    micronutrients = calculate_micronutrient_targets(profile.age, profile.gender)
    _logger.debug(
        "Nutrition plan: bmr=%s tdee=%s target=%s goal=%s",
        bmr,
        tdee,
        target_calories,
        profile.fitness_goal.value,
    )
    return NutritionTargets(
        bmr=bmr,
        tdee=tdee,
        target_calories=target_calories,
        macros=macros,
        micronutrients=micronutrients,
        explanation=_explain(profile),
    )


def calculate_calories_from_steps(steps: int, weight_kg: float) -> int:
    """Estimate kcal burned walking the given number of steps."""
    return round_half_up(steps * weight_kg * STEP_KCAL_FACTOR)


def calculate_nutrient_percentages(
    consumed: Mapping[str, float], targets: Mapping[str, float]
) -> dict[str, int]:
    """Return consumed as a percentage of target for every target key.

    Values are not clamped. A zero target yields 0.
    """
    percentages: dict[str, int] = {}
    for nutrient, target in targets.items():
        if not target:
            percentages[nutrient] = 0
            continue
        amount = consumed.get(nutrient) or 0
        percentages[nutrient] = round_half_up(amount / target * 100)
    return percentages


def _explain(profile: PhysicalProfile) -> PlanExplanation:
    if profile.gender == Gender.MALE:
        formula = "10×weight + 6.25×height - 5×age + 5"
    else:
        formula = "10×weight + 6.25×height - 5×age - 161"
    return PlanExplanation(
        bmr_formula=f"BMR calculated using Mifflin-St Jeor equation: {formula}",
        tdee_calculation=(
            f"TDEE = BMR × activity multiplier ({profile.activity_level.value})"
        ),
        calorie_adjustment=_CALORIE_ADJUSTMENTS.get(
            profile.fitness_goal, "Maintenance calories for stable body composition"
        ),
        macro_rationale=_MACRO_RATIONALES.get(
            profile.fitness_goal,
            "Balanced macros for general health and fitness maintenance",
        ),
    )
