"""Food suggestions ranked against the remaining macro budget."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrition_planner.domain.foods import FoodItem
from nutrition_planner.domain.meals import MacroBudget
from nutrition_planner.domain.suggestions import Suggestion
from nutrition_planner.services.calculator import PROTEIN_KCAL_PER_G, round_half_up
from nutrition_planner.services.daily import compute_remaining, day_bounds, sum_totals
from nutrition_planner.services.meals import FoodLogRepository, FoodRepository
from nutrition_planner.services.profiles import ProfileService

DEFAULT_SUGGESTION_LIMIT = 10

# points for a food that covers the whole remaining amount of a macro
_PROTEIN_POINTS = 300
_CARBS_POINTS = 50
_FAT_POINTS = 30
_PROTEIN_DENSITY_POINTS = 40
_CALORIE_FIT_POINTS = 20
_PROTEIN_RICH_BONUS = 20
_HIGH_FAT_PENALTY = 20
_OVERSHOOT_POINTS = 100
_MAX_OVERSHOOT_RATIO = 5.0
_OVER_TARGET_KCAL_DIVISOR = 10

HIGH_PROTEIN_G = 15
HIGH_FAT_G = 10
PROTEIN_RICH_RATIO = 0.4
LIGHT_OPTION_SHARE = 0.3


@dataclass
class SuggestionService:
    """Suggests catalog foods for what is left of today's targets."""

    food_repository: FoodRepository
    log_repository: FoodLogRepository
    profile_service: ProfileService

    def get_suggestions(
        self,
        user_id: UUID,
        day: date,
        timezone_name: str,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
    ) -> tuple[MacroBudget, list[Suggestion]]:
        """Return the remaining budget and the best-fitting foods."""
        targets = self.profile_service.calculate_plan(user_id)
        start, end = day_bounds(day, timezone_name)
        totals = sum_totals(self.log_repository.list_logs(user_id, start, end))
        remaining = compute_remaining(targets, totals)
        foods = self.food_repository.list_foods()
        return remaining, suggest_foods(remaining, foods, limit)


def suggest_foods(
    remaining: MacroBudget,
    foods: list[FoodItem],
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[Suggestion]:
    """Score every food and return the top limit, best first."""
    suggestions = []
    for food in foods:
        score, reason = score_food_fit(food, remaining)
        suggestions.append(Suggestion(food=food, score=score, reason=reason))
    suggestions.sort(key=lambda item: (-item.score, item.food.name.lower()))
    return suggestions[: max(limit, 0)]


def score_food_fit(food: FoodItem, remaining: MacroBudget) -> tuple[int, str]:
    """Score one serving of a food against the remaining budget.

    Each macro earns credit for the share of the remaining amount it covers,
    with protein weighted highest. A food larger than the remaining calories
    only earns credit for the part that fits and loses points for the excess.
    """
    reasons: list[str] = []
    macro_score = 0.0

    if remaining.protein > 0 and food.protein > 0:
        macro_score += min(food.protein / remaining.protein, 1) * _PROTEIN_POINTS
        if food.calories > 0:
            density = min(food.protein * PROTEIN_KCAL_PER_G / food.calories, 1)
            macro_score += density * _PROTEIN_DENSITY_POINTS
        if food.protein >= HIGH_PROTEIN_G:
            reasons.append("high protein")
    if remaining.carbs > 0 and food.carbs > 0:
        macro_score += min(food.carbs / remaining.carbs, 1) * _CARBS_POINTS
    if remaining.fat > 0 and food.fat > 0:
        macro_score += min(food.fat / remaining.fat, 1) * _FAT_POINTS

    score = macro_score
    if remaining.fat <= 0 and food.fat > HIGH_FAT_G:
        score -= _HIGH_FAT_PENALTY
        reasons.append("low fat option preferred")

    if remaining.calories > 0:
        if food.calories <= remaining.calories:
            score += _CALORIE_FIT_POINTS
            if food.calories <= remaining.calories * LIGHT_OPTION_SHARE:
                reasons.append("light option")
            else:
                reasons.append("fits your remaining calories")
        else:
            fit_share = remaining.calories / food.calories
            overshoot = (food.calories - remaining.calories) / remaining.calories
            score = score - macro_score * (1 - fit_share)
            score -= min(overshoot, _MAX_OVERSHOOT_RATIO) * _OVERSHOOT_POINTS
            reasons.append("exceeds remaining calories")
    else:
        score -= food.calories / _OVER_TARGET_KCAL_DIVISOR
        reasons.append("over today's calorie target")

    macro_grams = food.protein + food.carbs + food.fat
    if macro_grams > 0 and food.protein / macro_grams >= PROTEIN_RICH_RATIO:
        score += _PROTEIN_RICH_BONUS
        if "high protein" not in reasons:
            reasons.insert(0, "protein-rich")

    reason = ", ".join(reasons)
    return round_half_up(score), reason[:1].upper() + reason[1:]
