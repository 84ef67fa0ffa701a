"""Tests for food suggestions."""

from datetime import date
from uuid import uuid4

import pytest

from nutrition_planner.containers import AppContainer
from nutrition_planner.domain.meals import MacroBudget, MealType
from nutrition_planner.errors import IncompleteProfileError
from nutrition_planner.services.meals import snapshot_totals
from nutrition_planner.services.suggestions import score_food_fit, suggest_foods
from tests.conftest import Repositories, complete_profile, make_food, utc

REMAINING = MacroBudget(calories=600, protein=40, carbs=60, fat=20)


def test_exact_fit_scores_near_the_top() -> None:
    bowl = make_food("Chicken bowl", 600, 40, 60, 20)

    score, reason = score_food_fit(bowl, REMAINING)

    assert score == 411
    assert reason == "High protein, fits your remaining calories"


def test_oversized_food_ranks_below_fitting_foods() -> None:
    foods = [
        make_food("Double burger", 1500, 60, 120, 80),
        make_food("Cucumber", 15, 0.7, 3.6, 0.1),
        make_food("Chicken bowl", 600, 40, 60, 20),
    ]

    ranked = suggest_foods(REMAINING, foods)

    assert [item.food.name for item in ranked] == [
        "Chicken bowl",
        "Cucumber",
        "Double burger",
    ]
    assert ranked[1].reason == "Light option"
    assert ranked[2].reason == "High protein, exceeds remaining calories"


def test_high_protein_food_beats_low_protein_food_of_equal_calories() -> None:
    tuna = make_food("Tuna", 200, 40, 0, 2)
    crackers = make_food("Crackers", 200, 4, 30, 8)

    ranked = suggest_foods(REMAINING, [crackers, tuna])

    assert [item.food.name for item in ranked] == ["Tuna", "Crackers"]
    assert ranked[0].score == 375
    assert ranked[1].score == 90


def test_protein_rich_reason_for_lean_food_below_high_protein_cutoff() -> None:
    _, reason = score_food_fit(make_food("Egg white", 52, 11, 0.7, 0.2), REMAINING)

    assert reason == "Protein-rich, light option"


def test_over_target_prefers_light_low_fat_foods() -> None:
    remaining = MacroBudget(calories=-100, protein=10, carbs=-5, fat=-3)
    butter = make_food("Butter", 717, 0.9, 0.1, 81)
    celery = make_food("Celery", 16, 0.7, 3, 0.2)

    ranked = suggest_foods(remaining, [butter, celery])

    assert [item.food.name for item in ranked] == ["Celery", "Butter"]
    assert ranked[0].reason == "Over today's calorie target"
    assert ranked[1].reason == (
        "Low fat option preferred, over today's calorie target"
    )
    assert ranked[1].score < 0


def test_limit_and_empty_catalog() -> None:
    foods = [make_food(f"Food {index:02d}", 100, index, 10, 2) for index in range(15)]

    assert len(suggest_foods(REMAINING, foods)) == 10
    assert len(suggest_foods(REMAINING, foods, limit=3)) == 3
    assert suggest_foods(REMAINING, foods, limit=0) == []
    assert suggest_foods(REMAINING, []) == []


def test_equal_scores_are_ordered_by_name() -> None:
    ranked = suggest_foods(
        REMAINING,
        [make_food("banana", 89, 1.1, 23, 0.3), make_food("Apple", 89, 1.1, 23, 0.3)],
    )

    assert ranked[0].score == ranked[1].score
    assert [item.food.name for item in ranked] == ["Apple", "banana"]


def test_service_uses_what_is_left_of_today(
    container: AppContainer, repositories: Repositories
) -> None:
    user_id = uuid4()
    repositories.profiles.profiles[user_id] = complete_profile(user_id)
    oats = repositories.foods.add(make_food("Oats", 380, 13, 67, 7))
    repositories.foods.add(make_food("Chicken breast", 165, 31, 0, 3.6))
    repositories.logs.create_log(
        user_id=user_id,
        food=oats,
        servings=1,
        meal_type=MealType.BREAKFAST,
        logged_at=utc(2024, 5, 1, 8),
        totals=snapshot_totals(oats, 1),
    )

    remaining, ranked = container.suggestion_service.get_suggestions(
        user_id, date(2024, 5, 1), "UTC", limit=5
    )

    assert remaining.calories == pytest.approx(2076 - 380)
    assert remaining.protein == pytest.approx(161 - 13)
    assert ranked[0].food.name == "Chicken breast"
    assert len(ranked) == 2


def test_service_requires_complete_profile(container: AppContainer) -> None:
    with pytest.raises(IncompleteProfileError):
        container.suggestion_service.get_suggestions(uuid4(), date(2024, 5, 1), "UTC")
