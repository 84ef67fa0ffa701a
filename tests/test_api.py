"""Tests for the HTTP API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from nutrition_planner.api.app import create_app
from nutrition_planner.containers import AppContainer
from tests.conftest import Repositories, complete_profile, make_food


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


PROFILE_PAYLOAD = {
    "age": 25,
    "gender": "male",
    "weight": 70,
    "height": 175,
    "activity_level": "moderate",
    "fitness_goal": "fat_loss",
}


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_calculate_plan_from_payload(client: TestClient) -> None:
    response = client.post("/nutrition/calculate", json=PROFILE_PAYLOAD)

    assert response.status_code == 200
    plan = response.json()["plan"]
    assert plan["bmr"] == 1674
    assert plan["tdee"] == 2595
    assert plan["target_calories"] == 2076
    assert plan["macros"]["protein_percentage"] == 31
    assert plan["micronutrients"]["iron"] == 8


def test_calculate_plan_rejects_invalid_payload(client: TestClient) -> None:
    response = client.post(
        "/nutrition/calculate", json={**PROFILE_PAYLOAD, "gender": "unknown"}
    )

    assert response.status_code == 422


def test_steps_calories(client: TestClient) -> None:
    response = client.post(
        "/activity/steps-calories", json={"steps": 10000, "weight_kg": 70}
    )

    assert response.json() == {"calories": 350}


def test_incomplete_profile_returns_400(client: TestClient) -> None:
    response = client.get(f"/users/{uuid4()}/nutrition/plan")

    assert response.status_code == 400
    body = response.json()
    assert body["error"].startswith("Please complete your profile")
    assert "fitness_goal" in body["missing_fields"]


def test_suggestions_require_complete_profile(client: TestClient) -> None:
    response = client.get(f"/users/{uuid4()}/nutrition/suggestions")

    assert response.status_code == 400


def test_log_then_read_daily_summary_and_streak(
    client: TestClient, repositories: Repositories
) -> None:
    user_id = uuid4()
    repositories.profiles.profiles[user_id] = complete_profile(user_id)
    oats = repositories.foods.add(make_food("Oats", 380, 13, 67, 7))

    logged = client.post(
        f"/users/{user_id}/nutrition/logs",
        json={
            "food_id": str(oats.id),
            "servings": 1,
            "meal_type": "breakfast",
            "logged_at": "2024-05-01T08:00:00+00:00",
        },
    )
    summary = client.get(
        f"/users/{user_id}/nutrition/daily",
        params={"day": "2024-05-01", "timezone": "UTC"},
    )
    streak = client.get(f"/users/{user_id}/nutrition/streak")

    assert logged.status_code == 201
    assert logged.json()["badge"] == "First Log!"
    assert logged.json()["logs"][0]["totals"]["calories"] == 380
    body = summary.json()["summary"]
    assert body["log_count"] == 1
    assert len(body["meals"]["breakfast"]) == 1
    assert body["remaining"]["calories"] == 2076 - 380
    assert body["progress"]["protein"] == 8
    assert streak.json()["streak"]["current_streak"] == 1
    assert streak.json()["active_streak"] == 1


def test_update_and_delete_log(client: TestClient, repositories: Repositories) -> None:
    user_id = uuid4()
    oats = repositories.foods.add(make_food("Oats", 380, 13, 67, 7))
    created = client.post(
        f"/users/{user_id}/nutrition/logs",
        json={"food_id": str(oats.id), "meal_type": "breakfast"},
    ).json()["logs"][0]

    updated = client.patch(
        f"/users/{user_id}/nutrition/logs/{created['id']}", json={"servings": 2}
    )
    deleted = client.delete(f"/users/{user_id}/nutrition/logs/{created['id']}")
    deleted_again = client.delete(f"/users/{user_id}/nutrition/logs/{created['id']}")

    assert updated.status_code == 200
    assert updated.json()["log"]["totals"]["calories"] == 760
    assert deleted.status_code == 204
    assert deleted_again.status_code == 404
    assert deleted_again.json() == {"error": f"Food log {created['id']} not found"}


def test_log_unknown_food_returns_404(client: TestClient) -> None:
    response = client.post(
        f"/users/{uuid4()}/nutrition/logs", json={"food_id": str(uuid4())}
    )

    assert response.status_code == 404


def test_log_preset(client: TestClient, repositories: Repositories) -> None:
    user_id = uuid4()
    eggs = repositories.foods.add(make_food("Egg", 155, 13, 1.1, 11))
    toast = repositories.foods.add(make_food("Toast", 265, 9, 49, 3.2))
    preset = repositories.presets.add(user_id, "Breakfast", [(eggs, 2), (toast, 1)])

    response = client.post(
        f"/users/{user_id}/nutrition/presets/{preset.id}/log",
        json={"meal_type": "breakfast"},
    )

    assert response.status_code == 201
    assert len(response.json()["logs"]) == 2
    assert response.json()["streak"]["total_days_logged"] == 1


def test_suggestions_and_recent_foods(
    client: TestClient, repositories: Repositories
) -> None:
    user_id = uuid4()
    repositories.profiles.profiles[user_id] = complete_profile(user_id)
    chicken = repositories.foods.add(make_food("Chicken breast", 165, 31, 0, 3.6))
    for index in range(4):
        repositories.foods.add(make_food(f"Snack {index}", 150, 2, 20, 7))
    client.post(
        f"/users/{user_id}/nutrition/logs",
        json={"food_id": str(chicken.id), "meal_type": "lunch"},
    )

    suggestions = client.get(
        f"/users/{user_id}/nutrition/suggestions", params={"limit": 3}
    )
    recent = client.get(f"/users/{user_id}/nutrition/recent-foods")

    assert suggestions.status_code == 200
    assert len(suggestions.json()["suggestions"]) == 3
    assert suggestions.json()["suggestions"][0]["food"]["name"] == "Chicken breast"
    assert suggestions.json()["remaining"]["protein"] == 161 - 31
    assert recent.json()["recent"][0]["food"]["name"] == "Chicken breast"
    assert recent.json()["frequent"][0]["log_count"] == 1


def test_weight_log_and_trend(client: TestClient, repositories: Repositories) -> None:
    user_id = uuid4()
    repositories.profiles.profiles[user_id] = complete_profile(user_id)

    logged = client.post(f"/users/{user_id}/weight", json={"weight": 69.4})
    trend = client.get(f"/users/{user_id}/weight/trend")

    assert logged.status_code == 201
    assert repositories.profiles.profiles[user_id].weight == 69.4
    assert trend.json()["trend"] == {
        "current": 69.4,
        "average_7_day": 69.4,
        "average_30_day": 69.4,
        "trend": "insufficient_data",
        "change": None,
    }


def test_unknown_timezone_returns_400(client: TestClient) -> None:
    response = client.get(
        f"/users/{uuid4()}/nutrition/daily", params={"timezone": "Mars/Olympus"}
    )

    assert response.status_code == 400
