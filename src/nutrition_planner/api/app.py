"""FastAPI application factory."""

import logging
from datetime import date, datetime
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from nutrition_planner.api.models import (
    LogFoodRequest,
    LogPresetRequest,
    LogWeightRequest,
    PhysicalProfilePayload,
    StepsRequest,
    UpdateLogRequest,
)
from nutrition_planner.app_logging import configure_logging
from nutrition_planner.containers import AppContainer
from nutrition_planner.errors import IncompleteProfileError, NotFoundError
from nutrition_planner.services.calculator import (
    calculate_calories_from_steps,
    calculate_nutrition_plan,
)
from nutrition_planner.services.meals import LogResult


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)
    settings = container.settings

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(IncompleteProfileError)
    async def incomplete_profile_handler(
        request: Request, exc: IncompleteProfileError
    ) -> JSONResponse:
        logger.warning("Incomplete profile on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc), "missing_fields": exc.missing_fields},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("Not found on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    def state_container(request: Request) -> AppContainer:
        return request.app.state.container

    def local_now(timezone_name: str | None) -> datetime:
        name = timezone_name or settings.default_timezone
        try:
            tz = ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown timezone: {name}",
            ) from exc
        return datetime.now(tz=tz)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition/calculate")
    async def calculate_plan(payload: PhysicalProfilePayload) -> dict[str, object]:
        """Calculate targets for physical data supplied in the request."""
        return {"plan": calculate_nutrition_plan(payload.to_domain())}

    @app.post("/activity/steps-calories")
    async def steps_calories(payload: StepsRequest) -> dict[str, int]:
        """Estimate calories burned from a step count."""
        return {
            "calories": calculate_calories_from_steps(payload.steps, payload.weight_kg)
        }

    @app.get("/users/{user_id}/nutrition/plan")
    async def user_plan(user_id: UUID, request: Request) -> dict[str, object]:
        """Calculate targets from the stored profile."""
        plan = state_container(request).profile_service.calculate_plan(user_id)
        return {"plan": plan}

    @app.get("/users/{user_id}/nutrition/daily")
    async def daily_summary(
        user_id: UUID,
        request: Request,
        day: date | None = None,
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Return the day's meals, totals and remaining macros."""
        now = local_now(timezone)
        summary = state_container(request).daily_summary_service.get_day(
            user_id, day or now.date(), str(now.tzinfo)
        )
        return {"summary": summary}

    @app.post("/users/{user_id}/nutrition/logs", status_code=status.HTTP_201_CREATED)
    async def log_food(
        user_id: UUID,
        payload: LogFoodRequest,
        request: Request,
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Log a food and update the streak."""
        now = local_now(timezone)
        result = state_container(request).food_log_service.log_food(
            user_id,
            payload.food_id,
            payload.servings,
            payload.meal_type,
            logged_at=_localize(payload.logged_at, now),
            today=now.date(),
        )
        return _log_result(result)

    @app.post(
        "/users/{user_id}/nutrition/presets/{preset_id}/log",
        status_code=status.HTTP_201_CREATED,
    )
    async def log_preset(
        user_id: UUID,
        preset_id: UUID,
        payload: LogPresetRequest,
        request: Request,
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Log every item of a meal preset."""
        now = local_now(timezone)
        result = state_container(request).food_log_service.log_preset(
            user_id,
            preset_id,
            payload.meal_type,
            logged_at=_localize(payload.logged_at, now),
            today=now.date(),
        )
        return _log_result(result)

    @app.patch("/users/{user_id}/nutrition/logs/{log_id}")
    async def update_log(
        user_id: UUID,
        log_id: UUID,
        payload: UpdateLogRequest,
        request: Request,
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Edit servings, meal slot or time of a food log."""
        now = local_now(timezone)
        entry = state_container(request).food_log_service.update_log(
            user_id,
            log_id,
            servings=payload.servings,
            meal_type=payload.meal_type,
            logged_at=_localize(payload.logged_at, now) if payload.logged_at else None,
        )
        return {"log": entry}

    @app.delete(
        "/users/{user_id}/nutrition/logs/{log_id}",
        status_code=status.HTTP_204_NO_CONTENT,
    )
    async def delete_log(user_id: UUID, log_id: UUID, request: Request) -> None:
        """Delete a food log."""
        state_container(request).food_log_service.delete_log(user_id, log_id)

    @app.get("/users/{user_id}/nutrition/streak")
    async def streak(
        user_id: UUID, request: Request, timezone: str | None = None
    ) -> dict[str, object]:
        """Return the stored streak and whether it is still alive today."""
        now = local_now(timezone)
        state = state_container(request).streak_service.get_streak(user_id)
        return {"streak": state, "active_streak": state.active_streak(now.date())}

    @app.get("/users/{user_id}/nutrition/suggestions")
    async def suggestions(
        user_id: UUID,
        request: Request,
        limit: int | None = None,
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Suggest foods that fit what is left of today's targets."""
        now = local_now(timezone)
        remaining, ranked = state_container(
            request
        ).suggestion_service.get_suggestions(
            user_id,
            now.date(),
            str(now.tzinfo),
            limit=settings.suggestion_limit if limit is None else limit,
        )
        return {"remaining": remaining, "suggestions": ranked}

    @app.get("/users/{user_id}/nutrition/recent-foods")
    async def recent_foods(
        user_id: UUID, request: Request, limit: int = 10
    ) -> dict[str, object]:
        """Return recently and frequently logged foods."""
        now = local_now(None)
        foods = state_container(request).food_log_service.get_recent_foods(
            user_id, now, limit=limit
        )
        return {"recent": foods.recent, "frequent": foods.frequent}

    @app.post("/users/{user_id}/weight", status_code=status.HTTP_201_CREATED)
    async def log_weight(
        user_id: UUID,
        payload: LogWeightRequest,
        request: Request,
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Record a weigh-in."""
        now = local_now(timezone)
        entry = state_container(request).weight_service.log_weight(
            user_id,
            payload.weight,
            _localize(payload.logged_at, now),
            payload.note,
        )
        return {"log": entry}

    @app.get("/users/{user_id}/weight/trend")
    async def weight_trend(
        user_id: UUID, request: Request, days: int | None = None
    ) -> dict[str, object]:
        """Return moving averages and trend direction."""
        now = local_now(None)
        trend = state_container(request).weight_service.get_trend(
            user_id, now, days=days
        )
        return {"trend": trend}

    return app


def _localize(value: datetime | None, now: datetime) -> datetime:
    """Default to now and attach the request timezone to naive values."""
    if value is None:
        return now
    if value.tzinfo is None:
        return value.replace(tzinfo=now.tzinfo)
    return value


def _log_result(result: LogResult) -> dict[str, object]:
    return {
        "logs": result.entries,
        "streak": result.streak.state,
        "badge": result.streak.badge,
    }
