"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_planner.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from nutrition_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from nutrition_planner.adapters.supabase_preset_repository import (
    SupabaseMealPresetRepository,
)
from nutrition_planner.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrition_planner.adapters.supabase_streak_repository import (
    SupabaseStreakRepository,
)
from nutrition_planner.adapters.supabase_weight_repository import (
    SupabaseWeightLogRepository,
)
from nutrition_planner.config import Settings
from nutrition_planner.services.daily import DailySummaryService
from nutrition_planner.services.meals import (
    FoodLogRepository,
    FoodLogService,
    FoodRepository,
    MealPresetRepository,
)
from nutrition_planner.services.profiles import ProfileRepository, ProfileService
from nutrition_planner.services.streaks import StreakRepository, StreakService
from nutrition_planner.services.suggestions import SuggestionService
from nutrition_planner.services.weight import WeightLogRepository, WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    food_log_service: FoodLogService
    daily_summary_service: DailySummaryService
    streak_service: StreakService
    weight_service: WeightService
    suggestion_service: SuggestionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    food_log_repository = SupabaseFoodLogRepository(supabase_client)
    preset_repository = SupabaseMealPresetRepository(supabase_client)
    weight_repository = SupabaseWeightLogRepository(supabase_client)
    streak_repository = SupabaseStreakRepository(supabase_client)
    return wire_services(
        resolved_settings,
        profile_repository=profile_repository,
        food_repository=food_repository,
        food_log_repository=food_log_repository,
        preset_repository=preset_repository,
        weight_repository=weight_repository,
        streak_repository=streak_repository,
    )


def wire_services(  # noqa: PLR0913
    settings: Settings,
    *,
    profile_repository: ProfileRepository,
    food_repository: FoodRepository,
    food_log_repository: FoodLogRepository,
    preset_repository: MealPresetRepository,
    weight_repository: WeightLogRepository,
    streak_repository: StreakRepository,
) -> AppContainer:
    """Build services on top of the given repositories."""
    profile_service = ProfileService(profile_repository)
    streak_service = StreakService(streak_repository)
    food_log_service = FoodLogService(
        repository=food_log_repository,
        food_repository=food_repository,
        preset_repository=preset_repository,
        streak_service=streak_service,
    )
    daily_summary_service = DailySummaryService(
        repository=food_log_repository,
        profile_service=profile_service,
    )
    weight_service = WeightService(
        repository=weight_repository,
        profile_repository=profile_repository,
        lookback_days=settings.weight_trend_days,
        stable_threshold_kg=settings.weight_stable_threshold_kg,
    )
    suggestion_service = SuggestionService(
        food_repository=food_repository,
        log_repository=food_log_repository,
        profile_service=profile_service,
    )
    return AppContainer(
        settings=settings,
        profile_service=profile_service,
        food_log_service=food_log_service,
        daily_summary_service=daily_summary_service,
        streak_service=streak_service,
        weight_service=weight_service,
        suggestion_service=suggestion_service,
    )
