"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from foodlens.adapters.openai_analysis_client import OpenAIAnalysisClient
from foodlens.adapters.supabase_meal_log_repository import SupabaseMealLogRepository
from foodlens.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from foodlens.config import Settings
from foodlens.services.analysis import FoodAnalysisService
from foodlens.services.meals import MealLogService
from foodlens.services.preferences import PreferencesService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analysis_service: FoodAnalysisService
    meal_log_service: MealLogService
    preferences_service: PreferencesService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_log_repository = SupabaseMealLogRepository(
        supabase_client, table_name=resolved_settings.meal_logs_table
    )
    preferences_repository = SupabasePreferencesRepository(
        supabase_client, table_name=resolved_settings.preferences_table
    )
    openai_client = OpenAIAnalysisClient.create(resolved_settings.openai_api_key)
    analysis_service = FoodAnalysisService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        analysis_service=analysis_service,
        meal_log_service=MealLogService(meal_log_repository),
        preferences_service=PreferencesService(preferences_repository),
        close_resources=close_resources,
    )
