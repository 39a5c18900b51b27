"""FastAPI application factory."""

import base64
import binascii
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import FastAPI, HTTPException, Request, status

from foodlens.api.models import AnalyzeRequest, LogMealRequest, PreferencesPayload
from foodlens.app_logging import configure_logging
from foodlens.containers import AppContainer
from foodlens.domain.meals import MealLogEntry
from foodlens.domain.preferences import UserPreferences
from foodlens.services.stats import compare_to_targets
from foodlens.services.targets import goal_label, resolve_goal


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analyze")
    async def analyze(payload: AnalyzeRequest, request: Request) -> dict[str, object]:
        """Analyze a food image and return the structured result or an error."""
        state_container: AppContainer = request.app.state.container
        image_bytes = _decode_image(payload.image_base64)
        outcome = await state_container.analysis_service.analyze(image_bytes)
        return outcome.model_dump(by_alias=True)

    @app.post("/users/{user_id}/meals")
    async def log_meal(
        user_id: str, payload: LogMealRequest, request: Request
    ) -> dict[str, object]:
        """Log an analyzed food for today at the chosen serving count."""
        state_container: AppContainer = request.app.state.container
        timezone_name = _resolve_timezone(payload.timezone, state_container)
        try:
            entry = state_container.meal_log_service.log_meal(
                user_id=user_id,
                result=payload.result,
                servings=payload.servings,
                image_ref=payload.image_ref,
                timezone_name=timezone_name,
            )
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        logger.info("Logged meal %s for user %s", entry.id, user_id)
        return _entry_payload(entry)

    @app.get("/users/{user_id}/summary")
    async def daily_summary(
        user_id: str,
        request: Request,
        day: date | None = None,
        timezone: str | None = None,
    ) -> dict[str, object]:
        """Return a day's totals alongside the user's macro targets."""
        state_container: AppContainer = request.app.state.container
        timezone_name = _resolve_timezone(timezone, state_container)
        totals = state_container.meal_log_service.get_daily_summary(
            user_id, timezone_name=timezone_name, day=day
        )
        preferences = state_container.preferences_service.get_preferences(user_id)
        targets = state_container.preferences_service.targets_for(preferences)
        goal = resolve_goal(preferences.fitness_goal)
        return {
            "totals": {
                "calories": totals.calories,
                "protein": totals.protein,
                "carbs": totals.carbs,
                "fat": totals.fat,
            },
            "entries": [_entry_payload(entry) for entry in totals.entries],
            "goal": goal.value,
            "goal_label": goal_label(goal),
            "targets": asdict(targets),
            "progress": asdict(compare_to_targets(totals, targets)),
        }

    @app.get("/users/{user_id}/preferences")
    async def get_preferences(user_id: str, request: Request) -> dict[str, object]:
        """Return the user's goal preferences."""
        state_container: AppContainer = request.app.state.container
        preferences = state_container.preferences_service.get_preferences(user_id)
        return _preferences_payload(preferences)

    @app.put("/users/{user_id}/preferences")
    async def update_preferences(
        user_id: str, payload: PreferencesPayload, request: Request
    ) -> dict[str, object]:
        """Replace the user's goal preferences."""
        state_container: AppContainer = request.app.state.container
        preferences = state_container.preferences_service.update_goals(
            user_id,
            daily_calorie_goal=payload.daily_calorie_goal,
            fitness_goal=payload.fitness_goal,
        )
        return _preferences_payload(preferences)

    return app


def _decode_image(value: str) -> bytes:
    """Decode base64 image data, accepting a data URL prefix."""
    encoded = value.partition(",")[2] if value.startswith("data:") else value
    try:
        image_bytes = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="image_base64 is not valid base64",
        ) from exc
    if not image_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="image_base64 is empty",
        )
    return image_bytes


def _resolve_timezone(timezone_name: str | None, container: AppContainer) -> str:
    resolved = timezone_name or container.settings.default_timezone
    try:
        ZoneInfo(resolved)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown timezone: {resolved}",
        ) from exc
    return resolved


def _entry_payload(entry: MealLogEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "user_id": entry.user_id,
        "date": entry.date.isoformat(),
        "name": entry.name,
        "calories": entry.calories,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
        "logged_at": entry.logged_at.isoformat(),
        "image_ref": entry.image_ref,
    }


def _preferences_payload(preferences: UserPreferences) -> dict[str, object]:
    return {
        "dailyCalorieGoal": preferences.daily_calorie_goal,
        "fitnessGoal": (
            preferences.fitness_goal.value if preferences.fitness_goal else None
        ),
        "isOnboarded": preferences.is_onboarded,
    }
