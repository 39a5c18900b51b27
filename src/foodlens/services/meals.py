"""Meal logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from foodlens.domain.analysis import AnalysisError, AnalysisOutcome
from foodlens.domain.meals import MealLogEntry, ScaledNutrition
from foodlens.domain.stats import DailyTotals
from foodlens.services.scaling import scale
from foodlens.services.stats import aggregate

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for meal log entries."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: str,
        day: date,
        logged_at: datetime,
        name: str,
        nutrition: ScaledNutrition,
        image_ref: str | None,
    ) -> MealLogEntry:
        """Store a meal log entry and return it."""

    def list_entries(self, user_id: str, day: date) -> list[MealLogEntry]:
        """Return a user's entries for a day in insertion order."""


@dataclass
class MealLogService:
    """Service that scales analyzed food and tracks daily totals."""

    repository: MealLogRepository

    def log_meal(  # noqa: PLR0913
        self,
        user_id: str,
        result: AnalysisOutcome,
        servings: object = 1,
        image_ref: str | None = None,
        timezone_name: str = "UTC",
    ) -> MealLogEntry:
        """Scale an analysis result and persist it for today."""
        if not user_id:
            raise ValueError("User ID required")
        if isinstance(result, AnalysisError):
            raise ValueError("Cannot log a failed analysis")
        nutrition = scale(result, servings)
        if nutrition == ScaledNutrition(0, 0, 0, 0):
            _logger.info("Logging all-zero meal for user %s: %s", user_id, result.name)
        logged_at = datetime.now(tz=UTC)
        return self.repository.create_entry(
            user_id=user_id,
            day=_local_day(logged_at, timezone_name),
            logged_at=logged_at,
            name=result.name,
            nutrition=nutrition,
            image_ref=image_ref,
        )

    def get_daily_summary(
        self, user_id: str, timezone_name: str = "UTC", day: date | None = None
    ) -> DailyTotals:
        """Return totals for a user's day, today by default."""
        if not user_id:
            raise ValueError("User ID required")
        resolved_day = day or _local_day(datetime.now(tz=UTC), timezone_name)
        entries = self.repository.list_entries(user_id, resolved_day)
        return aggregate(entries)


def _local_day(moment: datetime, timezone_name: str) -> date:
    try:
        zone = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {timezone_name}") from exc
    return moment.astimezone(zone).date()
