"""Supabase repository for meal log entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from foodlens.domain.meals import MealLogEntry, ScaledNutrition
from foodlens.services.meals import MealLogRepository

_COLUMNS = "id, user_id, date, name, calories, protein, carbs, fat, logged_at, image_ref"


@dataclass
class SupabaseMealLogRepository(MealLogRepository):
    """Supabase implementation for meal log entries."""

    client: Client
    table_name: str = "meal_logs"

    def create_entry(  # noqa: PLR0913
        self,
        user_id: str,
        day: date,
        logged_at: datetime,
        name: str,
        nutrition: ScaledNutrition,
        image_ref: str | None,
    ) -> MealLogEntry:
        """Insert a meal log row and return the stored entry."""
        response = (
            self.client.table(self.table_name)
            .insert(
                {
                    "user_id": user_id,
                    "date": day.isoformat(),
                    "name": name,
                    "calories": nutrition.calories,
                    "protein": nutrition.protein,
                    "carbs": nutrition.carbs,
                    "fat": nutrition.fat,
                    "logged_at": logged_at.isoformat(),
                    "image_ref": image_ref,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal log")
        return _parse_row(response.data[0])

    def list_entries(self, user_id: str, day: date) -> list[MealLogEntry]:
        """Return a user's entries for a day, oldest first."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .eq("date", day.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> MealLogEntry:
    return MealLogEntry(
        id=UUID(str(row["id"])),
        user_id=str(row["user_id"]),
        date=date.fromisoformat(str(row["date"])),
        name=str(row.get("name") or ""),
        calories=_number(row.get("calories")),
        protein=_number(row.get("protein")),
        carbs=_number(row.get("carbs")),
        fat=_number(row.get("fat")),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        image_ref=row.get("image_ref") or None,
    )


def _number(value: object) -> float:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0
    return 0
