"""Domain models for meal logging."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class ScaledNutrition:
    """Macros for a chosen number of servings, rounded per field."""

    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class MealLogEntry:
    """A logged meal with serving-scaled macros."""

    id: UUID
    user_id: str
    date: date
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    logged_at: datetime
    image_ref: str | None = None
