"""Supabase repository for user preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from foodlens.domain.preferences import UserPreferences
from foodlens.domain.targets import FitnessGoal
from foodlens.services.preferences import PreferencesRepository


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for user preferences."""

    client: Client
    table_name: str = "user_preferences"

    def get_preferences(self, user_id: str) -> UserPreferences | None:
        """Return the stored preferences for a user."""
        response = (
            self.client.table(self.table_name)
            .select("daily_calorie_goal, fitness_goal, is_onboarded")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        calorie_goal = row.get("daily_calorie_goal")
        return UserPreferences(
            daily_calorie_goal=str(calorie_goal) if calorie_goal is not None else None,
            fitness_goal=_parse_goal(row.get("fitness_goal")),
            is_onboarded=bool(row.get("is_onboarded")),
        )

    def save_preferences(self, user_id: str, preferences: UserPreferences) -> None:
        """Upsert the preferences row for a user."""
        self.client.table(self.table_name).upsert(
            {
                "user_id": user_id,
                "daily_calorie_goal": preferences.daily_calorie_goal,
                "fitness_goal": (
                    preferences.fitness_goal.value if preferences.fitness_goal else None
                ),
                "is_onboarded": preferences.is_onboarded,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_goal(value: object) -> FitnessGoal | None:
    if not isinstance(value, str):
        return None
    try:
        return FitnessGoal(value)
    except ValueError:
        return None
