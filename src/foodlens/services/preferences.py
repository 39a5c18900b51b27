"""User preferences service."""

from dataclasses import dataclass, replace
from typing import Protocol

from foodlens.domain.preferences import UserPreferences
from foodlens.domain.targets import FitnessGoal, MacroTargets
from foodlens.services.targets import macro_targets


class PreferencesRepository(Protocol):
    """Persistence interface for user preferences."""

    def get_preferences(self, user_id: str) -> UserPreferences | None:
        """Return stored preferences, if any."""

    def save_preferences(self, user_id: str, preferences: UserPreferences) -> None:
        """Create or replace a user's preferences."""


@dataclass
class PreferencesService:
    """Service for goal preferences and the targets derived from them."""

    repository: PreferencesRepository

    def get_preferences(self, user_id: str) -> UserPreferences:
        """Return the user's preferences or empty defaults."""
        return self.repository.get_preferences(user_id) or UserPreferences()

    def update_goals(
        self,
        user_id: str,
        daily_calorie_goal: str | None,
        fitness_goal: FitnessGoal | None,
    ) -> UserPreferences:
        """Store new goals and mark the user as onboarded."""
        updated = replace(
            self.get_preferences(user_id),
            daily_calorie_goal=daily_calorie_goal,
            fitness_goal=fitness_goal,
            is_onboarded=True,
        )
        self.repository.save_preferences(user_id, updated)
        return updated

    def get_targets(self, user_id: str) -> MacroTargets:
        """Return macro targets for the user's current goals."""
        return self.targets_for(self.get_preferences(user_id))

    @staticmethod
    def targets_for(preferences: UserPreferences) -> MacroTargets:
        """Return macro targets for already loaded preferences."""
        return macro_targets(preferences.daily_calorie_goal, preferences.fitness_goal)
