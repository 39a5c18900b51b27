"""User preference models."""

from dataclasses import dataclass

from foodlens.domain.targets import FitnessGoal


@dataclass(frozen=True)
class UserPreferences:
    """Goal settings for a user.

    The calorie goal is kept as the raw text the user entered.
    """

    daily_calorie_goal: str | None = None
    fitness_goal: FitnessGoal | None = None
    is_onboarded: bool = False
