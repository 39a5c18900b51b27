"""Tests for preferences service."""

from foodlens.domain.preferences import UserPreferences
from foodlens.domain.targets import FitnessGoal, MacroTargets
from foodlens.services.preferences import PreferencesService
from tests.conftest import InMemoryPreferencesRepository


def test_get_preferences_defaults_when_missing() -> None:
    service = PreferencesService(InMemoryPreferencesRepository())

    assert service.get_preferences("user-1") == UserPreferences()


def test_update_goals_marks_onboarded() -> None:
    repository = InMemoryPreferencesRepository()
    service = PreferencesService(repository)

    updated = service.update_goals("user-1", "1800", FitnessGoal.WEIGHT_LOSS)

    assert updated.is_onboarded
    assert repository.preferences["user-1"] == updated


def test_get_targets_uses_stored_goals() -> None:
    repository = InMemoryPreferencesRepository()
    repository.preferences["user-1"] = UserPreferences(
        daily_calorie_goal="2000", fitness_goal=FitnessGoal.MUSCLE_GAIN
    )
    service = PreferencesService(repository)

    assert service.get_targets("user-1") == MacroTargets(2000, 175, 225, 44)


def test_get_targets_defaults_without_preferences() -> None:
    service = PreferencesService(InMemoryPreferencesRepository())

    assert service.get_targets("new-user") == MacroTargets(2000, 150, 200, 67)


def test_targets_for_loaded_preferences_skips_repository() -> None:
    repository = InMemoryPreferencesRepository()
    service = PreferencesService(repository)
    preferences = UserPreferences(
        daily_calorie_goal="1800", fitness_goal=FitnessGoal.WEIGHT_LOSS
    )

    targets = service.targets_for(preferences)

    assert targets.calories == 1800
    assert repository.reads == 0
