"""Domain models for daily statistics."""

from dataclasses import dataclass

from foodlens.domain.meals import MealLogEntry


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros with the entries they were summed from."""

    calories: float
    protein: float
    carbs: float
    fat: float
    entries: tuple[MealLogEntry, ...] = ()


@dataclass(frozen=True)
class MacroProgress:
    """Consumed amount of one macro against its target."""

    current: float
    target: int
    percent: float


@dataclass(frozen=True)
class DailyProgress:
    """Progress of daily totals against macro targets."""

    calories: MacroProgress
    protein: MacroProgress
    carbs: MacroProgress
    fat: MacroProgress
