"""Daily aggregation of meal log entries."""

from collections.abc import Iterable

from foodlens.domain.meals import MealLogEntry
from foodlens.domain.stats import DailyProgress, DailyTotals, MacroProgress
from foodlens.domain.targets import MacroTargets

MAX_PERCENT = 100.0


def aggregate(entries: Iterable[MealLogEntry]) -> DailyTotals:
    """Sum the macros of one user's entries for one day.

    The entries are trusted to belong to the same (user, date); their order
    is kept for display.
    """
    retained = tuple(entries)
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    for entry in retained:
        calories += entry.calories
        protein += entry.protein
        carbs += entry.carbs
        fat += entry.fat
    return DailyTotals(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        entries=retained,
    )


def compare_to_targets(totals: DailyTotals, targets: MacroTargets) -> DailyProgress:
    """Return per-macro progress of the day's totals against targets."""
    return DailyProgress(
        calories=_progress(totals.calories, targets.calories),
        protein=_progress(totals.protein, targets.protein),
        carbs=_progress(totals.carbs, targets.carbs),
        fat=_progress(totals.fat, targets.fat),
    )


def progress_percent(current: float, target: float) -> float:
    """Return current as a percentage of target, capped at 100."""
    if target <= 0:
        return 0.0
    return min(current / target * 100, MAX_PERCENT)


def _progress(current: float, target: int) -> MacroProgress:
    return MacroProgress(
        current=current,
        target=target,
        percent=progress_percent(current, target),
    )
