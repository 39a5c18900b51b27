"""Macro target calculation from a calorie goal and fitness goal."""

import math
import re
from decimal import Decimal

from foodlens.domain.targets import FitnessGoal, MacroRatio, MacroTargets
from foodlens.services.parsing import round_half_up

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_FITNESS_GOAL = FitnessGoal.MAINTENANCE

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

GOAL_RATIOS: dict[FitnessGoal, MacroRatio] = {
    FitnessGoal.WEIGHT_LOSS: MacroRatio(protein_pct=40, carbs_pct=30, fat_pct=30),
    FitnessGoal.MUSCLE_GAIN: MacroRatio(protein_pct=35, carbs_pct=45, fat_pct=20),
    FitnessGoal.ENDURANCE: MacroRatio(protein_pct=25, carbs_pct=55, fat_pct=20),
    FitnessGoal.WEIGHT_GAIN: MacroRatio(protein_pct=30, carbs_pct=40, fat_pct=30),
    FitnessGoal.MAINTENANCE: MacroRatio(protein_pct=30, carbs_pct=40, fat_pct=30),
}

GOAL_LABELS: dict[FitnessGoal, str] = {
    FitnessGoal.WEIGHT_LOSS: "Weight Loss",
    FitnessGoal.MUSCLE_GAIN: "Muscle Gain",
    FitnessGoal.ENDURANCE: "Endurance",
    FitnessGoal.WEIGHT_GAIN: "Weight Gain",
    FitnessGoal.MAINTENANCE: "Maintenance",
}

_LEADING_INT = re.compile(r"\s*(\d+)", re.ASCII)


def macro_targets(calorie_goal: object, goal: object) -> MacroTargets:
    """Return gram targets for each macro.

    Unknown goals use maintenance ratios; a missing or unusable calorie
    goal uses 2000 kcal.
    """
    calories = resolve_calorie_goal(calorie_goal)
    ratio = GOAL_RATIOS[resolve_goal(goal)]
    return MacroTargets(
        calories=calories,
        protein=_grams(calories, ratio.protein_pct, PROTEIN_KCAL_PER_G),
        carbs=_grams(calories, ratio.carbs_pct, CARBS_KCAL_PER_G),
        fat=_grams(calories, ratio.fat_pct, FAT_KCAL_PER_G),
    )


def resolve_goal(value: object) -> FitnessGoal:
    """Map a goal tag to a FitnessGoal, defaulting to maintenance."""
    if isinstance(value, FitnessGoal):
        return value
    if isinstance(value, str):
        try:
            return FitnessGoal(value.strip().lower())
        except ValueError:
            return DEFAULT_FITNESS_GOAL
    return DEFAULT_FITNESS_GOAL


def resolve_calorie_goal(value: object) -> int:
    """Read a positive whole calorie goal from user input, or the default.

    Text is read up to the first non-digit, so "1800 kcal" is 1800.
    """
    if isinstance(value, bool):
        return DEFAULT_CALORIE_GOAL
    if isinstance(value, float) and not math.isfinite(value):
        return DEFAULT_CALORIE_GOAL
    if isinstance(value, int | float):
        parsed = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return DEFAULT_CALORIE_GOAL
        try:
            parsed = int(match.group(1))
        except ValueError:
            return DEFAULT_CALORIE_GOAL
    else:
        return DEFAULT_CALORIE_GOAL
    return parsed if parsed > 0 else DEFAULT_CALORIE_GOAL


def goal_label(goal: object) -> str:
    """Return the display label for a goal tag."""
    return GOAL_LABELS[resolve_goal(goal)]


def _grams(calories: int, percent: int, kcal_per_gram: int) -> int:
    return round_half_up(Decimal(calories * percent) / (100 * kcal_per_gram))
