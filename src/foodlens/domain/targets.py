"""Fitness goals and macro target models."""

from dataclasses import dataclass
from enum import Enum


class FitnessGoal(str, Enum):
    """Fitness goal selecting a macro ratio profile."""

    WEIGHT_LOSS = "weight_loss"
    WEIGHT_GAIN = "weight_gain"
    ENDURANCE = "endurance"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"


@dataclass(frozen=True)
class MacroRatio:
    """Share of total calories per macro, in whole percent."""

    protein_pct: int
    carbs_pct: int
    fat_pct: int


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie target with macro targets in grams."""

    calories: int
    protein: int
    carbs: int
    fat: int
