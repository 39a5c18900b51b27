"""Serving-size scaling of analyzed nutrition."""

import math
import re
from decimal import Decimal

from foodlens.domain.analysis import FoodAnalysisResult
from foodlens.domain.meals import ScaledNutrition
from foodlens.services.parsing import parse_value, round_half_up

_LEADING_NUMBER = re.compile(r"\s*(\d+(?:\.\d+)?|\.\d+)", re.ASCII)


def scale(result: FoodAnalysisResult, servings: object) -> ScaledNutrition:
    """Multiply the result's macros by a serving count.

    Each field is rounded after multiplication. Invalid serving counts
    scale to zero.
    """
    factor = Decimal(str(clamp_servings(servings)))
    info = result.nutritional_info
    return ScaledNutrition(
        calories=round_half_up(parse_value(info.calories) * factor),
        protein=round_half_up(parse_value(info.protein) * factor),
        carbs=round_half_up(parse_value(info.carbs) * factor),
        fat=round_half_up(parse_value(info.fat) * factor),
    )


def clamp_servings(value: object) -> float:
    """Coerce user input to a finite, non-negative serving count.

    Text counts by its leading number, so "2 servings" is 2. Text without a
    leading number, including a leading minus sign, is 0.
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal | str):
        return 0.0
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return 0.0
        value = match.group(1)
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number
