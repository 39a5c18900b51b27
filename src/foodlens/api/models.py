"""Pydantic models for HTTP request payloads."""

from pydantic import BaseModel, ConfigDict, Field

from foodlens.domain.analysis import FoodAnalysisResult
from foodlens.domain.targets import FitnessGoal


class AnalyzeRequest(BaseModel):
    """Food image sent as base64, optionally as a data URL."""

    image_base64: str = Field(min_length=1)


class LogMealRequest(BaseModel):
    """Analyzed food to log at a serving count."""

    result: FoodAnalysisResult
    servings: float | str | None = 1
    image_ref: str | None = None
    timezone: str | None = None


class PreferencesPayload(BaseModel):
    """Goal preferences as edited by the client."""

    model_config = ConfigDict(populate_by_name=True)

    daily_calorie_goal: str | None = Field(default=None, alias="dailyCalorieGoal")
    fitness_goal: FitnessGoal | None = Field(default=None, alias="fitnessGoal")
