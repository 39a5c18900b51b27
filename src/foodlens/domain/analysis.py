"""Models for food analysis results recovered from model output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

NOT_AVAILABLE = "N/A"

BaseUnit = Literal["per100g", "perServing"]
ResultSource = Literal["model", "fallback"]


def _coerce_text(value: object) -> object:
    """Normalize loosely typed model output into a display string."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int | float):
        return str(value)
    return value


class NutritionalInfo(BaseModel):
    """Free-text nutrition fields per base unit, e.g. "180 kcal"."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    calories: str = NOT_AVAILABLE
    protein: str = NOT_AVAILABLE
    carbs: str = NOT_AVAILABLE
    fat: str = NOT_AVAILABLE

    @field_validator("calories", "protein", "carbs", "fat", mode="before")
    @classmethod
    def _coerce_field(cls, value: object) -> object:
        return _coerce_text(value)


class FoodDetails(BaseModel):
    """Descriptive details about a dish."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    prep_time: str = Field(default=NOT_AVAILABLE, alias="prepTime")
    serving_size: str = Field(default=NOT_AVAILABLE, alias="servingSize")
    difficulty: str = NOT_AVAILABLE
    taste: str = NOT_AVAILABLE

    @field_validator("prep_time", "serving_size", "difficulty", "taste", mode="before")
    @classmethod
    def _coerce_field(cls, value: object) -> object:
        return _coerce_text(value)


class FoodAnalysisResult(BaseModel):
    """Structured description of a single analyzed food.

    Nutrition figures describe one ``base_unit`` of the food. ``source`` is
    ``"fallback"`` for the synthetic record produced when the model output
    could not be parsed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    cuisine: str = NOT_AVAILABLE
    ingredients: str = NOT_AVAILABLE
    nutritional_info: NutritionalInfo = Field(
        default_factory=NutritionalInfo, alias="nutritionalInfo"
    )
    details: FoodDetails = Field(default_factory=FoodDetails)
    base_unit: BaseUnit = Field(default="per100g", alias="baseUnit")
    source: ResultSource = "model"

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("cuisine", mode="before")
    @classmethod
    def _coerce_cuisine(cls, value: object) -> object:
        return _coerce_text(value)

    @field_validator("ingredients", mode="before")
    @classmethod
    def _coerce_ingredients(cls, value: object) -> object:
        if isinstance(value, list):
            return ", ".join(str(item) for item in value)
        return _coerce_text(value)

    @field_validator("nutritional_info", "details", mode="before")
    @classmethod
    def _coerce_section(cls, value: object) -> object:
        return {} if value is None else value

    @field_validator("base_unit", mode="before")
    @classmethod
    def _coerce_base_unit(cls, value: object) -> object:
        if value is None:
            return "per100g"
        if isinstance(value, str) and "serving" in value.lower():
            return "perServing"
        return "per100g"

    @property
    def is_fallback(self) -> bool:
        """Return True for the synthetic record built from unparseable output."""
        return self.source == "fallback"


class AnalysisError(BaseModel):
    """Failure outcome of a food analysis request."""

    model_config = ConfigDict(frozen=True)

    error: str


AnalysisOutcome = FoodAnalysisResult | AnalysisError
