"""Recovery of structured food records from raw model output."""

import json
import logging

from pydantic import ValidationError

from foodlens.domain.analysis import FoodAnalysisResult, FoodDetails, NutritionalInfo

FALLBACK_NAME = "Food Item"
FALLBACK_CUISINE = "Unable to determine cuisine"

_logger = logging.getLogger(__name__)


def extract(raw_text: str) -> FoodAnalysisResult:
    """Parse the JSON object embedded in model output.

    The model is asked for a single JSON object but may wrap it in prose or
    code fences, truncate it, or refuse. Anything that does not yield a
    valid record produces the fallback record instead; this never raises.
    """
    text = raw_text if isinstance(raw_text, str) else ""
    candidate = _find_json_object(text)
    if candidate is None:
        _logger.debug("No JSON object in model output; using fallback record")
        return fallback_result(text)
    try:
        payload = json.loads(candidate)
    except (ValueError, RecursionError):
        _logger.debug("Model output JSON did not parse; using fallback record")
        return fallback_result(text)
    if not isinstance(payload, dict):
        return fallback_result(text)
    try:
        return FoodAnalysisResult.model_validate({**payload, "source": "model"})
    except ValidationError as exc:
        _logger.debug("Model output failed validation: %s", exc.error_count())
        return fallback_result(text)


def fallback_result(raw_text: str) -> FoodAnalysisResult:
    """Build the synthetic record that carries the raw text as ingredients."""
    return FoodAnalysisResult(
        name=FALLBACK_NAME,
        cuisine=FALLBACK_CUISINE,
        ingredients=raw_text,
        nutritional_info=NutritionalInfo(),
        details=FoodDetails(),
        source="fallback",
    )


def _find_json_object(text: str) -> str | None:
    """Return the span from the first "{" to the last "}", if any."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]
