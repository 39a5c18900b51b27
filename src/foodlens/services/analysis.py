"""Food image analysis using multimodal LLMs."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from foodlens.domain.analysis import AnalysisError, AnalysisOutcome
from foodlens.services.extraction import extract

ANALYSIS_PROMPT = """\
Analyze this food image and return result in per 100 gram and return ONLY a JSON object:
{
  "name": "Dish Name",
  "cuisine": "Cuisine",
  "ingredients": "List of main items",
  "nutritionalInfo": { "calories": "...", "protein": "...", "carbs": "...", "fat": "..." },
  "details": { "prepTime": "...", "servingSize": "...", "difficulty": "...", "taste": "..." }
}"""

_logger = logging.getLogger(__name__)


class AnalysisClient(Protocol):
    """Interface for a multimodal model returning free text."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        prompt: str,
    ) -> str:
        """Return the model's text response for an image and prompt."""


@dataclass
class FoodAnalysisService:
    """Service that sends food images to a model and parses the reply."""

    client: AnalysisClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze(self, image_bytes: bytes) -> AnalysisOutcome:
        """Analyze a food image.

        Only a failed model call yields an AnalysisError; unusable replies
        become the fallback record.
        """
        data_url = _to_data_url(image_bytes)
        try:
            raw = await self.client.generate(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                image_data_url=data_url,
                prompt=ANALYSIS_PROMPT,
            )
        except Exception as exc:
            _logger.exception("Food analysis request failed")
            return AnalysisError(error=f"Failed to analyze image: {exc}")
        result = extract(raw)
        if result.is_fallback:
            _logger.warning("Model reply had no usable JSON (%s chars)", len(raw or ""))
        return result


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
