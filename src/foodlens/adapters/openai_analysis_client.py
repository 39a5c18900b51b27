"""Food photo analysis through the OpenAI Responses API.

The model is asked for JSON but replies are treated as free text. This client
hands back whatever text the model produced; recovering a food record from it
is the extractor's job.
"""

from dataclasses import dataclass

from openai import AsyncOpenAI

from foodlens.services.analysis import AnalysisClient


@dataclass
class OpenAIAnalysisClient(AnalysisClient):
    """Sends one photo plus the analysis prompt and returns unparsed model text."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAnalysisClient":
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        image_data_url: str,
        prompt: str,
    ) -> str:
        """Return the model's reply text exactly as received.

        No structured output format is requested. An empty reply raises
        RuntimeError so the caller reports it as a failed analysis.
        """
        options: dict[str, object] = {"store": store}
        if reasoning_effort:
            options["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(
            model=model,
            input=[_photo_message(prompt, image_data_url)],
            **options,
        )
        reply = response.output_text
        if not reply:
            raise RuntimeError("OpenAI returned an empty response")
        return reply

    async def close(self) -> None:
        await self.client.close()


def _photo_message(prompt: str, image_data_url: str) -> dict[str, object]:
    return {
        "role": "user",
        "content": [
            {"type": "input_text", "text": prompt},
            {"type": "input_image", "image_url": image_data_url},
        ],
    }
