import asyncio
import json
import logging
from typing import Any

import google.generativeai as genai  # type: ignore[import-untyped]

from ..errors import RemoteEstimationError
from ..schemas import ActivityRequest
from ..settings import Settings
from .climatiq import build_parameters, parse_estimate

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """
You are a Carbon Footprint Estimator.
You receive exactly one activity with a canonical key and its measured quantity.
Calculate a realistic carbon emission using international sources
(IPCC, FAO, DEFRA, OurWorldInData) and return ONLY valid JSON.

Key interpretation:
- car, bus, train, plane, motorcycle: passenger travel, quantity = distance.
- electricity: grid-mix electricity, quantity = energy.
- beef, chicken, pork, fish, dairy, vegetables, fruits: food, quantity = weight.

Return:
{
  "co2e": <kg_CO2e>,
  "co2e_unit": "kg"
}

No explanations. JSON only.
""".strip()


def _clean_json(text: str) -> str:
    cleaned = text.strip()

    # remove ```json and ```
    if cleaned.startswith("```"):
        cleaned = cleaned.replace("```json", "")
        cleaned = cleaned.replace("```", "").strip()

    return cleaned


def _extract_text(response: Any) -> str:
    try:
        return response.text
    except Exception as exc:
        raise RemoteEstimationError("Failed to read Gemini response text") from exc


class GeminiProvider:
    name = "gemini"

    def __init__(self, api_key: str | None, model_name: str = "gemini-2.5-flash"):
        self.api_key = api_key
        self.model_name = model_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiProvider":
        return cls(api_key=settings.gemini_api_key, model_name=settings.gemini_model)

    def _get_model(self) -> genai.GenerativeModel:
        if not self.api_key:
            raise RemoteEstimationError("GEMINI_API_KEY is not configured")

        try:
            genai.configure(api_key=self.api_key)
            return genai.GenerativeModel(
                model_name=self.model_name,
                generation_config={"response_mime_type": "application/json"},
            )
        except Exception as exc:
            raise RemoteEstimationError("Failed to initialize Gemini client") from exc

    async def estimate(self, key: str, request: ActivityRequest) -> tuple[float, str]:
        model = self._get_model()

        activity_json = json.dumps(
            {"key": key, "parameters": build_parameters(request)}, ensure_ascii=False
        )
        user_prompt = f"Input:\n{activity_json}\n\nReturn JSON only."

        try:
            response = await asyncio.to_thread(
                model.generate_content,
                [SYSTEM_PROMPT, user_prompt],
            )
        except Exception as exc:
            raise RemoteEstimationError("Failed to contact Gemini") from exc

        raw_text = _extract_text(response)
        clean = _clean_json(raw_text)

        try:
            parsed = json.loads(clean)
        except json.JSONDecodeError as exc:
            logger.debug("Gemini returned invalid JSON\nRAW:\n%s\nCLEAN:\n%s", raw_text, clean)
            raise RemoteEstimationError("Gemini returned invalid JSON") from exc

        return parse_estimate(parsed)
