import logging
import math
from typing import Any

import httpx

from ..errors import RemoteEstimationError
from ..schemas import ActivityRequest, CommuteRequest, ElectricityRequest, FoodRequest
from ..settings import Settings
from .factors import CLIMATIQ_ACTIVITY_IDS

logger = logging.getLogger(__name__)


def build_parameters(request: ActivityRequest) -> dict[str, Any]:
    if isinstance(request, CommuteRequest):
        return {"distance": request.distance, "distance_unit": request.distance_unit}
    if isinstance(request, ElectricityRequest):
        return {"energy": request.energy, "energy_unit": request.energy_unit}
    if isinstance(request, FoodRequest):
        return {"weight": request.weight, "weight_unit": request.weight_unit}
    raise TypeError(f"Unsupported activity request: {type(request).__name__}")


def parse_estimate(payload: Any) -> tuple[float, str]:
    if not isinstance(payload, dict):
        raise RemoteEstimationError("Remote response is not a JSON object")

    raw = payload.get("co2e")
    if isinstance(raw, bool):
        raise RemoteEstimationError("Remote response has a non-numeric 'co2e'")
    try:
        co2e = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise RemoteEstimationError("Remote response missing numeric 'co2e'") from None

    if not math.isfinite(co2e) or co2e < 0:
        raise RemoteEstimationError(f"Remote provider returned an unusable co2e: {raw!r}")

    unit = payload.get("co2e_unit") or "kg"
    return co2e, str(unit)


class ClimatiqProvider:
    name = "climatiq"

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://api.climatiq.io",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClimatiqProvider":
        return cls(
            api_key=settings.climatiq_api_key,
            base_url=settings.climatiq_base_url,
            timeout=settings.remote_timeout_seconds,
        )

    async def estimate(self, key: str, request: ActivityRequest) -> tuple[float, str]:
        if not self.api_key:
            raise RemoteEstimationError("CLIMATIQ_API_KEY is not configured")

        body = {
            "emission_factor": {"id": CLIMATIQ_ACTIVITY_IDS[key]},
            "parameters": build_parameters(request),
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(f"{self.base_url}/estimate", json=body, headers=headers)
        except httpx.HTTPError as exc:
            raise RemoteEstimationError(f"Failed to contact Climatiq: {exc}") from exc

        if response.status_code >= 400:
            raise RemoteEstimationError(
                f"Climatiq returned HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise RemoteEstimationError("Climatiq returned invalid JSON") from exc

        co2e, unit = parse_estimate(payload)
        logger.debug("Climatiq estimate for %s: %s %s", key, co2e, unit)
        return co2e, unit
