import asyncio
import logging
import math
from typing import Protocol

from ..schemas import ActivityRequest, EmissionEstimate
from ..settings import Settings, settings
from .climatiq import ClimatiqProvider
from .factors import canonical_key, fallback_co2e, quantity_of
from .gemini_co2 import GeminiProvider

logger = logging.getLogger(__name__)


class RemoteProvider(Protocol):
    name: str

    async def estimate(self, key: str, request: ActivityRequest) -> tuple[float, str]:
        ...


def fallback_estimate(request: ActivityRequest) -> EmissionEstimate:
    """Offline estimate: quantity times the factor for the request's canonical key."""
    key = canonical_key(request)
    return EmissionEstimate(
        co2e=fallback_co2e(key, quantity_of(request)),
        co2e_unit="kg",
        source="fallback",
    )


class Estimator:
    """Single entry point for emission estimates.

    Tries the configured remote provider first, bounded by ``timeout`` seconds.
    Any failure there (missing credentials, transport error, bad status,
    malformed or unusable payload, timeout) is logged and answered with the
    deterministic fallback. ``provider=None`` disables the remote call.
    """

    def __init__(self, provider: RemoteProvider | None = None, timeout: float = 10.0):
        self.provider = provider
        self.timeout = timeout

    async def estimate(self, request: ActivityRequest) -> EmissionEstimate:
        if self.provider is None:
            return fallback_estimate(request)

        key = canonical_key(request)
        try:
            co2e, unit = await asyncio.wait_for(
                self.provider.estimate(key, request), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            logger.warning(
                "%s estimate for %s timed out after %ss, using fallback",
                self.provider.name, key, self.timeout,
            )
            return fallback_estimate(request)
        except Exception as exc:
            logger.warning("%s estimate for %s failed, using fallback: %s", self.provider.name, key, exc)
            return fallback_estimate(request)

        if not math.isfinite(co2e) or co2e < 0:
            logger.warning("%s returned unusable co2e %r for %s, using fallback", self.provider.name, co2e, key)
            return fallback_estimate(request)

        return EmissionEstimate(co2e=co2e, co2e_unit=unit or "kg", source="remote")


def build_estimator(config: Settings = settings) -> Estimator:
    if config.estimator_provider == "climatiq":
        provider: RemoteProvider | None = ClimatiqProvider.from_settings(config)
    elif config.estimator_provider == "gemini":
        provider = GeminiProvider.from_settings(config)
    else:
        provider = None
    return Estimator(provider=provider, timeout=config.remote_timeout_seconds)


_estimator: Estimator | None = None


def get_estimator() -> Estimator:
    global _estimator
    if _estimator is None:
        _estimator = build_estimator(settings)
    return _estimator
