import logging

import httpx
from pydantic import ValidationError

from ..models.offsets_schema import OffsetProject
from ..settings import Settings

logger = logging.getLogger(__name__)

FALLBACK_PROJECTS = [
    OffsetProject(
        id=1,
        name="Renewable Energy Project",
        description="Support clean energy initiatives",
        location="Global",
    ),
    OffsetProject(
        id=2,
        name="Reforestation Program",
        description="Plant trees to offset carbon",
        location="Global",
    ),
]


class OffsetRegistryService:
    def __init__(
        self,
        base_url: str,
        limit: int = 10,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.limit = limit
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "OffsetRegistryService":
        return cls(
            base_url=settings.offsets_base_url,
            limit=settings.offsets_limit,
            timeout=settings.remote_timeout_seconds,
        )

    async def _fetch(self) -> list[OffsetProject]:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(
                f"{self.base_url}/projects",
                params={"limit": self.limit, "status": "active"},
            )
        response.raise_for_status()

        data = response.json()
        if isinstance(data, dict):
            data = data.get("projects", data.get("results"))
        if not isinstance(data, list):
            raise ValueError("Offset registry did not return a project list")

        return [OffsetProject.model_validate(item) for item in data]

    async def list_projects(self) -> list[OffsetProject]:
        """Active offset projects, or the static list if the registry is unreachable."""
        try:
            return await self._fetch()
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            logger.warning("Offset registry unavailable, serving static projects: %s", exc)
            return list(FALLBACK_PROJECTS)
