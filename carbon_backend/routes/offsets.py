from fastapi import APIRouter, Depends

from ..models.offsets_schema import OffsetsResponse
from ..services.offsets import OffsetRegistryService
from ..settings import settings

router = APIRouter(prefix="/api", tags=["offsets"])


def get_offset_registry() -> OffsetRegistryService:
    return OffsetRegistryService.from_settings(settings)


@router.get("/offsets", response_model=OffsetsResponse)
async def list_offsets(
    registry: OffsetRegistryService = Depends(get_offset_registry),
) -> OffsetsResponse:
    return OffsetsResponse(projects=await registry.list_projects())
