from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict


class OffsetProject(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Union[int, str]
    name: str
    description: Optional[str] = None
    location: Optional[str] = None


class OffsetsResponse(BaseModel):
    success: bool = True
    projects: List[OffsetProject]
