from typing import List

from pydantic import BaseModel, Field

from ..schemas import ActivityRecord


class AggregateRequest(BaseModel):
    records: List[ActivityRecord] = Field(
        default_factory=list, description="The user's stored activity records"
    )
