from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from ic_court.models.enums import DisputeStatus, DisputeType
from ic_court.schemas.base import PartialUpdate, UTCDatetime

class DisputeBase(BaseModel):
    dispute_number: str = Field(min_length=1)
    dispute_type: DisputeType
    registration_date: UTCDatetime
    description: Optional[str] = None

class DisputeCreate(DisputeBase):
    status: DisputeStatus = DisputeStatus.NEW

class DisputeResponse(DisputeBase):
    id: int
    status: DisputeStatus
    created_by: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class DisputeUpdate(PartialUpdate):
    dispute_number: Optional[str] = Field(default=None, min_length=1)
    dispute_type: Optional[DisputeType] = None
    registration_date: Optional[UTCDatetime] = None
    description: Optional[str] = None
    status: Optional[DisputeStatus] = None

    non_nullable = frozenset({"dispute_number", "dispute_type", "registration_date", "status"})

class DisputeIdQuery(BaseModel):
    id: int

class DisputeChildrenQuery(BaseModel):
    dispute_id: int
