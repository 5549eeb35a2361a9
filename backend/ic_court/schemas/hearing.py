import json
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union
from datetime import datetime
from ic_court.schemas.base import PartialUpdate, UTCDatetime


def _serialize_attendees(v: Union[str, List[str], None]) -> Optional[str]:
    # Stored as an opaque text blob; a list of names is accepted and kept as JSON.
    if isinstance(v, list):
        return json.dumps(v)
    return v


class HearingCreate(BaseModel):
    dispute_id: int
    hearing_date: UTCDatetime
    agenda: str = Field(min_length=1)
    result: Optional[str] = None
    decision: Optional[str] = None
    attendees: Optional[Union[str, List[str]]] = None

    @field_validator("attendees")
    @classmethod
    def attendees_as_text(cls, v):
        return _serialize_attendees(v)

class HearingResponse(BaseModel):
    id: int
    dispute_id: int
    hearing_date: UTCDatetime
    agenda: str
    result: Optional[str]
    decision: Optional[str]
    attendees: Optional[str]
    created_by: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class HearingUpdate(PartialUpdate):
    hearing_date: Optional[UTCDatetime] = None
    agenda: Optional[str] = Field(default=None, min_length=1)
    result: Optional[str] = None
    decision: Optional[str] = None
    attendees: Optional[Union[str, List[str]]] = None

    non_nullable = frozenset({"hearing_date", "agenda"})

    @field_validator("attendees")
    @classmethod
    def attendees_as_text(cls, v):
        return _serialize_attendees(v)
