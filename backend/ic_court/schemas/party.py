from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime
from ic_court.models.enums import PartyRole, PartyType

class PartyCreate(BaseModel):
    name: str = Field(min_length=1)
    party_type: PartyType
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    role: PartyRole
    dispute_id: int

class PartyResponse(BaseModel):
    id: int
    name: str
    party_type: PartyType
    address: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    role: PartyRole
    dispute_id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
