from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime
from ic_court.models.enums import UserRole

class UserBase(BaseModel):
    username: str = Field(min_length=3)
    email: EmailStr
    full_name: str = Field(min_length=1)
    role: UserRole
    phone: Optional[str] = None

class UserCreate(UserBase):
    password: str = Field(min_length=6)

class UserResponse(BaseModel):
    """Public view of a user; the credential never leaves the service layer."""
    id: int
    username: str
    email: str
    full_name: str
    role: UserRole
    phone: Optional[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
