from .user import UserCreate, UserResponse
from .dispute import DisputeCreate, DisputeUpdate, DisputeResponse, DisputeIdQuery, DisputeChildrenQuery
from .party import PartyCreate, PartyResponse
from .hearing import HearingCreate, HearingUpdate, HearingResponse

__all__ = [
    "UserCreate",
    "UserResponse",
    "DisputeCreate",
    "DisputeUpdate",
    "DisputeResponse",
    "DisputeIdQuery",
    "DisputeChildrenQuery",
    "PartyCreate",
    "PartyResponse",
    "HearingCreate",
    "HearingUpdate",
    "HearingResponse",
]
