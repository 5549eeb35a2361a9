from .enums import DisputeStatus, DisputeType, PartyType, PartyRole, UserRole
from .user import User
from .dispute import Dispute
from .party import Party
from .hearing import Hearing

__all__ = [
    "User",
    "UserRole",
    "Dispute",
    "DisputeStatus",
    "DisputeType",
    "Party",
    "PartyType",
    "PartyRole",
    "Hearing",
]
