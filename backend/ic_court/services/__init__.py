from .user_service import UserService
from .dispute_service import DisputeService
from .party_service import PartyService
from .hearing_service import HearingService

__all__ = ["UserService", "DisputeService", "PartyService", "HearingService"]
