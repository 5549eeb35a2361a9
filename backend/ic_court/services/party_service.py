from sqlalchemy.future import select
from ic_court.core.exceptions import NotFoundError
from ic_court.core.security import ActorContext, CREATE_PARTY, ensure_allowed
from ic_court.models.party import Party
from ic_court.schemas.party import PartyCreate
from ic_court.services.base import BaseService
from ic_court.services.dispute_service import DisputeService
from typing import List
import logging

logger = logging.getLogger(__name__)


class PartyService(BaseService):
    entity = "Party"

    async def create_party(self, data: PartyCreate, actor: ActorContext) -> Party:
        """Add a party to an existing dispute."""
        ensure_allowed(actor, CREATE_PARTY)

        if not await DisputeService(self.db).dispute_exists(data.dispute_id):
            logger.warning("Party creation rejected: dispute %s not found", data.dispute_id)
            raise NotFoundError("Dispute", data.dispute_id)

        party = Party(**data.model_dump())
        self.db.add(party)

        async def missing_dispute():
            return NotFoundError("Dispute", data.dispute_id)

        await self._commit("creation", missing_reference=missing_dispute)
        await self.db.refresh(party)
        logger.info("Created party %s for dispute %s", party.id, party.dispute_id)
        return party

    async def get_parties_by_dispute(self, dispute_id: int) -> List[Party]:
        """All parties of a dispute in insertion order; empty for an unknown dispute."""
        result = await self.db.execute(
            select(Party).where(Party.dispute_id == dispute_id).order_by(Party.id)
        )
        return result.scalars().all()
