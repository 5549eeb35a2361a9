from sqlalchemy.future import select
from ic_court.core.exceptions import NotFoundError
from ic_court.core.security import ActorContext, CREATE_DISPUTE, UPDATE_DISPUTE, ensure_allowed
from ic_court.db.base import utcnow
from ic_court.models.dispute import Dispute
from ic_court.schemas.dispute import DisputeCreate, DisputeUpdate
from ic_court.services.base import BaseService
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class DisputeService(BaseService):
    entity = "Dispute"
    unique_columns = ("dispute_number",)

    async def create_dispute(self, data: DisputeCreate, actor: ActorContext) -> Dispute:
        """Register a dispute on behalf of the acting user."""
        ensure_allowed(actor, CREATE_DISPUTE)

        dispute = Dispute(**data.model_dump(), created_by=actor.actor_id)
        self.db.add(dispute)

        async def missing_creator():
            return NotFoundError("User", actor.actor_id)

        await self._commit("creation", missing_reference=missing_creator)
        await self.db.refresh(dispute)
        logger.info("Created dispute %s (%s)", dispute.id, dispute.dispute_number)
        return dispute

    async def update_dispute(self, data: DisputeUpdate, actor: ActorContext) -> Dispute:
        """
        Apply a partial update.
        Only the fields present in the payload change; status may move to any
        value regardless of its current one.
        """
        ensure_allowed(actor, UPDATE_DISPUTE)

        dispute = await self.get_dispute(data.id)
        if not dispute:
            logger.warning("Dispute %s not found for update", data.id)
            raise NotFoundError(self.entity, data.id)

        for key, value in data.changes().items():
            setattr(dispute, key, value)
        dispute.updated_at = utcnow()

        await self._commit("update")
        await self.db.refresh(dispute)
        logger.info("Updated dispute %s", dispute.id)
        return dispute

    async def get_dispute(self, dispute_id: int) -> Optional[Dispute]:
        """Get dispute by ID, or None when there is no such dispute."""
        result = await self.db.execute(select(Dispute).where(Dispute.id == dispute_id))
        return result.scalars().first()

    async def get_disputes(self) -> List[Dispute]:
        result = await self.db.execute(select(Dispute))
        return result.scalars().all()

    async def dispute_exists(self, dispute_id: int) -> bool:
        result = await self.db.execute(select(Dispute.id).where(Dispute.id == dispute_id))
        return result.scalar_one_or_none() is not None
