from sqlalchemy.future import select
from ic_court.core.exceptions import NotFoundError
from ic_court.core.security import ActorContext, CREATE_HEARING, UPDATE_HEARING, ensure_allowed
from ic_court.db.base import utcnow
from ic_court.models.hearing import Hearing
from ic_court.schemas.hearing import HearingCreate, HearingUpdate
from ic_court.services.base import BaseService
from ic_court.services.dispute_service import DisputeService
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class HearingService(BaseService):
    entity = "Hearing"

    async def create_hearing(self, data: HearingCreate, actor: ActorContext) -> Hearing:
        """Schedule (or record) a hearing for an existing dispute."""
        ensure_allowed(actor, CREATE_HEARING)

        disputes = DisputeService(self.db)
        if not await disputes.dispute_exists(data.dispute_id):
            logger.warning("Hearing creation rejected: dispute %s not found", data.dispute_id)
            raise NotFoundError("Dispute", data.dispute_id)

        hearing = Hearing(**data.model_dump(), created_by=actor.actor_id)
        self.db.add(hearing)

        async def missing_reference():
            # Either the dispute vanished after the check or the actor has no user row
            if not await disputes.dispute_exists(data.dispute_id):
                return NotFoundError("Dispute", data.dispute_id)
            return NotFoundError("User", actor.actor_id)

        await self._commit("creation", missing_reference=missing_reference)
        await self.db.refresh(hearing)
        logger.info("Created hearing %s for dispute %s", hearing.id, hearing.dispute_id)
        return hearing

    async def update_hearing(self, data: HearingUpdate, actor: ActorContext) -> Hearing:
        """
        Record session outcomes or reschedule.
        Fields sent as null are cleared, omitted fields are left as they are.
        """
        ensure_allowed(actor, UPDATE_HEARING)

        hearing = await self.get_hearing(data.id)
        if not hearing:
            logger.warning("Hearing %s not found for update", data.id)
            raise NotFoundError(self.entity, data.id)

        for key, value in data.changes().items():
            setattr(hearing, key, value)
        hearing.updated_at = utcnow()

        await self._commit("update")
        await self.db.refresh(hearing)
        logger.info("Updated hearing %s", hearing.id)
        return hearing

    async def get_hearing(self, hearing_id: int) -> Optional[Hearing]:
        result = await self.db.execute(select(Hearing).where(Hearing.id == hearing_id))
        return result.scalars().first()

    async def get_hearings_by_dispute(self, dispute_id: int) -> List[Hearing]:
        """Hearings of a dispute, earliest first. Unknown disputes yield an empty list."""
        result = await self.db.execute(
            select(Hearing)
            .where(Hearing.dispute_id == dispute_id)
            .order_by(Hearing.hearing_date, Hearing.id)
        )
        return result.scalars().all()
