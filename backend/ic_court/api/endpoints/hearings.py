from typing import Any, List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from ic_court.api import deps
from ic_court.core.security import ActorContext
from ic_court.schemas.dispute import DisputeChildrenQuery
from ic_court.schemas.hearing import HearingCreate, HearingResponse, HearingUpdate
from ic_court.services.hearing_service import HearingService
from ic_court.db.session import get_db

router = APIRouter()

@router.post("/createHearing", response_model=HearingResponse)
async def create_hearing(
    hearing_in: HearingCreate,
    actor: ActorContext = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = HearingService(db)
    return await service.create_hearing(hearing_in, actor)

@router.get("/getHearingsByDispute", response_model=List[HearingResponse])
async def read_hearings(
    query: DisputeChildrenQuery = Depends(),
    db: AsyncSession = Depends(get_db),
) -> Any:
    """Hearings of a dispute in chronological order."""
    service = HearingService(db)
    return await service.get_hearings_by_dispute(query.dispute_id)

@router.post("/updateHearing", response_model=HearingResponse)
async def update_hearing(
    hearing_in: HearingUpdate,
    actor: ActorContext = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = HearingService(db)
    return await service.update_hearing(hearing_in, actor)
