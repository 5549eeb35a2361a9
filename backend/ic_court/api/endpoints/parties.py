from typing import Any, List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from ic_court.api import deps
from ic_court.core.security import ActorContext
from ic_court.schemas.dispute import DisputeChildrenQuery
from ic_court.schemas.party import PartyCreate, PartyResponse
from ic_court.services.party_service import PartyService
from ic_court.db.session import get_db

router = APIRouter()

@router.post("/createParty", response_model=PartyResponse)
async def create_party(
    party_in: PartyCreate,
    actor: ActorContext = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = PartyService(db)
    return await service.create_party(party_in, actor)

@router.get("/getPartiesByDispute", response_model=List[PartyResponse])
async def read_parties(
    query: DisputeChildrenQuery = Depends(),
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = PartyService(db)
    return await service.get_parties_by_dispute(query.dispute_id)
