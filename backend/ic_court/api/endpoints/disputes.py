from typing import Any, List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from ic_court.api import deps
from ic_court.core.security import ActorContext
from ic_court.schemas.dispute import DisputeCreate, DisputeResponse, DisputeUpdate, DisputeIdQuery
from ic_court.services.dispute_service import DisputeService
from ic_court.db.session import get_db

router = APIRouter()

@router.post("/createDispute", response_model=DisputeResponse)
async def create_dispute(
    dispute_in: DisputeCreate,
    actor: ActorContext = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = DisputeService(db)
    return await service.create_dispute(dispute_in, actor)

@router.get("/getDisputes", response_model=List[DisputeResponse])
async def read_disputes(
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = DisputeService(db)
    return await service.get_disputes()

@router.get("/getDisputeById", response_model=Optional[DisputeResponse])
async def read_dispute(
    query: DisputeIdQuery = Depends(),
    db: AsyncSession = Depends(get_db),
) -> Any:
    """Returns null rather than 404 when the dispute does not exist."""
    service = DisputeService(db)
    return await service.get_dispute(query.id)

@router.post("/updateDispute", response_model=DisputeResponse)
async def update_dispute(
    dispute_in: DisputeUpdate,
    actor: ActorContext = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = DisputeService(db)
    return await service.update_dispute(dispute_in, actor)
