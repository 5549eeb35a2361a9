from typing import Any, List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from ic_court.api import deps
from ic_court.core.security import ActorContext
from ic_court.schemas.user import UserCreate, UserResponse
from ic_court.services.user_service import UserService
from ic_court.db.session import get_db

router = APIRouter()

@router.post("/createUser", response_model=UserResponse)
async def create_user(
    user_in: UserCreate,
    actor: ActorContext = Depends(deps.get_current_actor),
    db: AsyncSession = Depends(get_db),
) -> Any:
    service = UserService(db)
    return await service.create_user(user_in, actor)

@router.get("/getUsers", response_model=List[UserResponse])
async def read_users(
    db: AsyncSession = Depends(get_db),
) -> Any:
    """List users for the user-management tab."""
    service = UserService(db)
    return await service.get_users()
