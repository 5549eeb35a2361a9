from fastapi import APIRouter

router = APIRouter()

from ic_court.api.endpoints import users, disputes, parties, hearings

router.include_router(users.router, tags=["users"])
router.include_router(disputes.router, tags=["disputes"])
router.include_router(parties.router, tags=["parties"])
router.include_router(hearings.router, tags=["hearings"])
