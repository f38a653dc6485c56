from fastapi import APIRouter
from clanboard.api.routes import leaderboards

router = APIRouter()
router.include_router(leaderboards.router, prefix="/leaderboards", tags=["leaderboards"])
