from fastapi import APIRouter, Depends

from app.api.deps import get_battle_service
from app.core.security import AdminDep
from app.schemas.battle import RatingResetResponse
from app.services.battle_service import BattleService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[AdminDep])


@router.post("/reset-ratings", response_model=RatingResetResponse)
async def reset_ratings(
    service: BattleService = Depends(get_battle_service),
) -> RatingResetResponse:
    """Reset every song to the default rating. Vote history is kept."""
    count = await service.reset_ratings()
    return RatingResetResponse(count=count, rating=service.settings.default_rating)
