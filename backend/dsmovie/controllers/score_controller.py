from fastapi import APIRouter, Depends

from dsmovie.auth.dependencies import require_roles
from dsmovie.domain.dto import MovieResponse, ScoreDTO
from dsmovie.service.dependencies import get_score_service
from dsmovie.service.score_service import ScoreService

router = APIRouter(
    prefix="/scores",
    tags=["Scores"],
    responses={404: {"description": "Not found"}}
)


@router.put("", response_model=MovieResponse,
            dependencies=[Depends(require_roles("ROLE_CLIENT", "ROLE_ADMIN"))])
def save_score(
    dto: ScoreDTO,
    score_service: ScoreService = Depends(get_score_service)
):
    return score_service.save_score(dto)
