from fastapi import APIRouter, Depends

from dsmovie.auth.dependencies import get_current_user
from dsmovie.domain.dto import UserDTO
from dsmovie.domain.models import User


router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={404: {"description": "Not found"}}
)

@router.get("/me", response_model=UserDTO)
def read_user_me(current_user: User = Depends(get_current_user)):
    return UserDTO.from_user(current_user)
