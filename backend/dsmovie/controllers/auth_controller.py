from fastapi import APIRouter, Depends
from fastapi.security import OAuth2PasswordRequestForm

from dsmovie.domain.dto import Token
from dsmovie.service.dependencies import get_auth_service
from dsmovie.service.auth_service import AuthService

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={404: {"description": "Not found"}}
)

@router.post("/login", response_model=Token)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    auth_service: AuthService = Depends(get_auth_service)
):
    _, access_token = auth_service.authenticate_user(form_data.username, form_data.password)
    return Token(access_token=access_token, token_type="bearer")
