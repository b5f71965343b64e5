from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from dsmovie.config.environment import JWT_SECRET_KEY, JWT_ALGORITHM
from dsmovie.domain.dto import TokenData
from dsmovie.exceptions.auth import InvalidTokenException

# missing tokens are reported by the services, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def decode_access_token(token: Optional[str]) -> TokenData:
    if not token:
        raise InvalidTokenException("Missing bearer token")

    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        raise InvalidTokenException(f"Could not validate credentials: {str(e)}")

    username = payload.get("sub")
    if username is None:
        raise InvalidTokenException("Token has no subject")

    return TokenData(username=username, authorities=payload.get("authorities", []))


class TokenUserUtil:
    """Resolves the username of the caller from the request's bearer token."""

    def __init__(self, token: Optional[str]):
        self.token = token

    def get_logged_username(self) -> str:
        return decode_access_token(self.token).username


def get_user_util(token: Optional[str] = Depends(oauth2_scheme)) -> TokenUserUtil:
    return TokenUserUtil(token)
