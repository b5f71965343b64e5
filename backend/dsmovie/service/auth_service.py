from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt
from passlib.context import CryptContext
from dsmovie.config.environment import JWT_SECRET_KEY, JWT_ALGORITHM, JWT_ACCESS_TOKEN_EXPIRE_MINUTES
from dsmovie.domain.models import User
from dsmovie.service.user_service import UserService
from dsmovie.exceptions.auth import InvalidCredentialsException, UsernameNotFoundException

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


class AuthService:
    def __init__(self, user_service: UserService):
        self.user_service = user_service

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        to_encode = data.copy()

        # Set expiration
        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

        to_encode.update({"exp": expire})

        return jwt.encode(to_encode, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)

    def authenticate_user(self, username: str, password: str) -> tuple[User, str]:
        try:
            user = self.user_service.load_user_by_username(username)
        except UsernameNotFoundException:
            raise InvalidCredentialsException("Invalid username or password")

        if not verify_password(password, user.password):
            raise InvalidCredentialsException("Invalid username or password")

        access_token = self.create_access_token(
            data={"sub": user.username, "authorities": user.authorities}
        )
        return user, access_token
