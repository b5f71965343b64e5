from fastapi import Depends

from dsmovie.domain.models import User
from dsmovie.exceptions.auth import ForbiddenException
from dsmovie.service.dependencies import get_user_service
from dsmovie.service.user_service import UserService


def get_current_user(user_service: UserService = Depends(get_user_service)) -> User:
    return user_service.authenticated()


def require_roles(*authorities: str):
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if not any(current_user.has_role(authority) for authority in authorities):
            raise ForbiddenException(f"Access requires one of: {', '.join(authorities)}")
        return current_user

    return role_checker
