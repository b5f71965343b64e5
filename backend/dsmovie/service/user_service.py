import logging

from dsmovie.auth.user_util import TokenUserUtil
from dsmovie.domain.models import Role, User
from dsmovie.repositories import UserRepository
from dsmovie.exceptions.auth import UsernameNotFoundException

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repository: UserRepository, user_util: TokenUserUtil):
        self.user_repository = user_repository
        self.user_util = user_util

    def authenticated(self) -> User:
        try:
            username = self.user_util.get_logged_username()
        except Exception as e:
            logger.debug(f"Could not resolve logged user: {str(e)}")
            raise UsernameNotFoundException("Invalid user") from e

        user = self.user_repository.find_by_username(username)
        if user is None:
            raise UsernameNotFoundException("Invalid user")
        return user

    def load_user_by_username(self, username: str) -> User:
        rows = self.user_repository.search_user_and_roles_by_username(username)
        if not rows:
            raise UsernameNotFoundException("Email not found")

        user = User(username=rows[0].username, password=rows[0].password)
        for row in rows:
            user.add_role(Role(id=row.role_id, authority=row.authority))
        return user
