from abc import ABC, abstractmethod
from typing import List, Optional

from dsmovie.domain.models import User, UserDetailsProjection


class UserRepository(ABC):
    @abstractmethod
    def find_by_username(self, username: str) -> Optional["User"]:
        pass

    @abstractmethod
    def search_user_and_roles_by_username(self, username: str) -> List["UserDetailsProjection"]:
        pass
