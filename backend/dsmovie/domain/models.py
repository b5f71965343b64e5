from datetime import datetime
from typing import List, Optional, Set


class Movie:
    def __init__(
        self,
        title: str,
        image: str,
        score_sum: float = 0.0,
        count: int = 0,
        id: Optional[int] = None
    ):
        self.title = title
        self.image = image
        self.score_sum = score_sum
        self.count = count
        self.id = id

    @property
    def score(self) -> float:
        """Average of all scores received, 0.0 while the movie has none."""
        if self.count == 0:
            return 0.0
        return self.score_sum / self.count

    def add_score(self, value: float) -> None:
        self.score_sum += value
        self.count += 1


class Score:
    def __init__(
        self,
        movie_id: int,
        user_id: int,
        value: float,
        id: Optional[int] = None,
        timestamp: datetime = None
    ):
        self.movie_id = movie_id
        self.user_id = user_id
        self.value = value
        self.id = id
        self.timestamp = timestamp


class Role:
    def __init__(self, authority: str, id: Optional[int] = None):
        self.authority = authority
        self.id = id

    def __eq__(self, other):
        return isinstance(other, Role) and self.authority == other.authority

    def __hash__(self):
        return hash(self.authority)

    def __repr__(self):
        return f"Role({self.authority!r})"


class User:
    def __init__(
        self,
        username: str,
        password: str,
        name: Optional[str] = None,
        id: Optional[int] = None,
        roles: Optional[Set[Role]] = None
    ):
        self.username = username
        self.password = password
        self.name = name
        self.id = id
        self.roles = roles if roles is not None else set()

    def add_role(self, role: Role) -> None:
        self.roles.add(role)

    def has_role(self, authority: str) -> bool:
        return any(role.authority == authority for role in self.roles)

    @property
    def authorities(self) -> List[str]:
        return sorted(role.authority for role in self.roles)


class UserDetailsProjection:
    """One row of the user/role join: a user appears once per granted role."""

    def __init__(self, username: str, password: str, role_id: int, authority: str):
        self.username = username
        self.password = password
        self.role_id = role_id
        self.authority = authority
