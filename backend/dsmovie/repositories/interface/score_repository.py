from abc import ABC, abstractmethod
from typing import List

from dsmovie.domain.models import Score

class ScoreRepository(ABC):
    @abstractmethod
    def save(self, score: Score) -> "Score":
        pass

    @abstractmethod
    def find_by_movie_id(self, movie_id: int) -> List["Score"]:
        pass
