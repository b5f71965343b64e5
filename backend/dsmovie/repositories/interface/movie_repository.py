from abc import ABC, abstractmethod
from typing import Optional

from dsmovie.domain.dto import MoviePage, PageRequest
from dsmovie.domain.models import Movie


class MovieRepository(ABC):
    @abstractmethod
    def find_by_id(self, movie_id: int, for_update: bool = False) -> Optional["Movie"]:
        pass

    @abstractmethod
    def exists_by_id(self, movie_id: int) -> bool:
        pass

    @abstractmethod
    def get_reference_by_id(self, movie_id: int) -> "Movie":
        """Load a movie the caller expects to exist.

        Raises EntityNotFoundException instead of returning None.
        """
        pass

    @abstractmethod
    def save(self, movie: Movie) -> "Movie":
        pass

    @abstractmethod
    def delete_by_id(self, movie_id: int) -> None:
        """Raises IntegrityViolationException when scores still reference the movie."""
        pass

    @abstractmethod
    def search_by_title(self, title: Optional[str], page_request: PageRequest) -> "MoviePage":
        pass
