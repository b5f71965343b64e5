import logging
from typing import Optional

from dsmovie.domain.dto import MovieDTO, MoviePage, MovieResponse, PageRequest
from dsmovie.domain.models import Movie
from dsmovie.repositories import MovieRepository, TransactionManager
from dsmovie.exceptions.repository import EntityNotFoundException, IntegrityViolationException
from dsmovie.exceptions.service import DatabaseException, ResourceNotFoundException

logger = logging.getLogger(__name__)


class MovieService:
    def __init__(self, movie_repository: MovieRepository, transaction: TransactionManager):
        self.movie_repository = movie_repository
        self.transaction = transaction

    def find_all(self, title: Optional[str], page_request: PageRequest) -> MoviePage:
        return self.movie_repository.search_by_title(title, page_request)

    def find_by_id(self, movie_id: int) -> MovieResponse:
        movie = self.movie_repository.find_by_id(movie_id)
        if movie is None:
            raise ResourceNotFoundException("Resource not found")
        return MovieResponse.from_movie(movie)

    def insert(self, dto: MovieDTO) -> MovieResponse:
        # aggregate always starts empty, whatever the client sent
        movie = Movie(title=dto.title, image=dto.image)
        with self.transaction.atomic():
            movie = self.movie_repository.save(movie)

        logger.info(f"Inserted movie {movie.id} ({movie.title})")
        return MovieResponse.from_movie(movie)

    def update(self, movie_id: int, dto: MovieDTO) -> MovieResponse:
        with self.transaction.atomic():
            try:
                movie = self.movie_repository.get_reference_by_id(movie_id)
            except EntityNotFoundException as e:
                raise ResourceNotFoundException("Resource not found") from e

            movie.title = dto.title
            movie.image = dto.image
            movie = self.movie_repository.save(movie)

        logger.info(f"Updated movie {movie_id}")
        return MovieResponse.from_movie(movie)

    def delete(self, movie_id: int) -> None:
        if not self.movie_repository.exists_by_id(movie_id):
            raise ResourceNotFoundException("Resource not found")

        try:
            with self.transaction.atomic():
                self.movie_repository.delete_by_id(movie_id)
        except IntegrityViolationException as e:
            logger.warning(f"Refused to delete movie {movie_id}: {str(e)}")
            raise DatabaseException("Referential integrity failure") from e

        logger.info(f"Deleted movie {movie_id}")
