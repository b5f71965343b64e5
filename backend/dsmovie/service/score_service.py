import logging
from datetime import datetime

from dsmovie.domain.dto import MovieResponse, ScoreDTO
from dsmovie.domain.models import Score
from dsmovie.repositories import MovieRepository, ScoreRepository, TransactionManager
from dsmovie.exceptions.service import ResourceNotFoundException
from dsmovie.service.user_service import UserService

logger = logging.getLogger(__name__)


class ScoreService:
    def __init__(
        self,
        score_repository: ScoreRepository,
        movie_repository: MovieRepository,
        user_service: UserService,
        transaction: TransactionManager
    ):
        self.score_repository = score_repository
        self.movie_repository = movie_repository
        self.user_service = user_service
        self.transaction = transaction

    def save_score(self, dto: ScoreDTO) -> MovieResponse:
        """Record the logged user's score and return the movie with its new average.

        Every call counts: a user scoring the same movie twice adds two
        entries to the aggregate.
        """
        with self.transaction.atomic():
            user = self.user_service.authenticated()

            movie = self.movie_repository.find_by_id(dto.movie_id, for_update=True)
            if movie is None:
                raise ResourceNotFoundException("Resource not found")

            movie.add_score(dto.score)
            movie = self.movie_repository.save(movie)

            self.score_repository.save(Score(
                movie_id=movie.id,
                user_id=user.id,
                value=dto.score,
                timestamp=datetime.now()
            ))

        logger.info(f"User {user.username} scored movie {movie.id} with {dto.score}, new average {movie.score:.2f}")
        return MovieResponse.from_movie(movie)
