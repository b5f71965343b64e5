from datetime import datetime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List

from dsmovie.db.models import ScoreORM
from dsmovie.domain.models import Score
from dsmovie.repositories.interface.score_repository import ScoreRepository
from dsmovie.exceptions.repository import (
    IntegrityViolationException,
    InvalidEntityDataException,
    RepositoryOperationException
)


class SQLAlchemyScoreRepo(ScoreRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_domain(self, score_orm: ScoreORM) -> Score:
        try:
            return Score(
                id=score_orm.id,
                movie_id=score_orm.movie_id,
                user_id=score_orm.user_id,
                value=score_orm.value,
                timestamp=score_orm.timestamp
            )
        except Exception as e:
            raise InvalidEntityDataException("Score", f"Failed to convert score data: {str(e)}")

    def _to_orm(self, score: Score) -> ScoreORM:
        return ScoreORM(
            id=score.id,
            movie_id=score.movie_id,
            user_id=score.user_id,
            value=score.value,
            timestamp=score.timestamp or datetime.now()
        )

    def save(self, score: Score) -> Score:
        try:
            score_orm = self._to_orm(score)
            self.session.add(score_orm)
            self.session.flush()
            return self._to_domain(score_orm)
        except IntegrityError as e:
            raise IntegrityViolationException(f"Score references a missing movie or user: {str(e.orig)}")
        except InvalidEntityDataException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to save score: {str(e)}")

    def find_by_movie_id(self, movie_id: int) -> List[Score]:
        try:
            scores_orm = self.session.query(ScoreORM).filter(
                ScoreORM.movie_id == movie_id
            ).order_by(ScoreORM.id).all()
            return [self._to_domain(s) for s in scores_orm]
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get movie scores: {str(e)}")
