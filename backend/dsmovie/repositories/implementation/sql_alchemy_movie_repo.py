from sqlalchemy import case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Optional

from dsmovie.db.models import MovieORM
from dsmovie.domain.dto import MoviePage, PageRequest
from dsmovie.domain.models import Movie
from dsmovie.repositories.interface.movie_repository import MovieRepository
from dsmovie.exceptions.repository import (
    EntityNotFoundException,
    IntegrityViolationException,
    InvalidEntityDataException,
    RepositoryOperationException
)


class SQLAlchemyMovieRepo(MovieRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_domain(self, movie_orm: MovieORM) -> Movie:
        try:
            return Movie(
                id=movie_orm.id,
                title=movie_orm.title,
                image=movie_orm.image,
                score_sum=movie_orm.score_sum or 0.0,
                count=movie_orm.count or 0
            )
        except Exception as e:
            raise InvalidEntityDataException("Movie", f"Failed to convert movie data: {str(e)}")

    def _to_orm(self, movie: Movie) -> MovieORM:
        return MovieORM(
            id=movie.id,
            title=movie.title,
            image=movie.image,
            score_sum=movie.score_sum,
            count=movie.count
        )

    def _sort_column(self, sort: str):
        if sort == "score":
            return case((MovieORM.count == 0, 0.0), else_=MovieORM.score_sum / MovieORM.count)
        return {
            "id": MovieORM.id,
            "title": MovieORM.title,
            "count": MovieORM.count,
        }[sort]

    def find_by_id(self, movie_id: int, for_update: bool = False) -> Optional[Movie]:
        try:
            if not isinstance(movie_id, int):
                raise RepositoryOperationException(f"Invalid movie_id type. Expected int, got {type(movie_id)}")

            query = self.session.query(MovieORM).filter(MovieORM.id == movie_id)
            if for_update:
                # row lock held until the surrounding transaction ends
                query = query.with_for_update()
            movie_orm = query.first()
            if not movie_orm:
                return None
            return self._to_domain(movie_orm)
        except (InvalidEntityDataException, RepositoryOperationException):
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get movie by ID: {str(e)}")

    def exists_by_id(self, movie_id: int) -> bool:
        try:
            return self.session.query(MovieORM.id).filter(MovieORM.id == movie_id).first() is not None
        except Exception as e:
            raise RepositoryOperationException(f"Failed to check movie existence: {str(e)}")

    def get_reference_by_id(self, movie_id: int) -> Movie:
        try:
            movie_orm = self.session.get(MovieORM, movie_id)
        except Exception as e:
            raise RepositoryOperationException(f"Failed to load movie reference: {str(e)}")
        if movie_orm is None:
            raise EntityNotFoundException(f"Movie {movie_id} not found")
        return self._to_domain(movie_orm)

    def save(self, movie: Movie) -> Movie:
        try:
            movie_orm = self.session.merge(self._to_orm(movie))
            self.session.flush()
            return self._to_domain(movie_orm)
        except IntegrityError as e:
            raise IntegrityViolationException(f"Failed to save movie: {str(e.orig)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to save movie: {str(e)}")

    def delete_by_id(self, movie_id: int) -> None:
        try:
            self.session.query(MovieORM).filter(MovieORM.id == movie_id).delete(synchronize_session="fetch")
            self.session.flush()
        except IntegrityError as e:
            raise IntegrityViolationException(f"Movie {movie_id} is still referenced: {str(e.orig)}")
        except Exception as e:
            raise RepositoryOperationException(f"Failed to delete movie: {str(e)}")

    def search_by_title(self, title: Optional[str], page_request: PageRequest) -> MoviePage:
        try:
            query = self.session.query(MovieORM)
            if title:
                query = query.filter(MovieORM.title.ilike(f"%{title}%"))

            total = query.count()

            column = self._sort_column(page_request.sort)
            ordering = column.desc() if page_request.direction == "desc" else column.asc()
            movies_orm = (
                query.order_by(ordering, MovieORM.id)
                .offset(page_request.offset)
                .limit(page_request.size)
                .all()
            )
            return MoviePage.of([self._to_domain(m) for m in movies_orm], page_request, total)
        except InvalidEntityDataException:
            raise
        except Exception as e:
            raise RepositoryOperationException(f"Failed to search movies by title: {str(e)}")
