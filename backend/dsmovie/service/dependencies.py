from fastapi import Depends
from sqlalchemy.orm import Session

from dsmovie.auth.user_util import TokenUserUtil, get_user_util
from dsmovie.db.database import get_db
from dsmovie.repositories import (
    SQLAlchemyMovieRepo,
    SQLAlchemyScoreRepo,
    SQLAlchemyUserRepo,
    SQLAlchemyTransactionManager
)
from dsmovie.service.auth_service import AuthService
from dsmovie.service.movie_service import MovieService
from dsmovie.service.score_service import ScoreService
from dsmovie.service.user_service import UserService

def get_user_service(
        db: Session = Depends(get_db),
        user_util: TokenUserUtil = Depends(get_user_util)) -> UserService:
    return UserService(SQLAlchemyUserRepo(db), user_util)

def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    # login has no bearer token yet
    return AuthService(UserService(SQLAlchemyUserRepo(db), TokenUserUtil(None)))

def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService(SQLAlchemyMovieRepo(db), SQLAlchemyTransactionManager(db))

def get_score_service(
        db: Session = Depends(get_db),
        user_service: UserService = Depends(get_user_service)) -> ScoreService:
    return ScoreService(
        score_repository=SQLAlchemyScoreRepo(db),
        movie_repository=SQLAlchemyMovieRepo(db),
        user_service=user_service,
        transaction=SQLAlchemyTransactionManager(db)
    )
