import os
import tempfile

# must run before anything imports dsmovie.config.environment
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "30")
os.environ["USE_SQLITE"] = "true"
os.environ["SQLITE_PATH"] = ":memory:"
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "dsmovie-test-logs"))

import pytest

from dsmovie.domain.models import Movie, Role, User
from fakes import (
    FakeUserUtil,
    InMemoryMovieRepository,
    InMemoryScoreRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository
)


@pytest.fixture
def client_user():
    """A user holding only the client role."""
    return User(
        id=1,
        name="Maria Brown",
        username="maria@gmail.com",
        password="$2b$12$hashed",
        roles={Role(id=1, authority="ROLE_CLIENT")}
    )


@pytest.fixture
def admin_user():
    """A user holding both roles."""
    return User(
        id=2,
        name="Alex Green",
        username="alex@gmail.com",
        password="$2b$12$hashed",
        roles={Role(id=1, authority="ROLE_CLIENT"), Role(id=2, authority="ROLE_ADMIN")}
    )


@pytest.fixture
def movie():
    return Movie(
        id=1,
        title="Test Movie",
        image="https://www.themoviedb.org/t/p/w533_and_h300_bestv2/jBJWaqoSCiARWtfV0GlqHrcdidd.jpg",
        score_sum=13.5,
        count=3
    )


@pytest.fixture
def score_repo():
    return InMemoryScoreRepository()


@pytest.fixture
def movie_repo(score_repo):
    return InMemoryMovieRepository(score_repository=score_repo)


@pytest.fixture
def user_repo(client_user, admin_user):
    return InMemoryUserRepository([client_user, admin_user])


@pytest.fixture
def transaction():
    return InMemoryTransactionManager()


@pytest.fixture
def user_util():
    return FakeUserUtil("maria@gmail.com")
