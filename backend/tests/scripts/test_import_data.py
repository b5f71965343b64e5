import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dsmovie.config import SEED_MOVIES_PATH
from dsmovie.db.models import Base, MovieORM, UserORM
from dsmovie.domain.dto import PageRequest
from dsmovie.repositories import SQLAlchemyMovieRepo, SQLAlchemyTransactionManager
from dsmovie.scripts.import_data import DEFAULT_USERS, import_movies_from_csv, import_roles_and_users
from dsmovie.service.movie_service import MovieService

IMAGE = "https://image.tmdb.org/t/p/w500/poster.jpg"


@pytest.fixture
def session_factory():
    """Empty in-memory database shared by every session of one test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def movie_service(session_factory):
    db = session_factory()
    yield MovieService(SQLAlchemyMovieRepo(db), SQLAlchemyTransactionManager(db))
    db.close()


def test_seeded_movies_can_be_paged_through(session_factory, movie_service):
    added, skipped, total = import_movies_from_csv(SEED_MOVIES_PATH, session_factory=session_factory)

    titles = []
    page = 0
    while True:
        result = movie_service.find_all(None, PageRequest(page=page, size=4))
        titles.extend(m.title for m in result.content)
        page += 1
        if page >= result.total_pages:
            break

    assert added > 0
    assert added + skipped == total
    assert len(titles) == added
    assert result.total_elements == added
    for movie_id in range(1, added + 1):
        assert movie_service.find_by_id(movie_id).id == movie_id


def test_rows_breaking_movie_rules_are_skipped(tmp_path, session_factory):
    csv_path = tmp_path / "movies.csv"
    csv_path.write_text(
        "title,image\n"
        f"The Witcher,{IMAGE}\n"
        f"Dune,{IMAGE}\n"
        "Free Guy,poster.jpg\n"
        f"Django Unchained,{IMAGE}\n"
    )

    added, skipped, total = import_movies_from_csv(csv_path, session_factory=session_factory)

    db = session_factory()
    stored = sorted(title for (title,) in db.query(MovieORM.title))
    db.close()
    assert (added, skipped, total) == (2, 2, 4)
    assert stored == ["Django Unchained", "The Witcher"]


def test_import_twice_does_not_duplicate(tmp_path, session_factory):
    csv_path = tmp_path / "movies.csv"
    csv_path.write_text(f"title,image\nThe Witcher,{IMAGE}\nThe Witcher,{IMAGE}\n")

    first = import_movies_from_csv(csv_path, session_factory=session_factory)
    second = import_movies_from_csv(csv_path, session_factory=session_factory)

    assert first == (1, 0, 1)
    assert second == (0, 1, 1)


def test_default_users_are_created_once(session_factory):
    first = import_roles_and_users(session_factory=session_factory)
    second = import_roles_and_users(session_factory=session_factory)

    db = session_factory()
    usernames = sorted(u.username for u in db.query(UserORM))
    db.close()
    assert first == (2, len(DEFAULT_USERS))
    assert second == (0, 0)
    assert usernames == sorted(entry["username"] for entry in DEFAULT_USERS)
