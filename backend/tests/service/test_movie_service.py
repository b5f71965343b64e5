import pytest
from unittest.mock import MagicMock, Mock

from dsmovie.domain.dto import MovieDTO, MoviePage, PageRequest
from dsmovie.domain.models import Movie, Score
from dsmovie.service.movie_service import MovieService
from dsmovie.exceptions.repository import EntityNotFoundException, IntegrityViolationException
from dsmovie.exceptions.service import DatabaseException, ResourceNotFoundException

EXISTING_ID = 1
NON_EXISTING_ID = 2
DEPENDED_ID = 3


@pytest.fixture
def mock_movie_repo(movie):
    """Mock repository answering for an existing, a missing and a referenced movie id."""
    repo = Mock()

    repo.find_by_id.side_effect = lambda movie_id, for_update=False: movie if movie_id == EXISTING_ID else None
    repo.search_by_title.return_value = MoviePage.of([movie], PageRequest(page=0, size=12), 1)

    def get_reference(movie_id):
        if movie_id == NON_EXISTING_ID:
            raise EntityNotFoundException(f"Movie {movie_id} not found")
        return movie
    repo.get_reference_by_id.side_effect = get_reference

    repo.save.side_effect = lambda m: m
    repo.exists_by_id.side_effect = lambda movie_id: movie_id in (EXISTING_ID, DEPENDED_ID)

    def delete(movie_id):
        if movie_id == DEPENDED_ID:
            raise IntegrityViolationException(f"Movie {movie_id} is still referenced")
    repo.delete_by_id.side_effect = delete
    return repo


@pytest.fixture
def movie_service(mock_movie_repo):
    return MovieService(mock_movie_repo, MagicMock())


@pytest.fixture
def movie_dto(movie):
    return MovieDTO(title=movie.title, image=movie.image)


def test_find_all_returns_paged_movies(movie_service, mock_movie_repo, movie):
    page_request = PageRequest(page=0, size=12)

    result = movie_service.find_all(movie.title, page_request)

    assert result is not None
    assert result.size == 1
    assert result.content[0].title == movie.title
    mock_movie_repo.search_by_title.assert_called_once_with(movie.title, page_request)


def test_find_by_id_returns_movie_when_id_exists(movie_service, mock_movie_repo):
    result = movie_service.find_by_id(EXISTING_ID)

    assert result is not None
    assert result.id == EXISTING_ID
    mock_movie_repo.find_by_id.assert_called_once_with(EXISTING_ID)


def test_find_by_id_raises_not_found_when_id_does_not_exist(movie_service, mock_movie_repo):
    with pytest.raises(ResourceNotFoundException):
        movie_service.find_by_id(NON_EXISTING_ID)

    mock_movie_repo.find_by_id.assert_called_once_with(NON_EXISTING_ID)


def test_insert_returns_movie(movie_service, mock_movie_repo, movie_dto):
    result = movie_service.insert(movie_dto)

    assert result is not None
    assert result.title == movie_dto.title
    mock_movie_repo.save.assert_called_once()


def test_insert_starts_with_empty_aggregate(movie_service, mock_movie_repo, movie_dto):
    movie_service.insert(movie_dto)

    saved = mock_movie_repo.save.call_args.args[0]
    assert saved.id is None
    assert saved.count == 0
    assert saved.score_sum == 0.0


def test_update_returns_movie_when_id_exists(movie_service, mock_movie_repo, movie):
    updated_dto = MovieDTO(title="NEW_TITLE", image=movie.image)

    result = movie_service.update(EXISTING_ID, updated_dto)

    assert result is not None
    assert result.title == "NEW_TITLE"
    mock_movie_repo.save.assert_called_once_with(movie)


def test_update_keeps_aggregate(movie_service, movie):
    updated_dto = MovieDTO(title="NEW_TITLE", image=movie.image, score=0.0, count=0)

    result = movie_service.update(EXISTING_ID, updated_dto)

    assert result.count == 3
    assert result.score == pytest.approx(4.5)


def test_update_raises_not_found_when_id_does_not_exist(movie_service, mock_movie_repo, movie_dto):
    with pytest.raises(ResourceNotFoundException):
        movie_service.update(NON_EXISTING_ID, movie_dto)

    mock_movie_repo.get_reference_by_id.assert_called_once_with(NON_EXISTING_ID)
    mock_movie_repo.save.assert_not_called()


def test_delete_does_nothing_when_id_exists(movie_service, mock_movie_repo):
    movie_service.delete(EXISTING_ID)

    mock_movie_repo.exists_by_id.assert_called_once_with(EXISTING_ID)
    mock_movie_repo.delete_by_id.assert_called_once_with(EXISTING_ID)


def test_delete_raises_not_found_when_id_does_not_exist(movie_service, mock_movie_repo):
    with pytest.raises(ResourceNotFoundException):
        movie_service.delete(NON_EXISTING_ID)

    mock_movie_repo.exists_by_id.assert_called_once_with(NON_EXISTING_ID)
    mock_movie_repo.delete_by_id.assert_not_called()


def test_delete_raises_database_exception_when_movie_is_referenced(movie_service, mock_movie_repo):
    with pytest.raises(DatabaseException, match="Referential integrity failure"):
        movie_service.delete(DEPENDED_ID)

    mock_movie_repo.exists_by_id.assert_called_once_with(DEPENDED_ID)
    mock_movie_repo.delete_by_id.assert_called_once_with(DEPENDED_ID)


def test_find_all_filters_title_case_insensitively(movie_repo, transaction):
    image = "https://image.tmdb.org/t/p/w500/poster.jpg"
    for title in ["The Witcher", "Free Guy", "Witchcraft Tales"]:
        movie_repo.save(Movie(title=title, image=image))
    service = MovieService(movie_repo, transaction)

    result = service.find_all("WITCH", PageRequest(page=0, size=12, sort="title"))

    assert [m.title for m in result.content] == ["The Witcher", "Witchcraft Tales"]
    assert result.total_elements == 2


def test_find_all_without_title_pages_through_everything(movie_repo, transaction):
    image = "https://image.tmdb.org/t/p/w500/poster.jpg"
    for i in range(5):
        movie_repo.save(Movie(title=f"Movie number {i}", image=image))
    service = MovieService(movie_repo, transaction)

    result = service.find_all(None, PageRequest(page=1, size=2))

    assert [m.id for m in result.content] == [3, 4]
    assert result.total_elements == 5
    assert result.total_pages == 3


def test_insert_then_find_by_id(movie_repo, transaction, movie_dto):
    service = MovieService(movie_repo, transaction)

    created = service.insert(movie_dto)
    found = service.find_by_id(created.id)

    assert found.title == movie_dto.title
    assert found.count == 0
    assert transaction.commits == 1


def test_delete_of_scored_movie_rolls_back(movie_repo, score_repo, transaction, movie):
    movie_repo.save(movie)
    score_repo.save(Score(movie_id=movie.id, user_id=1, value=4.0))
    service = MovieService(movie_repo, transaction)

    with pytest.raises(DatabaseException):
        service.delete(movie.id)

    assert movie_repo.exists_by_id(movie.id)
    assert transaction.rollbacks == 1
