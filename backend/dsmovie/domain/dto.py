import math
from typing import List, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from dsmovie.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SCORE_MIN, SCORE_MAX
from dsmovie.domain.models import Movie, User


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    username: Optional[str] = None
    authorities: List[str] = []


class MovieDTO(BaseModel):
    """Movie data accepted on insert and update."""
    id: Optional[int] = None
    title: str = Field(..., min_length=5, max_length=80)
    score: float = Field(0.0, ge=0)
    count: int = Field(0, ge=0)
    image: str

    @field_validator('title')
    @classmethod
    def title_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Title must not be blank')
        return v

    @field_validator('image')
    @classmethod
    def image_is_url(cls, v):
        parsed = urlparse(v)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError('Image must be a valid http(s) URL')
        return v


class MovieResponse(BaseModel):
    """Movie as read back from storage, without the write rules of MovieDTO."""
    id: Optional[int] = None
    title: str
    score: float
    count: int
    image: str

    @classmethod
    def from_movie(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            title=movie.title,
            score=movie.score,
            count=movie.count,
            image=movie.image
        )


class ScoreDTO(BaseModel):
    movie_id: int
    score: float = Field(..., ge=SCORE_MIN, le=SCORE_MAX)


class PageRequest(BaseModel):
    page: int = Field(0, ge=0)
    size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    sort: Literal["id", "title", "score", "count"] = "id"
    direction: Literal["asc", "desc"] = "asc"

    @property
    def offset(self) -> int:
        return self.page * self.size


class MoviePage(BaseModel):
    content: List[MovieResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @classmethod
    def of(cls, movies: List[Movie], page_request: PageRequest, total_elements: int) -> "MoviePage":
        content = [MovieResponse.from_movie(movie) for movie in movies]
        return cls(
            content=content,
            page=page_request.page,
            size=len(content),
            total_elements=total_elements,
            total_pages=math.ceil(total_elements / page_request.size)
        )


class UserDTO(BaseModel):
    id: Optional[int] = None
    name: Optional[str] = None
    username: str
    roles: List[str]

    @classmethod
    def from_user(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            name=user.name,
            username=user.username,
            roles=user.authorities
        )
