from typing import Literal, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from dsmovie.auth.dependencies import require_roles
from dsmovie.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from dsmovie.domain.dto import MovieDTO, MoviePage, MovieResponse, PageRequest
from dsmovie.service.dependencies import get_movie_service
from dsmovie.service.movie_service import MovieService


router = APIRouter(
    prefix="/movies",
    tags=["Movies"],
    responses={404: {"description": "Not found"}}
)

admin_only = require_roles("ROLE_ADMIN")


@router.get("", response_model=MoviePage)
def find_all(
    title: Optional[str] = Query(None),
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    sort: Literal["id", "title", "score", "count"] = Query("id"),
    direction: Literal["asc", "desc"] = Query("asc"),
    movie_service: MovieService = Depends(get_movie_service)
):
    page_request = PageRequest(page=page, size=size, sort=sort, direction=direction)
    return movie_service.find_all(title, page_request)


@router.get("/{movie_id}", response_model=MovieResponse)
def find_by_id(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service)
):
    return movie_service.find_by_id(movie_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MovieResponse,
             dependencies=[Depends(admin_only)])
def insert(
    dto: MovieDTO,
    response: Response,
    movie_service: MovieService = Depends(get_movie_service)
):
    created = movie_service.insert(dto)
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return created


@router.put("/{movie_id}", response_model=MovieResponse, dependencies=[Depends(admin_only)])
def update(
    movie_id: int,
    dto: MovieDTO,
    movie_service: MovieService = Depends(get_movie_service)
):
    return movie_service.update(movie_id, dto)


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT,
               dependencies=[Depends(admin_only)])
def delete(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service)
):
    movie_service.delete(movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
