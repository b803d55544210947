"""영화 라우터 — 카탈로그 조회 엔드포인트.

Movie Router — Read-only catalog endpoints under /api/v1/movies.

Endpoints:
    - GET /top: 평점 상위 영화 (Top-rated movies)
    - GET /random: 무작위 영화 (Random sample)
    - GET /search?q=&order=&genre=: 제목 검색 (Title search)
    - GET /genres: 장르 목록 (Genre list)
    - GET /{movie_id}: 영화 상세 (Movie detail)
    - GET /: ID 누락 시 400 (Missing id, rejected with 400)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_movie_service, parse_id
from app.schemas.movie import GenreResponse, MovieDetailResponse, MovieResponse
from app.services.movie_service import MovieService
from app.utils.exceptions import BadRequestError

router: APIRouter = APIRouter()


@router.get("/top", response_model=list[MovieResponse])
async def get_top_movies(
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> list[MovieResponse]:
    """평점 상위 영화 목록을 조회합니다.

    List top-rated movies.
    """
    return await service.get_top_movies()


@router.get("/random", response_model=list[MovieResponse])
async def get_random_movies(
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> list[MovieResponse]:
    """무작위 영화 목록을 조회합니다.

    List a random sample of movies.
    """
    return await service.get_random_movies()


@router.get("/search", response_model=list[MovieResponse])
async def search_movies(
    service: Annotated[MovieService, Depends(get_movie_service)],
    q: str = Query(""),
    order: str = Query(""),
    genre: str = Query(""),
) -> list[MovieResponse]:
    """제목으로 영화를 검색합니다. 검색어가 없으면 빈 목록.

    Search movies by title. An empty query returns an empty list;
    a non-numeric genre filter is rejected with 400.
    """
    genre_id: int | None = parse_id(genre) if genre else None
    if not q:
        return []
    return await service.search_movies(q, order, genre_id)


@router.get("/genres", response_model=list[GenreResponse])
async def get_genres(
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> list[GenreResponse]:
    """장르 목록을 조회합니다.

    List all genres.
    """
    return await service.get_genres()


@router.get("/{movie_id}", response_model=MovieDetailResponse)
async def get_movie(
    movie_id: str,
    service: Annotated[MovieService, Depends(get_movie_service)],
) -> MovieDetailResponse:
    """영화 상세 정보를 조회합니다 (장르/출연진/키워드 포함).

    Retrieve movie detail. Non-numeric ids are rejected with 400.
    """
    return await service.get_movie(parse_id(movie_id))


@router.get("/", include_in_schema=False)
async def get_movie_without_id() -> None:
    """ID 없는 상세 조회는 400 — A detail request without an id is rejected."""
    raise BadRequestError("Invalid ID")
