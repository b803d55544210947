"""영화 서비스 — 레포지토리 결과를 HTTP 응답으로 변환.

Movie Service — Turns repository outcomes into response payloads.
Success yields the value, NotFound raises 404, StoreError is logged with
its cause and raises a generic 500.
"""

from typing import TypeVar

from app.repositories.movie_repository import MovieRepository
from app.repositories.result import NotFound, StoreError, Success
from app.schemas.movie import GenreResponse, MovieDetailResponse, MovieResponse
from app.utils.exceptions import InternalServerError, NotFoundError
from app.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class MovieService:
    """영화 카탈로그 조회 서비스.

    Service handling catalog reads for the request layer.
    Each method invokes exactly one repository operation.
    """

    def __init__(self, repository: MovieRepository) -> None:
        self.repository: MovieRepository = repository

    def _unwrap(
        self,
        result: Success[T] | NotFound | StoreError,
        context: str,
        not_found_detail: str = "Resource not found",
    ) -> T:
        """결과를 값으로 변환하거나 HTTP 예외를 발생시킵니다.

        Return the success value or raise the matching HTTP error.

        Args:
            result: 레포지토리 결과 (Repository outcome)
            context: 로그 메시지 문맥 (Log context, e.g. "Failed to get movies")
            not_found_detail: 404 응답 메시지 (404 response detail)

        Raises:
            NotFoundError: 엔티티가 없을 때 (Entity not found)
            InternalServerError: 저장소 실패 시 (Store failure)
        """
        if isinstance(result, Success):
            return result.value
        if isinstance(result, NotFound):
            raise NotFoundError(not_found_detail)
        if isinstance(result, StoreError):
            logger.error("%s: %s", context, result, exc_info=result.cause)
            raise InternalServerError()
        raise TypeError(f"Unexpected repository result: {result!r}")

    async def get_top_movies(self) -> list[MovieResponse]:
        """평점 상위 영화 목록 — Top-rated movies."""
        movies = self._unwrap(await self.repository.get_top_movies(), "Failed to get movies")
        logger.info("Successfully served top movies")
        return movies

    async def get_random_movies(self) -> list[MovieResponse]:
        """무작위 영화 샘플 — Random sample of movies."""
        movies = self._unwrap(await self.repository.get_random_movies(), "Failed to get movies")
        logger.info("Successfully served random movies")
        return movies

    async def search_movies(
        self,
        query: str,
        order: str | None,
        genre_id: int | None,
    ) -> list[MovieResponse]:
        """제목 검색 — Title search with optional order and genre filter."""
        movies = self._unwrap(
            await self.repository.search_movies_by_name(query, order, genre_id),
            "Failed to get movies",
        )
        logger.info("Successfully served movies")
        return movies

    async def get_movie(self, movie_id: int) -> MovieDetailResponse:
        """영화 상세 — Movie detail by id.

        Raises:
            NotFoundError: 영화를 찾을 수 없을 때 (Movie not found)
        """
        movie = self._unwrap(
            await self.repository.get_movie_by_id(movie_id),
            "Failed to get movie by ID",
            not_found_detail="Movie not found",
        )
        logger.info("Successfully served movie with ID: %d", movie_id)
        return movie

    async def get_genres(self) -> list[GenreResponse]:
        """장르 목록 — All genres."""
        genres = self._unwrap(await self.repository.get_all_genres(), "Failed to get genres")
        logger.info("Successfully served genres")
        return genres
