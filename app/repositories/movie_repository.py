"""영화 레포지토리 — 카탈로그 조회 쿼리.

Movie Repository — Read-only catalog queries.
One method per logical query (top, random, search, by-id, genres).
Caller-influenced values are always bound parameters; the search order key
is resolved through a fixed allow-list of column/direction pairs.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.models.movie import Actor, Genre, Movie
from app.repositories.base import BaseRepository
from app.repositories.result import ListResult, LookupResult, NotFound, Success
from app.schemas.movie import ActorResponse, GenreResponse, MovieDetailResponse, MovieResponse

# 검색 정렬 키 — Recognized search order keys
ORDER_RATING_DESC: str = "rating_desc"
ORDER_TITLE_ASC: str = "title_asc"
ORDER_YEAR_DESC: str = "year_desc"
DEFAULT_ORDER: str = ORDER_RATING_DESC

# 식별자 컬럼 범위 (32비트 정수) — Identifier columns are 32-bit signed integers
ID_MIN: int = -(2**31)
ID_MAX: int = 2**31 - 1

# 정렬 허용 목록 — Order key → ORDER BY clauses, id asc breaks every tie
_ORDER_CLAUSES: dict[str, tuple] = {
    ORDER_RATING_DESC: (Movie.rating.desc(), Movie.id.asc()),
    ORDER_TITLE_ASC: (Movie.title.asc(), Movie.id.asc()),
    ORDER_YEAR_DESC: (Movie.release_year.desc().nulls_last(), Movie.id.asc()),
}


def resolve_order(order: str | None) -> tuple:
    """정렬 키를 ORDER BY 절로 변환합니다. 알 수 없는 키는 기본값(rating_desc).

    Resolve an order key to its ORDER BY clauses.
    Unknown or empty keys fall back to rating_desc.
    """
    return _ORDER_CLAUSES.get((order or "").strip().lower(), _ORDER_CLAUSES[DEFAULT_ORDER])


class MovieRepository(BaseRepository):
    """영화/장르 테이블에 대한 조회를 담당하는 레포지토리.

    Repository handling queries against the movie catalog tables.
    Every method returns a result outcome instead of raising store errors.

    Attributes:
        top_limit: 상위 목록 최대 개수 (Maximum size of the top list)
        random_limit: 랜덤 샘플 크기 (Random sample size)
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        top_limit: int = 10,
        random_limit: int = 10,
    ) -> None:
        """MovieRepository를 초기화합니다.

        Args:
            session_factory: 세션 팩토리 (Session factory bound to the pooled engine)
            top_limit: 상위 목록 최대 개수 (Maximum size of the top list)
            random_limit: 랜덤 샘플 크기 (Random sample size)
        """
        super().__init__(session_factory)
        self.top_limit: int = top_limit
        self.random_limit: int = random_limit

    # ------------------------------------------------------------------
    # 매핑 — Row mappers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_genre(genre: Genre) -> GenreResponse:
        return GenreResponse(id=genre.id, name=genre.name)

    @classmethod
    def _to_movie(cls, movie: Movie) -> MovieResponse:
        return MovieResponse(
            id=movie.id,
            tmdb_id=movie.tmdb_id,
            title=movie.title,
            tagline=movie.tagline,
            release_year=movie.release_year,
            overview=movie.overview,
            rating=movie.rating,
            popularity=movie.popularity,
            language=movie.language,
            poster_url=movie.poster_url,
            trailer_url=movie.trailer_url,
            genres=[cls._to_genre(g) for g in movie.genres],
        )

    @classmethod
    def _to_movie_detail(cls, movie: Movie) -> MovieDetailResponse:
        base: MovieResponse = cls._to_movie(movie)
        return MovieDetailResponse(
            **base.model_dump(exclude={"genres"}),
            genres=base.genres,
            actors=[cls._to_actor(a) for a in movie.actors],
            keywords=[k.word for k in movie.keywords],
        )

    @staticmethod
    def _to_actor(actor: Actor) -> ActorResponse:
        return ActorResponse(
            id=actor.id,
            first_name=actor.first_name,
            last_name=actor.last_name,
            image_url=actor.image_url,
        )

    @staticmethod
    def _movie_query() -> Select:
        """장르를 함께 로드하는 기본 영화 쿼리 — Base movie query with genres loaded."""
        return select(Movie).options(selectinload(Movie.genres))

    # ------------------------------------------------------------------
    # 조회 — Queries
    # ------------------------------------------------------------------

    async def get_top_movies(self) -> ListResult[list[MovieResponse]]:
        """평점 상위 영화 목록을 조회합니다.

        Retrieve the top-rated movies, rating desc then id asc,
        bounded by top_limit. An empty catalog yields an empty list.

        Returns:
            Success(list[MovieResponse]) 또는 StoreError
        """
        query: Select = (
            self._movie_query()
            .order_by(*_ORDER_CLAUSES[ORDER_RATING_DESC])
            .limit(self.top_limit)
        )
        return await self._fetch_all(query, self._to_movie)

    async def get_random_movies(self) -> ListResult[list[MovieResponse]]:
        """무작위 영화 샘플을 조회합니다 (비복원 추출).

        Sample up to random_limit distinct movies.
        Ordering by random() happens in the store, so the catalog is never
        loaded into process memory. A smaller catalog returns fewer movies.

        Returns:
            Success(list[MovieResponse]) 또는 StoreError
        """
        query: Select = (
            self._movie_query()
            .order_by(func.random())
            .limit(self.random_limit)
        )
        return await self._fetch_all(query, self._to_movie)

    async def search_movies_by_name(
        self,
        term: str,
        order: str | None = None,
        genre_id: int | None = None,
    ) -> ListResult[list[MovieResponse]]:
        """제목으로 영화를 검색합니다.

        Search movies whose title contains the term (case-insensitive).
        LIKE wildcards in the term are escaped and match literally.

        Args:
            term: 검색어, 비어 있으면 빈 목록 (Search term; empty returns no movies)
            order: 정렬 키 rating_desc | title_asc | year_desc
                   (Order key; unknown values fall back to rating_desc)
            genre_id: 장르 필터, None이면 전체 장르 (Genre filter; None means all genres)

        Returns:
            Success(list[MovieResponse]) 또는 StoreError
        """
        # 검색어 없는 전체 조회는 허용하지 않음 — Search requires a term
        if not term:
            return Success([])

        query: Select = self._movie_query().where(Movie.title.icontains(term, autoescape=True))
        if genre_id is not None:
            # 컬럼 범위 밖의 장르는 존재할 수 없음 — No genre can carry an out-of-range id
            if not ID_MIN <= genre_id <= ID_MAX:
                return Success([])
            query = query.where(Movie.genres.any(Genre.id == genre_id))
        query = query.order_by(*resolve_order(order))

        return await self._fetch_all(query, self._to_movie)

    async def get_movie_by_id(self, movie_id: int) -> LookupResult[MovieDetailResponse]:
        """ID로 영화 상세 정보를 조회합니다 (장르/출연진/키워드 포함).

        Retrieve a single movie with genres, cast and keywords.

        Args:
            movie_id: 영화 식별자 (Movie identifier)

        Returns:
            Success(MovieDetailResponse), NotFound() 또는 StoreError
        """
        if not ID_MIN <= movie_id <= ID_MAX:
            return NotFound()

        query: Select = (
            select(Movie)
            .options(
                selectinload(Movie.genres),
                selectinload(Movie.actors),
                selectinload(Movie.keywords),
            )
            .where(Movie.id == movie_id)
        )
        return await self._fetch_one(query, self._to_movie_detail)

    async def get_all_genres(self) -> ListResult[list[GenreResponse]]:
        """모든 장르를 ID 오름차순으로 조회합니다.

        Retrieve every genre ordered by id, for filter population.

        Returns:
            Success(list[GenreResponse]) 또는 StoreError
        """
        query: Select = select(Genre).order_by(Genre.id.asc())
        return await self._fetch_all(query, self._to_genre)
