"""영화 카탈로그 Pydantic 응답 스키마 정의.

Movie catalog Pydantic response schema definitions.
These are the plain domain records returned by the repository and
serialized as JSON by the request layer.
"""

from pydantic import BaseModel


class GenreResponse(BaseModel):
    """장르 응답 스키마.

    Attributes:
        id: 장르 식별자 (Genre identifier)
        name: 장르 이름 (Genre name)
    """

    id: int
    name: str


class ActorResponse(BaseModel):
    """배우 응답 스키마 — Cast member on the movie detail view."""

    id: int
    first_name: str
    last_name: str
    image_url: str | None = None


class MovieResponse(BaseModel):
    """영화 목록 응답 스키마.

    Movie record returned by the listing operations (top, random, search).

    Attributes:
        id: 영화 식별자 (Movie identifier)
        tmdb_id: TMDB 식별자 (External TMDB identifier)
        title: 제목 (Title)
        tagline: 태그라인 (Tagline)
        release_year: 개봉 연도 (Release year)
        overview: 줄거리 (Plot overview)
        rating: 평점 (Rating score)
        popularity: 인기도 (Popularity index)
        language: 원어 (Original language)
        poster_url: 포스터 URL (Poster image URL)
        trailer_url: 트레일러 URL (Trailer URL)
        genres: 장르 목록, 없으면 빈 목록 (Genres, empty when unclassified)
    """

    id: int
    tmdb_id: int | None = None
    title: str
    tagline: str | None = None
    release_year: int | None = None
    overview: str | None = None
    rating: float
    popularity: float | None = None
    language: str | None = None
    poster_url: str | None = None
    trailer_url: str | None = None
    genres: list[GenreResponse] = []


class MovieDetailResponse(MovieResponse):
    """영화 상세 응답 스키마 — 출연진과 키워드 포함.

    Movie detail record with cast and keywords.
    """

    actors: list[ActorResponse] = []
    keywords: list[str] = []
