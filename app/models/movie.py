"""영화 카탈로그 SQLAlchemy ORM 모델 정의.

Movie catalog SQLAlchemy ORM model definitions.
The catalog is populated by external import tooling; this service only reads it.

Tables:
    - genres: 장르 (Genre classifications)
    - movies: 영화 (Movies)
    - movie_genres: 영화-장르 매핑 (Movie ↔ Genre association)
    - actors: 배우 (Cast members)
    - movie_cast: 영화-배우 매핑 (Movie ↔ Actor association)
    - keywords: 키워드 (Keywords)
    - movie_keywords: 영화-키워드 매핑 (Movie ↔ Keyword association)
"""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

# 영화-장르 연결 테이블 — Movie/genre join table (CASCADE on either side)
movie_genres: Table = Table(
    "movie_genres",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", Integer, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)

# 영화-배우 연결 테이블 — Movie/actor join table
movie_cast: Table = Table(
    "movie_cast",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("actor_id", Integer, ForeignKey("actors.id", ondelete="CASCADE"), primary_key=True),
)

# 영화-키워드 연결 테이블 — Movie/keyword join table
movie_keywords: Table = Table(
    "movie_keywords",
    Base.metadata,
    Column("movie_id", Integer, ForeignKey("movies.id", ondelete="CASCADE"), primary_key=True),
    Column("keyword_id", Integer, ForeignKey("keywords.id", ondelete="CASCADE"), primary_key=True),
)


class Genre(Base):
    """장르 모델 — 표시용 엔티티이자 검색 필터 키.

    Genre model — display entity for the genre list and filter key for search.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 장르 이름 (Genre name, e.g. "Sci-Fi")
    """

    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class Movie(Base):
    """영화 모델 — 카탈로그의 기본 엔티티.

    Movie model — the primary catalog entity.

    Attributes:
        id: 저장소가 부여한 고유 식별자 (Store-assigned unique identifier)
        tmdb_id: TMDB 식별자 (External TMDB identifier, optional)
        title: 제목 (Title)
        tagline: 태그라인 (Tagline)
        release_year: 개봉 연도 (Release year)
        overview: 줄거리 (Plot overview)
        rating: 평점 — 상위 목록/정렬 기준 (Score used for ranking and sorting)
        popularity: 인기도 (Popularity index)
        language: 원어 (Original language code)
        poster_url: 포스터 URL (Poster image URL)
        trailer_url: 트레일러 URL (Trailer URL)

    Relationships:
        genres: 장르 목록 (Genres, possibly empty)
        actors: 출연 배우 (Cast)
        keywords: 키워드 (Keywords)
    """

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    tmdb_id: Mapped[int | None] = mapped_column(Integer, unique=True, nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    tagline: Mapped[str | None] = mapped_column(Text, nullable=True)
    release_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    overview: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    popularity: Mapped[float | None] = mapped_column(Float, nullable=True)
    language: Mapped[str | None] = mapped_column(String(10), nullable=True)
    poster_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    trailer_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # 관계 — Relationships
    genres: Mapped[list[Genre]] = relationship(secondary=movie_genres, order_by=Genre.id)
    actors: Mapped[list["Actor"]] = relationship(secondary=movie_cast, order_by="Actor.id")
    keywords: Mapped[list["Keyword"]] = relationship(secondary=movie_keywords, order_by="Keyword.word")


class Actor(Base):
    """배우 모델 — 영화 상세 조회의 출연진.

    Actor model — cast members shown on the movie detail view.
    """

    __tablename__ = "actors"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)


class Keyword(Base):
    """키워드 모델 — Keyword attached to movies."""

    __tablename__ = "keywords"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    word: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
