"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    movie: 영화, 장르, 배우, 키워드 및 연결 테이블 (Movie, Genre, Actor, Keyword and join tables)
"""

from app.models.movie import Actor, Genre, Keyword, Movie, movie_cast, movie_genres, movie_keywords

__all__ = [
    "Movie", "Genre", "Actor", "Keyword",
    "movie_genres", "movie_cast", "movie_keywords",
]
