"""create_movie_catalog

Revision ID: c4a1e7d2b9f3
Revises:
Create Date: 2026-10-19 10:00:00.000000

영화 카탈로그 테이블 생성: genres, movies, movie_genres, actors, movie_cast, keywords, movie_keywords.
Create movie catalog tables: genres, movies, movie_genres, actors, movie_cast, keywords, movie_keywords.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c4a1e7d2b9f3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # genres — 장르 (filter key and display entity)
    op.create_table(
        'genres',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
    )

    # movies — 영화
    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('tmdb_id', sa.Integer(), nullable=True, unique=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('tagline', sa.Text(), nullable=True),
        sa.Column('release_year', sa.Integer(), nullable=True),
        sa.Column('overview', sa.Text(), nullable=True),
        sa.Column('rating', sa.Float(), server_default=sa.text('0'), nullable=False),
        sa.Column('popularity', sa.Float(), nullable=True),
        sa.Column('language', sa.String(10), nullable=True),
        sa.Column('poster_url', sa.Text(), nullable=True),
        sa.Column('trailer_url', sa.Text(), nullable=True),
    )
    op.create_index('ix_movies_title', 'movies', ['title'])
    # 상위 목록 정렬용 — Supports ORDER BY rating DESC, id
    op.create_index('ix_movies_rating_id', 'movies', [sa.text('rating DESC'), 'id'])

    # movie_genres — 영화-장르 매핑
    op.create_table(
        'movie_genres',
        sa.Column('movie_id', sa.Integer(), sa.ForeignKey('movies.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('genre_id', sa.Integer(), sa.ForeignKey('genres.id', ondelete='CASCADE'), primary_key=True),
    )
    op.create_index('ix_movie_genres_genre', 'movie_genres', ['genre_id'])

    # actors / movie_cast — 출연진
    op.create_table(
        'actors',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
    )
    op.create_table(
        'movie_cast',
        sa.Column('movie_id', sa.Integer(), sa.ForeignKey('movies.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('actor_id', sa.Integer(), sa.ForeignKey('actors.id', ondelete='CASCADE'), primary_key=True),
    )

    # keywords / movie_keywords — 키워드
    op.create_table(
        'keywords',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('word', sa.String(100), nullable=False, unique=True),
    )
    op.create_table(
        'movie_keywords',
        sa.Column('movie_id', sa.Integer(), sa.ForeignKey('movies.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('keyword_id', sa.Integer(), sa.ForeignKey('keywords.id', ondelete='CASCADE'), primary_key=True),
    )


def downgrade() -> None:
    # 연결 테이블부터 삭제 — Drop join tables first
    op.drop_table('movie_keywords')
    op.drop_table('keywords')
    op.drop_table('movie_cast')
    op.drop_table('actors')
    op.drop_index('ix_movie_genres_genre', table_name='movie_genres')
    op.drop_table('movie_genres')
    op.drop_index('ix_movies_rating_id', table_name='movies')
    op.drop_index('ix_movies_title', table_name='movies')
    op.drop_table('movies')
    op.drop_table('genres')
