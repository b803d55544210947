"""테스트 인프라 — 임시 SQLite 카탈로그, 레포지토리, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite catalog, repository, and httpx client fixtures.
Each test gets its own database file (aiosqlite) with the schema created from
the ORM metadata; the catalog fixture seeds a small set of movies and genres.
"""

import os
from collections.abc import AsyncGenerator

# 테스트 중 로그 파일 생성 방지 — No log file during tests
os.environ.setdefault("LOG_FILE", "")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.api.deps import get_movie_repository  # noqa: E402
from app.database import Base, create_session_factory  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models.movie import Actor, Genre, Keyword, Movie  # noqa: E402
from app.repositories.movie_repository import MovieRepository  # noqa: E402

TOP_LIMIT = 5
RANDOM_LIMIT = 3


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """데이터 준비용 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def repository(session_factory: async_sessionmaker[AsyncSession]) -> MovieRepository:
    """테스트 DB에 연결된 레포지토리."""
    return MovieRepository(session_factory, top_limit=TOP_LIMIT, random_limit=RANDOM_LIMIT)


@pytest_asyncio.fixture
async def broken_repository(tmp_path) -> AsyncGenerator[MovieRepository, None]:
    """스키마가 없는 DB에 연결된 레포지토리 — 모든 쿼리가 실패합니다."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    yield MovieRepository(create_session_factory(eng))
    await eng.dispose()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 카탈로그 데이터
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def catalog(db: AsyncSession) -> dict[str, Genre]:
    """테스트 카탈로그를 생성합니다.

    Ratings: 3=9.0, 1=8.8, 4=8.6, 6=8.4, 5=8.3, 2=7.5, 8=7.5, 7=5.0.
    Movie 8 has no genre and no release year.
    """
    genres = {
        "scifi": Genre(id=1, name="Sci-Fi"),
        "animation": Genre(id=2, name="Animation"),
        "drama": Genre(id=3, name="Drama"),
    }
    db.add_all(genres.values())

    leo = Actor(id=1, first_name="Leonardo", last_name="DiCaprio")
    elliot = Actor(id=2, first_name="Elliot", last_name="Page", image_url="https://img/page.jpg")
    dreams = Keyword(id=1, word="dreams")
    heist = Keyword(id=2, word="heist")

    db.add_all([
        Movie(
            id=1, title="Inception", release_year=2010, rating=8.8,
            tagline="Your mind is the scene of the crime.",
            genres=[genres["scifi"]], actors=[elliot, leo], keywords=[heist, dreams],
        ),
        Movie(id=2, title="Incredibles", release_year=2004, rating=7.5, genres=[genres["animation"]]),
        Movie(id=3, title="The Dark Knight", release_year=2008, rating=9.0, genres=[genres["drama"]]),
        Movie(
            id=4, title="Interstellar", release_year=2014, rating=8.6,
            genres=[genres["scifi"], genres["drama"]],
        ),
        Movie(id=5, title="Toy Story", release_year=1995, rating=8.3, genres=[genres["animation"]]),
        Movie(id=6, title="Memento", release_year=2000, rating=8.4, genres=[genres["drama"]]),
        Movie(id=7, title="100% Wolf", release_year=2020, rating=5.0, genres=[genres["animation"]]),
        Movie(id=8, title="Unclassified Film", rating=7.5),
    ])
    await db.commit()
    return genres


# ---------------------------------------------------------------------------
# HTTP 클라이언트
# ---------------------------------------------------------------------------
async def _client_for(repo: MovieRepository) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_movie_repository] = lambda: repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(repository: MovieRepository) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 레포지토리를 오버라이드합니다."""
    async for ac in _client_for(repository):
        yield ac


@pytest_asyncio.fixture
async def broken_client(broken_repository: MovieRepository) -> AsyncGenerator[AsyncClient, None]:
    """저장소 실패를 재현하는 테스트 클라이언트."""
    async for ac in _client_for(broken_repository):
        yield ac


def ids(movies) -> list[int]:
    """응답 목록에서 ID만 추출합니다 (레코드 또는 JSON dict)."""
    return [m["id"] if isinstance(m, dict) else m.id for m in movies]
