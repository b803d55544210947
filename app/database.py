"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Builds the pooled async SQLAlchemy engine and session factory and defines
the ORM base class. The engine is created by the application lifespan and
handed to the repository, so nothing here opens a connection at import time.
"""

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


def create_engine(config: Settings) -> AsyncEngine:
    """설정으로부터 커넥션 풀 엔진을 생성합니다.

    Create the async engine with its connection pool.
    pool_pre_ping=True validates connections checked out of the pool.

    Args:
        config: 애플리케이션 설정 (Application settings)

    Returns:
        AsyncEngine: 비동기 데이터베이스 엔진 (Async database engine)
    """
    connect_args: dict[str, int] = {}
    if config.DATABASE_URL.startswith("postgresql+asyncpg"):
        # 트랜잭션 모드 풀러에서 prepared statement 비활성화
        # Disable prepared statement caches for transaction-mode poolers
        connect_args["statement_cache_size"] = 0

    return create_async_engine(
        config.DATABASE_URL,
        echo=config.DEBUG,
        pool_pre_ping=True,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        connect_args=connect_args,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """엔진에 바인딩된 비동기 세션 팩토리를 생성합니다.

    Create an async session factory bound to the engine.
    expire_on_commit=False keeps loaded attributes readable after the session ends.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
