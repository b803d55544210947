"""기본 읽기 전용 레포지토리 — 모든 레포지토리의 부모 클래스.

Base read-only repository — Parent class for catalog repositories.
Owns the injected session factory, runs SELECT statements in a short-lived
session and classifies store failures into the result contract.

Usage:
    class MovieRepository(BaseRepository):
        async def get_all_genres(self) -> ListResult[list[GenreResponse]]:
            return await self._fetch_all(select(Genre), self._to_genre)
"""

import asyncio
from typing import Any, Callable, TypeVar

from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.result import ListResult, LookupResult, NotFound, StoreError, Success

# 매핑 결과 타입 — Domain record type produced by a row mapper
RecordType = TypeVar("RecordType")

# 저장소 오류로 분류되는 예외 — Exceptions classified as StoreError
# SQLAlchemyError wraps DBAPI errors; OSError and asyncio.TimeoutError cover raw connect
# failures and connect timeouts from the driver (TimeoutError is not an OSError before 3.11).
STORE_EXCEPTIONS: tuple[type[BaseException], ...] = (SQLAlchemyError, OSError, asyncio.TimeoutError)


class BaseRepository:
    """세션 팩토리를 주입받는 읽기 전용 레포지토리.

    Read-only repository built around an injected session factory.
    Holds no per-request state, so one instance is shared by all requests;
    each call checks a connection out of the engine pool and returns it on exit.

    Attributes:
        session_factory: 비동기 세션 팩토리 (Async session factory bound to a pooled engine)
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            session_factory: 커넥션 풀 엔진에 바인딩된 세션 팩토리
                             (Session factory bound to the pooled engine)
        """
        self.session_factory: async_sessionmaker[AsyncSession] = session_factory

    async def _fetch_all(
        self,
        query: Select,
        mapper: Callable[[Any], RecordType],
    ) -> ListResult[list[RecordType]]:
        """쿼리의 모든 행을 도메인 레코드로 매핑합니다.

        Execute the query and map every ORM row to a domain record.
        Mapping happens inside the session so eager-loaded relations are available.

        Args:
            query: SELECT 쿼리 (SELECT statement)
            mapper: ORM 객체 → 도메인 레코드 변환 함수 (Row mapper)

        Returns:
            Success(list) 또는 StoreError (Success with records, or StoreError)
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                records: list[RecordType] = [mapper(row) for row in result.scalars().unique().all()]
        except STORE_EXCEPTIONS as exc:
            return StoreError(exc)
        return Success(records)

    async def _fetch_one(
        self,
        query: Select,
        mapper: Callable[[Any], RecordType],
    ) -> LookupResult[RecordType]:
        """단일 행을 조회하여 도메인 레코드로 매핑합니다.

        Execute the query expecting at most one row.

        Args:
            query: SELECT 쿼리 (SELECT statement)
            mapper: ORM 객체 → 도메인 레코드 변환 함수 (Row mapper)

        Returns:
            Success(record), NotFound() 또는 StoreError
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(query)
                row: Any | None = result.scalars().unique().one_or_none()
                record: RecordType | None = mapper(row) if row is not None else None
        except STORE_EXCEPTIONS as exc:
            return StoreError(exc)
        if record is None:
            return NotFound()
        return Success(record)
