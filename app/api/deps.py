"""FastAPI 의존성 주입 모듈 — 레포지토리/서비스 제공 및 파라미터 검증.

FastAPI dependency injection module.
Provides the shared MovieRepository created by the application lifespan,
the per-request MovieService, and validation of raw identifier strings.
Tests override get_movie_repository to point at their own store.
"""

import re
from typing import Annotated

from fastapi import Depends, Request

from app.repositories.movie_repository import MovieRepository
from app.services.movie_service import MovieService
from app.utils.exceptions import BadRequestError

# 10진수 식별자 형식 — Optional sign followed by ASCII digits
_ID_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")


def get_movie_repository(request: Request) -> MovieRepository:
    """앱 상태에 저장된 공유 레포지토리를 반환합니다.

    Return the repository stored on app.state during startup.
    """
    return request.app.state.movie_repository


def get_movie_service(
    repository: Annotated[MovieRepository, Depends(get_movie_repository)],
) -> MovieService:
    """요청마다 서비스를 생성합니다 — Build the service around the shared repository."""
    return MovieService(repository)


def parse_id(raw: str) -> int:
    """문자열 식별자를 음이 아닌 정수로 변환합니다.

    Parse a raw identifier into a non-negative integer.

    Args:
        raw: 경로/쿼리 문자열 (Raw path or query string value)

    Returns:
        int: 파싱된 식별자 (Parsed identifier)

    Raises:
        BadRequestError: 숫자가 아니거나 음수일 때 (Non-numeric or negative)
    """
    # ASCII 숫자만 허용 — int() alone would also take "1_0", " 7 " and non-ASCII digits
    if not _ID_PATTERN.fullmatch(raw):
        raise BadRequestError("Invalid ID")
    try:
        value: int = int(raw)
    except ValueError:  # 정수 변환 자릿수 한도 초과 — Beyond the int string-conversion digit limit
        raise BadRequestError("Invalid ID") from None
    if value < 0:
        raise BadRequestError("Invalid ID")
    return value
