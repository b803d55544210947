"""레포지토리 결과 타입 — 성공 / 없음 / 저장소 오류.

Repository result contract.
Every repository operation returns exactly one of three outcomes:

    - Success(value): 조회 성공 (Query succeeded)
    - NotFound(): 단일 엔티티가 없음 (Single-entity lookup found nothing)
    - StoreError(cause): 저장소 실패 (Connectivity, query or unexpected store failure)

Callers branch with isinstance(); the original exception is kept on
StoreError for logging and must never be sent to clients.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """조회 성공 — Successful outcome carrying the value."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """요청한 엔티티가 존재하지 않음 — Requested entity does not exist."""


@dataclass(frozen=True)
class StoreError:
    """저장소 실패 — Store failure with the original cause preserved."""

    cause: BaseException

    def __str__(self) -> str:
        return f"{type(self.cause).__name__}: {self.cause}"


# 목록 조회 결과 — Listing operations never yield NotFound
ListResult = Union[Success[T], StoreError]
# 단일 조회 결과 — Single-entity lookups
LookupResult = Union[Success[T], NotFound, StoreError]
