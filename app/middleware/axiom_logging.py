"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response metadata for every catalog request, writes one
line to the local logger and, when Axiom is configured, ships the same event
to Axiom. Logs: method, path, query params, status code, duration, error reason.
Sensitive query keys (token, secret, ...) are masked.
"""

import json
import re
import time
from typing import Any

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from app.config import settings
from app.utils.logger import get_logger

logger = get_logger(__name__)

# 마스킹 대상 필드 패턴 — Query keys to mask
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|apikey)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 로깅 대상 경로 접두사 — Only API traffic is logged, not static assets
_API_PREFIX = "/api/"


def _mask_params(params: dict[str, str]) -> dict[str, str]:
    """민감 쿼리 파라미터 마스킹 — Mask sensitive query parameters."""
    return {k: "***" if _SENSITIVE_KEYS.search(k) else v for k, v in params.items()}


async def _read_error_detail(response: Response) -> tuple[str, bytes]:
    """에러 응답 body에서 사유를 추출합니다 — Extract the detail from an error body."""
    resp_body = b""
    async for chunk in response.body_iterator:
        resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
    try:
        error_data = json.loads(resp_body)
        detail = str(error_data.get("detail", error_data))
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        detail = resp_body.decode("utf-8", errors="replace")
    return detail[:500], resp_body


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로컬 로그와 Axiom에 기록하는 미들웨어.

    Middleware that logs API requests and responses locally and to Axiom.
    Captures: method, path, query params, status code, duration, error detail.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        # 제외 경로 및 정적 파일 스킵 — Skip excluded paths and static assets
        if path in _SKIP_PATHS or not path.startswith(_API_PREFIX):
            return await call_next(request)

        start_time = time.time()
        method = request.method
        query_params = dict(request.query_params) if request.query_params else None

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 후 재구성 — Re-wrap the consumed error body
            if status_code >= 400:
                error_detail, resp_body = await _read_error_detail(response)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.time() - start_time) * 1000, 2)

            log_event: dict[str, Any] = {
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
            if query_params:
                log_event["query_params"] = _mask_params(query_params)
            if error_detail:
                log_event["error"] = error_detail

            logger.info("%s %s -> %d (%.2f ms)", method, path, status_code, duration_ms)
            await self._ship(log_event)

        return response

    async def _ship(self, log_event: dict[str, Any]) -> None:
        """Axiom으로 이벤트 전송 — Send the event to Axiom when configured.

        ingest_events is a blocking HTTP call, so it runs in the threadpool.
        """
        if self._client is None:
            return
        try:
            await run_in_threadpool(self._client.ingest_events, self._dataset, [log_event])
        except Exception as exc:  # 로깅 실패가 요청 처리에 영향주지 않도록
            logger.warning("Axiom ingest failed: %s", exc)
