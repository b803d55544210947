"""FastAPI 애플리케이션 엔트리포인트 — 수명 주기, 미들웨어 및 라우터 등록.

FastAPI application entry point — Lifespan, middleware and router registration.
The pooled database engine is opened on startup, injected into the movie
repository, and disposed on shutdown.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.movies import router as movies_router
from app.config import settings
from app.database import create_engine, create_session_factory
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.repositories.movie_repository import MovieRepository
from app.utils.logger import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """엔진을 열고 레포지토리를 주입한 뒤 종료 시 엔진을 닫습니다.

    Open the engine, build the shared repository, and always dispose the
    engine on shutdown.
    """
    engine = create_engine(settings)
    try:
        app.state.movie_repository = MovieRepository(
            create_session_factory(engine),
            top_limit=settings.TOP_MOVIES_LIMIT,
            random_limit=settings.RANDOM_MOVIES_LIMIT,
        )
        logger.info("Movie repository initialized")
        yield
    finally:
        await engine.dispose()
        logger.info("Database engine disposed")


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# 라우터 등록 — Router registration
app.include_router(movies_router, prefix="/api/v1/movies", tags=["Movies"])

# 정적 파일 — Front-end assets, mounted last so API routes take precedence
if Path(settings.STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
