"""영화 카탈로그 API 테스트.

Movie catalog API tests — /api/v1/movies endpoints.
Tests payload shape, parameter validation, and error mapping (400/404/500).
"""

import logging
import threading

import pytest

from app.api.deps import parse_id
from app.main import app
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.utils.exceptions import BadRequestError
from tests.conftest import TOP_LIMIT, ids

URL = "/api/v1/movies"


class TestTopAndRandom:
    """상위/무작위 영화 API 테스트."""

    async def test_top_movies(self, client, catalog):
        res = await client.get(f"{URL}/top")
        assert res.status_code == 200
        data = res.json()
        assert ids(data) == [3, 1, 4, 6, 5]
        assert len(data) == TOP_LIMIT
        assert data[0]["title"] == "The Dark Knight"
        assert data[0]["genres"] == [{"id": 3, "name": "Drama"}]

    async def test_random_movies(self, client, catalog):
        res = await client.get(f"{URL}/random")
        assert res.status_code == 200
        movie_ids = ids(res.json())
        assert len(movie_ids) == 3
        assert len(set(movie_ids)) == 3

    async def test_top_movies_empty_catalog(self, client):
        res = await client.get(f"{URL}/top")
        assert res.status_code == 200
        assert res.json() == []


class TestSearch:
    """검색 API 테스트."""

    async def test_search(self, client, catalog):
        res = await client.get(f"{URL}/search", params={"q": "inc", "order": "rating_desc"})
        assert res.status_code == 200
        assert ids(res.json()) == [1, 2]

    async def test_search_with_genre(self, client, catalog):
        res = await client.get(f"{URL}/search", params={"q": "inc", "genre": "2"})
        assert res.status_code == 200
        assert ids(res.json()) == [2]

    async def test_search_with_order(self, client, catalog):
        res = await client.get(f"{URL}/search", params={"q": "e", "order": "year_desc"})
        assert ids(res.json()) == [4, 1, 3, 2, 6, 8]

    async def test_search_without_query(self, client, catalog):
        """검색어 없으면 빈 목록."""
        for params in ({}, {"q": ""}, {"q": "", "genre": "1"}):
            res = await client.get(f"{URL}/search", params=params)
            assert res.status_code == 200
            assert res.json() == []

    async def test_search_invalid_genre(self, client, catalog):
        """숫자가 아닌 장르 필터는 400."""
        for genre in ("abc", "1_0", "٣"):
            res = await client.get(f"{URL}/search", params={"q": "inc", "genre": genre})
            assert res.status_code == 400
            assert res.json()["detail"] == "Invalid ID"

    async def test_search_out_of_range_genre(self, client, catalog):
        """정수 컬럼 범위를 넘는 장르 필터는 빈 목록."""
        res = await client.get(f"{URL}/search", params={"q": "inc", "genre": str(2**64)})
        assert res.status_code == 200
        assert res.json() == []


class TestMovieDetail:
    """영화 상세 API 테스트."""

    async def test_get_movie(self, client, catalog):
        res = await client.get(f"{URL}/1")
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == 1
        assert data["title"] == "Inception"
        assert data["rating"] == 8.8
        assert data["keywords"] == ["dreams", "heist"]
        assert [a["first_name"] for a in data["actors"]] == ["Leonardo", "Elliot"]

    async def test_get_nonexistent_movie(self, client, catalog):
        """존재하지 않는 영화 조회 시 404."""
        res = await client.get(f"{URL}/99")
        assert res.status_code == 404
        assert res.json()["detail"] == "Movie not found"

    async def test_get_movie_invalid_id(self, client, catalog):
        """잘못된 ID 형식은 400."""
        for raw in ("abc", "-1", "1.5", "1_0", "٣"):
            res = await client.get(f"{URL}/{raw}")
            assert res.status_code == 400
            assert res.json()["detail"] == "Invalid ID"

    async def test_get_movie_out_of_range_id(self, client, catalog):
        """정수 컬럼 범위를 넘는 ID는 404."""
        for movie_id in (2**31, 2**64):
            res = await client.get(f"{URL}/{movie_id}")
            assert res.status_code == 404
            assert res.json()["detail"] == "Movie not found"

    async def test_get_movie_without_id(self, client, catalog):
        """ID 없이 상세 조회 시 400."""
        res = await client.get(f"{URL}/")
        assert res.status_code == 400
        assert res.json()["detail"] == "Invalid ID"


class TestGenres:
    """장르 API 테스트."""

    async def test_list_genres(self, client, catalog):
        res = await client.get(f"{URL}/genres")
        assert res.status_code == 200
        assert res.json() == [
            {"id": 1, "name": "Sci-Fi"},
            {"id": 2, "name": "Animation"},
            {"id": 3, "name": "Drama"},
        ]


class TestStoreFailure:
    """저장소 실패 시 500 응답 테스트."""

    @pytest.mark.parametrize("path", ["/top", "/random", "/search?q=inc", "/genres", "/1"])
    async def test_store_failure_returns_generic_500(self, broken_client, path):
        """저장소 내부 정보 없이 일반 오류 메시지."""
        res = await broken_client.get(f"{URL}{path}")
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}
        assert "no such table" not in res.text

    async def test_store_failure_is_logged(self, broken_client, caplog):
        """원인 예외는 로그에 남음."""
        with caplog.at_level(logging.ERROR, logger="app.services.movie_service"):
            res = await broken_client.get(f"{URL}/genres")
        assert res.status_code == 500
        assert "Failed to get genres" in caplog.text
        assert "OperationalError" in caplog.text


class TestAxiomShipping:
    """Axiom 전송 테스트 — 이벤트 루프를 막지 않음."""

    class _RecordingClient:
        def __init__(self, fail: bool = False) -> None:
            self.fail = fail
            self.calls: list[tuple[str, list, int]] = []

        def ingest_events(self, dataset, events):
            self.calls.append((dataset, events, threading.get_ident()))
            if self.fail:
                raise RuntimeError("axiom down")

    async def test_ingest_runs_in_worker_thread(self):
        """ingest_events는 워커 스레드에서 실행됨."""
        middleware = AxiomLoggingMiddleware(app)
        client = self._RecordingClient()
        middleware._client = client
        middleware._dataset = "movies"

        await middleware._ship({"path": "/api/v1/movies/top"})

        assert len(client.calls) == 1
        dataset, events, thread_id = client.calls[0]
        assert dataset == "movies"
        assert events == [{"path": "/api/v1/movies/top"}]
        assert thread_id != threading.get_ident()

    async def test_ingest_failure_is_logged(self, caplog):
        """전송 실패는 경고 로그만 남기고 요청에 영향 없음."""
        middleware = AxiomLoggingMiddleware(app)
        middleware._client = self._RecordingClient(fail=True)

        with caplog.at_level(logging.WARNING, logger="app.middleware.axiom_logging"):
            await middleware._ship({"path": "/api/v1/movies/top"})

        assert "Axiom ingest failed" in caplog.text


class TestHealthAndParsing:
    """헬스체크 및 ID 파싱 테스트."""

    async def test_health(self, client):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}

    def test_parse_id(self):
        assert parse_id("42") == 42
        assert parse_id("0") == 0
        assert parse_id("+5") == 5
        assert parse_id(str(2**64)) == 2**64
        for raw in ("", "x1", "-3", "2.0", "1_0", " 7 ", "7\n", "٣", "７"):
            with pytest.raises(BadRequestError):
                parse_id(raw)
