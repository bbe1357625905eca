"""Axiom 로깅 미들웨어 테스트 — 민감 정보 마스킹 및 이벤트 전송.

Axiom logging middleware tests. The Axiom client is replaced by an
in-memory recorder so no network calls are made.
"""

import pytest
from fastapi import FastAPI, Response
from fastapi.responses import JSONResponse
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.middleware import axiom_logging
from app.middleware.axiom_logging import AxiomLoggingMiddleware, _error_detail, _mask_dict


class RecordingAxiomClient:
    """ingest_events 호출을 기록하는 가짜 Axiom 클라이언트."""

    instances: list["RecordingAxiomClient"] = []

    def __init__(self, token: str) -> None:
        self.token = token
        self.events: list[dict] = []
        RecordingAxiomClient.instances.append(self)

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        self.events.extend(events)


@pytest.fixture
def recorder(monkeypatch) -> type[RecordingAxiomClient]:
    RecordingAxiomClient.instances = []
    monkeypatch.setattr(axiom_logging, "AxiomClient", RecordingAxiomClient)
    monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "test-token")
    monkeypatch.setattr(settings, "AXIOM_DATASET", "fiton-test")
    return RecordingAxiomClient


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware)

    @app.post("/api/auth/login")
    async def login() -> JSONResponse:
        return JSONResponse(status_code=401, content={"error": "Invalid credentials"})

    @app.post("/api/auth/logout")
    async def logout(response: Response) -> dict:
        response.delete_cookie(settings.REFRESH_TOKEN_COOKIE_NAME, path="/")
        return {"message": "Logged out"}

    @app.post("/api/wardrobe")
    async def rejected() -> Response:
        response = JSONResponse(status_code=400, content={"detail": "Bad request"})
        response.set_cookie("a", "1")
        response.set_cookie("b", "2")
        return response

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


async def _call(app: FastAPI, method: str, path: str, **kwargs):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.request(method, path, **kwargs)


class TestMasking:
    """민감 필드 마스킹 테스트."""

    def test_masks_credentials(self):
        masked = _mask_dict({"email": "demo@example.com", "password": "Demo123!", "refreshToken": "x"})
        assert masked == {"email": "demo@example.com", "password": "***", "refreshToken": "***"}

    def test_masks_nested(self):
        masked = _mask_dict({"outer": [{"Cookie": "refreshToken=abc"}]})
        assert masked == {"outer": [{"Cookie": "***"}]}

    def test_error_detail_shapes(self):
        assert _error_detail(b'{"error": "Invalid credentials"}') == "Invalid credentials"
        assert _error_detail(b'{"detail": "Outfit not found"}') == "Outfit not found"
        assert _error_detail(b"plain failure") == "plain failure"


class TestAxiomLoggingMiddleware:
    """요청/응답 로깅 테스트."""

    async def test_logs_failed_login_without_password(self, recorder):
        res = await _call(
            _build_app(), "POST", "/api/auth/login",
            json={"email": "demo@example.com", "password": "Demo123!"},
        )
        assert res.status_code == 401
        assert res.json() == {"error": "Invalid credentials"}

        (event,) = recorder.instances[0].events
        assert event["path"] == "/api/auth/login"
        assert event["status_code"] == 401
        assert event["error"] == "Invalid credentials"
        assert event["request_body"]["password"] == "***"
        assert event["has_refresh_cookie"] is False

    async def test_records_cookie_presence_only(self, recorder):
        """쿠키 값은 기록하지 않고 존재 여부만 기록."""
        res = await _call(
            _build_app(), "POST", "/api/auth/logout",
            headers={"Cookie": f"{settings.REFRESH_TOKEN_COOKIE_NAME}=secret-value"},
        )
        assert res.status_code == 200

        (event,) = recorder.instances[0].events
        assert event["has_refresh_cookie"] is True
        assert "secret-value" not in str(event)

    async def test_error_response_keeps_all_cookies(self, recorder):
        """에러 응답 재구성 시 Set-Cookie 헤더 보존."""
        res = await _call(_build_app(), "POST", "/api/wardrobe", json={"name": "x"})
        assert res.status_code == 400
        assert len(res.headers.get_list("set-cookie")) == 2

    async def test_skips_health(self, recorder):
        await _call(_build_app(), "GET", "/health")
        assert recorder.instances[0].events == []

    async def test_passthrough_without_axiom(self, monkeypatch):
        """Axiom 미설정 시 패스스루."""
        monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "")
        res = await _call(_build_app(), "POST", "/api/auth/login", json={})
        assert res.status_code == 401
