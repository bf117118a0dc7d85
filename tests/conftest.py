"""Shared test fixtures: settings, mock-transport clients and a fake FastAPI backend."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest
from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse

from src.config.settings import DashboardSettings
from src.transport.client import ApiClient

BASE_URL = "https://api.afflyt.test"
VALID_TOKEN = "valid-token"


# ---------------------------------------------------------------------------
# Keep AFFLYT_ env vars from the outer shell out of the tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_dashboard_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "AFFLYT_API_URL",
        "AFFLYT_LOG_LEVEL",
        "AFFLYT_JSON_LOGS",
        "AFFLYT_REQUEST_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> DashboardSettings:
    """Test settings pointing at the fake backend."""
    return DashboardSettings(api_url=BASE_URL, log_level="DEBUG", json_logs=False)


# ---------------------------------------------------------------------------
# Single-response clients
# ---------------------------------------------------------------------------

@pytest.fixture
def make_client() -> Callable[..., ApiClient]:
    """Build an ApiClient whose requests are answered by *handler*."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        base_url: str = BASE_URL,
    ) -> ApiClient:
        return ApiClient(base_url, transport=httpx.MockTransport(handler))

    return _make


# ---------------------------------------------------------------------------
# Fake dashboard backend
# ---------------------------------------------------------------------------

_LINKS = [
    {
        "hash": f"h{i:03d}",
        "originalUrl": f"https://www.amazon.it/dp/B0{i:06d}",
        "tag": "afflyt-21" if i % 2 else None,
        "clickCount": i * 3,
        "createdAt": f"2025-01-{(i % 28) + 1:02d}T10:00:00Z",
        "status": "active",
    }
    for i in range(1, 26)
]


def _unauthorized() -> JSONResponse:
    return JSONResponse(status_code=401, content={"success": False, "error": "Unauthorized"})


def _create_backend_app() -> FastAPI:
    """Minimal FastAPI app speaking the dashboard envelope."""
    app = FastAPI()
    app.state.requests = []

    @app.middleware("http")
    async def record_requests(request: Request, call_next):  # noqa: ANN001
        app.state.requests.append(
            {
                "method": request.method,
                "path": request.url.path,
                "query": str(request.url.query),
                "authorization": request.headers.get("authorization"),
            }
        )
        return await call_next(request)

    def authorized(authorization: str | None) -> bool:
        return authorization == f"Bearer {VALID_TOKEN}"

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "timestamp": "2025-01-01T00:00:00Z"}

    @app.get("/api/v1")
    async def api_info() -> dict:
        return {"success": True, "data": {"version": "1.5.0", "environment": "test"}}

    @app.get("/api/user/analytics/summary")
    async def summary(
        startDate: str | None = None,
        endDate: str | None = None,
        authorization: str | None = Header(default=None),
    ):
        if not authorized(authorization):
            return _unauthorized()
        return {
            "success": True,
            "data": {
                "totalLinks": 5,
                "totalClicks": 1247,
                "uniqueClicks": 900,
                "totalConversions": 89,
                "totalRevenue": 2847.5,
                "conversionRate": 7.1,
                "earningsPerClick": 2.28,
                "dataPeriod": {"startDate": startDate, "endDate": endDate},
            },
        }

    @app.get("/api/user/analytics/revenue-trend")
    async def revenue_trend(
        period: str = "30d",
        authorization: str | None = Header(default=None),
    ):
        if not authorized(authorization):
            return _unauthorized()
        return {
            "success": True,
            "data": [
                {"date": "2025-01-01", "revenue": 12.5, "conversions": 2},
                {"date": "2025-01-02", "revenue": 30.0, "conversions": 4},
            ],
        }

    @app.get("/api/user/analytics/clicks-trend")
    async def clicks_trend(authorization: str | None = Header(default=None)):
        if not authorized(authorization):
            return _unauthorized()
        return {
            "success": True,
            "data": [{"date": "2025-01-01", "clicks": 40, "uniqueClicks": 31}],
        }

    @app.get("/api/user/links")
    async def links(
        limit: int = 10,
        page: int = 1,
        authorization: str | None = Header(default=None),
    ):
        if not authorized(authorization):
            return _unauthorized()
        start = (page - 1) * limit
        return {
            "success": True,
            "data": {
                "links": _LINKS[start : start + limit],
                "pagination": {
                    "total": len(_LINKS),
                    "page": page,
                    "limit": limit,
                    "totalPages": -(-len(_LINKS) // limit),
                },
            },
        }

    @app.get("/api/user/me")
    async def me(authorization: str | None = Header(default=None)):
        if not authorized(authorization):
            return _unauthorized()
        return {
            "success": True,
            "data": {
                "id": "u-1",
                "email": "ada@example.com",
                "firstName": "Ada",
                "isEmailVerified": True,
            },
        }

    @app.post("/api/v1/links")
    async def create(request: Request, authorization: str | None = Header(default=None)):
        if not authorized(authorization):
            return _unauthorized()
        body = await request.json()
        if "amazon." not in body.get("originalUrl", ""):
            return JSONResponse(
                status_code=400,
                content={
                    "success": False,
                    "error": {
                        "message": "URL must be an Amazon product link",
                        "code": "VALIDATION_ERROR",
                    },
                },
            )
        return JSONResponse(
            status_code=201,
            content={
                "success": True,
                "data": {
                    "link": {
                        "hash": "newhash",
                        "originalUrl": body["originalUrl"],
                        "tag": body.get("tag"),
                        "clickCount": 0,
                        "status": "active",
                    }
                },
                "message": "Link created",
            },
        )

    return app


@pytest.fixture
def backend_app() -> FastAPI:
    return _create_backend_app()


@pytest.fixture
def backend_transport(backend_app: FastAPI) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=backend_app)


@pytest.fixture
def api_client(backend_transport: httpx.ASGITransport) -> ApiClient:
    return ApiClient(BASE_URL, transport=backend_transport)


