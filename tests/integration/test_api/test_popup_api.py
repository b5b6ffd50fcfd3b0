"""Integration tests for popup layout endpoints."""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from voter_info.api.v1.popup import popup_router
from voter_info.core.config import Settings, get_settings


def _make_app() -> FastAPI:
    app = FastAPI()
    app.include_router(popup_router, prefix="/api/v1")
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    return app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=_make_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestPopupLayoutApi:
    async def test_layout(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/popup",
            json={"max_width": 300, "max_height": 200, "wrapper": {"name": "Jane Doe", "party": "Independent"}},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["frame"] == {"x": 0, "y": 0, "width": 93, "height": 52}
        assert [(line["field"], line["text"], line["style"]) for line in body["lines"]] == [
            ("name", "Jane Doe", "title"),
            ("party", "Independent", "body"),
        ]
        assert body["truncated"] is False

    async def test_minimal_wrapper(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/popup", json={"max_width": 300, "max_height": 200, "wrapper": {"name": "A"}})
        assert resp.status_code == 200
        frame = resp.json()["frame"]
        assert frame["width"] >= 60
        assert frame["height"] >= 40

    async def test_non_positive_bounds(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/popup", json={"max_width": 0, "max_height": 200, "wrapper": {"name": "A"}})
        assert resp.status_code == 400
        assert "positive" in resp.json()["detail"]

    async def test_wrapper_requires_name(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/popup", json={"max_width": 300, "max_height": 200, "wrapper": {}})
        assert resp.status_code == 422

    async def test_html(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/popup/html",
            json={"max_width": 300, "max_height": 200, "wrapper": {"name": "Jane & Sons"}},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "Jane &amp; Sons" in resp.text
