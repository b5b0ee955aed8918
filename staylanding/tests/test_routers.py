from __future__ import annotations

from typing import Any

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

import staylanding.presentation.routers as routers


class _DummyRepo:
    """A stand-in for the repositories (we never call it in router tests)."""


@pytest.fixture()
def app() -> FastAPI:
    """
    Build a tiny FastAPI app with ONLY the router under test.

    Repository dependencies are overridden so no mock delay or database is involved.
    """
    test_app = FastAPI()
    test_app.include_router(routers.router)

    test_app.dependency_overrides[routers.get_reservation_repo] = lambda: _DummyRepo()
    test_app.dependency_overrides[routers.get_info_block_repo] = lambda: _DummyRepo()
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


def _landing(**overrides: Any) -> dict[str, Any]:
    base = {"view": "error", "message": "Failed to load reservation data. Please try again later."}
    base.update(overrides)
    return base


def test_get_landing_page_passes_reservation_id(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    async def _fake_get_landing_page_service(reservation_id, *, reservation_repo, info_block_repo, clock):
        seen["reservation_id"] = reservation_id
        seen["reservation_repo"] = reservation_repo
        return _landing(view="thank_you", title="Thank You for Staying!", message="We hope you enjoyed your visit")

    monkeypatch.setattr(routers, "get_landing_page_service", _fake_get_landing_page_service)

    r = client.get("/reservations/ABC1234")
    assert r.status_code == 200
    assert r.json()["view"] == "thank_you"
    assert seen["reservation_id"] == "ABC1234"
    assert isinstance(seen["reservation_repo"], _DummyRepo)


def test_get_landing_page_error_view_is_still_200(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    async def _fake_get_landing_page_service(reservation_id, **kwargs):
        return _landing()

    monkeypatch.setattr(routers, "get_landing_page_service", _fake_get_landing_page_service)

    r = client.get("/reservations/missing")
    assert r.status_code == 200
    assert r.json()["view"] == "error"
    assert r.json()["stay"] is None


def test_put_registration_forwards_flag(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, Any] = {}

    async def _fake_update_registration_service(reservation_id, is_registered, **kwargs):
        seen["args"] = (reservation_id, is_registered)
        return _landing(view="active_stay", registration_button_text="Update Registration")

    monkeypatch.setattr(routers, "update_registration_service", _fake_update_registration_service)

    r = client.put("/reservations/ABC1234/registration", json={"is_registered": True})
    assert r.status_code == 200
    assert r.json()["registration_button_text"] == "Update Registration"
    assert seen["args"] == ("ABC1234", True)


def test_put_registration_validation_error_returns_422(client: TestClient) -> None:
    r = client.put("/reservations/ABC1234/registration", json={})
    assert r.status_code == 422


def test_get_info_blocks(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    def _fake_list_info_blocks_service(info_block_repo):
        return [
            {
                "id": 1,
                "title": "Parking Policy",
                "description": "Learn where to park your car during your stay",
                "icon": "🚗",
                "content": "Park only in designated spots.",
                "detail_url": "/info/parking",
            }
        ]

    monkeypatch.setattr(routers, "list_info_blocks_service", _fake_list_info_blocks_service)

    r = client.get("/info-blocks")
    assert r.status_code == 200
    assert r.json()[0]["title"] == "Parking Policy"
    assert r.json()[0]["detail_link"] is None
