import pytest
from fastapi import FastAPI

import infra.web.routers.badge_router as badge_router_module
from tests.support.fakes import FakeAccountRepository, FakeStatusPageRepository, make_status_page


@pytest.fixture
def badge_app(monkeypatch: pytest.MonkeyPatch) -> FastAPI:
    status_page_repository = FakeStatusPageRepository(
        [
            make_status_page("acme", owner_account_id=1),
            make_status_page("globex", owner_account_id=2),
        ]
    )

    monkeypatch.setattr(badge_router_module, "get_status_page_repository", lambda: status_page_repository)
    monkeypatch.setattr(
        badge_router_module,
        "get_account_repository",
        lambda: FakeAccountRepository({1: "free", 2: "business"}),
    )

    app = FastAPI()
    app.include_router(badge_router_module.router)
    return app


@pytest.mark.asyncio
async def test_get_badge_defaults_to_daily_period(badge_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(badge_app)

    response = await client.get("/badge/acme")

    assert response.status_code == 200
    assert response.json() == {
        "imageUrl": "https://status.example.com/api/badge/acme?period=24h",
        "markdownSnippet": (
            "[![Uptime 24h](https://status.example.com/api/badge/acme?period=24h)](https://status.example.com/status/acme)"
        ),
        "htmlSnippet": (
            '<a href="https://status.example.com/status/acme">'
            '<img src="https://status.example.com/api/badge/acme?period=24h" alt="Uptime 24h" /></a>'
        ),
        "period": "24h",
    }


@pytest.mark.asyncio
async def test_get_badge_allows_quarter_for_business(badge_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(badge_app)

    response = await client.get("/badge/globex", params={"period": "90d"})

    assert response.status_code == 200
    assert response.json()["period"] == "90d"


@pytest.mark.asyncio
async def test_get_badge_rejects_period_outside_plan(badge_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(badge_app)

    response = await client.get("/badge/acme", params={"period": "30d"})

    assert response.status_code == 403
    assert response.json()["detail"] == {
        "message": "Badge period '30d' requires a plan upgrade",
        "period": "30d",
        "allowedPeriods": ["24h", "7d"],
    }


@pytest.mark.asyncio
async def test_get_badge_returns_404_for_unknown_slug(badge_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(badge_app)

    response = await client.get("/badge/missing")

    assert response.status_code == 404
