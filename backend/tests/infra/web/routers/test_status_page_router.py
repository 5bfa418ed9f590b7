from datetime import date, datetime, timedelta, timezone

import pytest
from fastapi import FastAPI

import infra.web.routers.status_page_router as status_page_router_module
from core.domain.recent_activity import RecentActivity
from core.domain.theme import ThemeChoice
from tests.support.fakes import (
    FakeAccountRepository,
    FakeHistoryRepository,
    FakeStatusPageRepository,
    make_aggregate,
    make_status_page,
)

TODAY = date(2024, 6, 30)


@pytest.fixture
def status_page_repository() -> FakeStatusPageRepository:
    return FakeStatusPageRepository(
        [
            make_status_page("acme", owner_account_id=1, status_page_id=1, ssl_days_until_expiry=20),
            make_status_page("globex", owner_account_id=2, status_page_id=2, theme=ThemeChoice.RETRO),
        ]
    )


@pytest.fixture
def status_page_app(monkeypatch: pytest.MonkeyPatch, status_page_repository: FakeStatusPageRepository) -> FastAPI:
    history = FakeHistoryRepository(
        {
            1: [
                make_aggregate(TODAY, 100, 100),
                make_aggregate(TODAY - timedelta(days=3), 100, 80),
            ]
        },
        activity={
            1: RecentActivity(
                total_checks=200,
                successful_checks=197,
                last_checked_at=datetime(2024, 6, 30, 23, 55, tzinfo=timezone.utc),
                last_response_time_ms=182,
            )
        },
    )

    monkeypatch.setattr(status_page_router_module, "get_status_page_repository", lambda: status_page_repository)
    monkeypatch.setattr(
        status_page_router_module,
        "get_account_repository",
        lambda: FakeAccountRepository({1: "pro", 2: "free"}),
    )
    monkeypatch.setattr(status_page_router_module, "get_history_repository", lambda: history)

    app = FastAPI()
    app.include_router(status_page_router_module.router)
    return app


@pytest.mark.asyncio
async def test_get_status_page_returns_densified_view(status_page_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(status_page_app)

    response = await client.get("/status-page/acme", params={"today": TODAY.isoformat()})

    assert response.status_code == 200
    payload = response.json()

    assert payload["slug"] == "acme"
    assert payload["plan"] == "pro"
    assert payload["theme"] == "cyberpunk"
    assert payload["liveStatus"] == "OPERATIONAL"
    assert payload["liveStatusHeadline"] == "All Systems Operational"
    assert payload["retentionDays"] == 30
    assert payload["badgePeriods"] == ["24h", "7d", "30d"]
    assert len(payload["days"]) == 30
    assert payload["days"][-1] == {
        "date": "2024-06-30",
        "isMonitored": True,
        "uptimePercentage": 100.0,
        "totalChecks": 100,
        "successfulChecks": 100,
        "severity": "EXCELLENT",
        "severityLabel": "Excellent",
    }
    assert payload["days"][0]["isMonitored"] is False
    assert payload["days"][0]["severity"] is None
    assert payload["summary"]["monitoredDays"] == 2
    assert payload["summary"]["averageUptime"] == 90.0
    assert payload["summary"]["averageUptimeLabel"] == "90.00%"
    assert payload["uptimeSeverity"] == "WARNING"
    assert payload["uptimeSeverityLabel"] == "Fair"
    assert payload["todayUptime"] == 100.0
    assert payload["uptime24h"] == 98.5
    assert payload["uptime24hSeverity"] == "GOOD"
    assert payload["lastCheckedAt"] == "2024-06-30T23:55:00Z"
    assert payload["lastResponseTimeMs"] == 182
    assert payload["sslDaysUntilExpiry"] == 20
    assert payload["certificateSeverity"] == "SOON"
    assert payload["certificateSeverityLabel"] == "Expires within a month"


@pytest.mark.asyncio
async def test_get_status_page_applies_viewer_override(status_page_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(status_page_app)

    await client.put("/status-page/globex/theme/override", json={"theme": "matrix"}, headers={"X-Viewer-Id": "v1"})

    with_override = await client.get("/status-page/globex", headers={"X-Viewer-Id": "v1"})
    anonymous = await client.get("/status-page/globex")

    assert with_override.json()["theme"] == "matrix"
    assert anonymous.json()["theme"] == "retro"
    assert len(anonymous.json()["days"]) == 7


@pytest.mark.asyncio
async def test_get_status_page_returns_404_for_unknown_slug(status_page_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(status_page_app)

    response = await client.get("/status-page/missing")

    assert response.status_code == 404
    assert response.json() == {"detail": "Status page not found"}


@pytest.mark.asyncio
async def test_theme_endpoints_require_viewer_header(status_page_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(status_page_app)

    response = await client.get("/status-page/acme/theme")

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_viewer_override_lifecycle(status_page_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(status_page_app)
    headers = {"X-Viewer-Id": "viewer-1"}

    initial = await client.get("/status-page/globex/theme", headers=headers)
    assert initial.json() == {"theme": "retro", "ownerDefault": "retro", "viewerOverride": None}

    overridden = await client.put("/status-page/globex/theme/override", json={"theme": "minimal"}, headers=headers)
    assert overridden.status_code == 200
    assert overridden.json() == {"theme": "minimal", "ownerDefault": "retro", "viewerOverride": "minimal"}

    cleared = await client.delete("/status-page/globex/theme/override", headers=headers)
    assert cleared.status_code == 204

    final = await client.get("/status-page/globex/theme", headers=headers)
    assert final.json()["theme"] == "retro"


@pytest.mark.asyncio
async def test_set_override_rejects_unknown_theme(status_page_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(status_page_app)

    response = await client.put(
        "/status-page/acme/theme/override",
        json={"theme": "vaporwave"},
        headers={"X-Viewer-Id": "viewer-1"},
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_set_override_returns_404_for_unknown_slug(status_page_app: FastAPI, async_client_factory) -> None:
    client = await async_client_factory(status_page_app)

    response = await client.put(
        "/status-page/missing/theme/override",
        json={"theme": "retro"},
        headers={"X-Viewer-Id": "viewer-1"},
    )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_owner_default_change_clears_owner_override_only(
    status_page_app: FastAPI,
    status_page_repository: FakeStatusPageRepository,
    async_client_factory,
) -> None:
    client = await async_client_factory(status_page_app)
    owner_headers = {"X-Viewer-Id": "owner", "X-Account-Id": "1"}
    visitor_headers = {"X-Viewer-Id": "visitor"}

    await client.put("/status-page/acme/theme/override", json={"theme": "matrix"}, headers=owner_headers)
    await client.put("/status-page/acme/theme/override", json={"theme": "retro"}, headers=visitor_headers)

    response = await client.put("/status-page/acme/theme/default", json={"theme": "minimal"}, headers=owner_headers)

    assert response.status_code == 200
    assert response.json() == {"theme": "minimal", "ownerDefault": "minimal", "viewerOverride": None}
    assert status_page_repository.theme_updates == [(1, ThemeChoice.MINIMAL)]

    visitor = await client.get("/status-page/acme/theme", headers=visitor_headers)
    assert visitor.json() == {"theme": "retro", "ownerDefault": "minimal", "viewerOverride": "retro"}


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{"X-Viewer-Id": "intruder", "X-Account-Id": "2"}, {"X-Viewer-Id": "anon"}])
async def test_owner_default_change_rejects_non_owner(
    status_page_app: FastAPI,
    status_page_repository: FakeStatusPageRepository,
    async_client_factory,
    headers: dict[str, str],
) -> None:
    client = await async_client_factory(status_page_app)

    response = await client.put("/status-page/acme/theme/default", json={"theme": "minimal"}, headers=headers)

    assert response.status_code == 403
    assert status_page_repository.theme_updates == []
