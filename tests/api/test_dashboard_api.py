from datetime import timedelta
from decimal import Decimal

from src.components.advisory import UNAVAILABLE_MESSAGE, AdvisoryUnavailable
from src.components.orders import RecordOrderInput


def seed_orders(ctx, clock):
    now = clock.now()
    ctx.order_service.record(RecordOrderInput(branch_id="b1", total=Decimal("100")))
    clock.set(now - timedelta(days=8))
    ctx.order_service.record(RecordOrderInput(branch_id="b2", total=Decimal("50")))
    clock.set(now)


def test_dashboard_requires_login(client):
    assert client.get("/api/dashboard").status_code == 401


def test_dashboard_daily_all_branches(logged_in, test_ctx, clock):
    seed_orders(test_ctx, clock)

    response = logged_in.get("/api/dashboard", params={"branch": "ALL", "window": "DAILY"})

    assert response.status_code == 200
    data = response.json()
    assert Decimal(data["total_revenue"]) == Decimal("100")
    assert data["total_orders"] == 1
    assert data["bucket_type"] == "total"
    assert data["series"][0]["label"] == "Today"
    assert data["currency_symbol"] == "$"


def test_dashboard_branch_weekly(logged_in, test_ctx, clock):
    seed_orders(test_ctx, clock)

    data = logged_in.get("/api/dashboard", params={"branch": "b1", "window": "weekly"}).json()

    assert data["window"] == "WEEKLY"
    assert data["total_orders"] == 1
    assert data["by_branch"][0]["name"] == "Main Branch"


def test_dashboard_custom_range(logged_in, test_ctx, clock):
    seed_orders(test_ctx, clock)

    data = logged_in.get(
        "/api/dashboard",
        params={"window": "CUSTOM", "start": "2024-06-01", "end": "2024-06-07"},
    ).json()

    assert data["total_orders"] == 1
    assert Decimal(data["total_revenue"]) == Decimal("50")


def test_dashboard_rejects_bad_window(logged_in):
    response = logged_in.get("/api/dashboard", params={"window": "HOURLY"})
    assert response.status_code == 422


def test_dashboard_rejects_bad_date(logged_in):
    response = logged_in.get("/api/dashboard", params={"window": "CUSTOM", "start": "June"})
    assert response.status_code == 422


def test_insight(logged_in, advisory):
    response = logged_in.post("/api/dashboard/insight", json={"window": "MONTHLY"})

    assert response.status_code == 200
    assert response.json() == {"text": advisory.text, "ok": True, "applied": True}


def test_insight_fallback_is_not_an_error(logged_in, advisory):
    advisory.error = AdvisoryUnavailable("no key")

    response = logged_in.post("/api/dashboard/insight", json={})

    assert response.status_code == 200
    assert response.json()["text"] == UNAVAILABLE_MESSAGE
    assert response.json()["ok"] is False


def test_dashboard_reports_pending_storage_warnings(logged_in, backend, test_ctx):
    backend.quota_bytes = 1
    test_ctx.branch_service.delete("b2")

    first = logged_in.get("/api/dashboard").json()["storage"]
    second = logged_in.get("/api/dashboard").json()["storage"]

    assert first["durable"] is False
    assert "app-branches" in first["warnings"][0]
    # Warnings are handed out once
    assert second == {"durable": False, "warnings": []}


def test_dashboard_storage_ok(logged_in):
    assert logged_in.get("/api/dashboard").json()["storage"] == {"durable": True, "warnings": []}
