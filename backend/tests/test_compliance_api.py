"""
Tests für /api/v1/compliance – Pausenpflicht, Pausenabzug, Tagesprüfung, Ruhezeit.
"""
import pytest

BASE_URL = "/api/v1/compliance"


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ── GET /compliance/required-break ────────────────────────────────────────────

@pytest.mark.asyncio
@pytest.mark.parametrize("work, expected", [(360, 0), (361, 30), (540, 30), (541, 45)])
async def test_required_break(client, work, expected):
    resp = await client.get(f"{BASE_URL}/required-break", params={"work_minutes": work})
    assert resp.status_code == 200
    assert resp.json() == {"work_minutes": work, "required_break_minutes": expected}


@pytest.mark.asyncio
async def test_required_break_negative_rejected(client):
    resp = await client.get(f"{BASE_URL}/required-break", params={"work_minutes": -1})
    assert resp.status_code == 422


# ── POST /compliance/auto-deduction ───────────────────────────────────────────

@pytest.mark.asyncio
async def test_auto_deduction_capped_at_6h(client):
    resp = await client.post(f"{BASE_URL}/auto-deduction", json={
        "raw_work_minutes": 385, "qualifying_break_minutes": 0,
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["auto_deducted_minutes"] == 25
    assert data["effective_work_minutes"] == 360
    assert data["effective_qualifying_break_minutes"] == 25


@pytest.mark.asyncio
async def test_auto_deduction_falls_back_to_30_min_rule(client):
    resp = await client.post(f"{BASE_URL}/auto-deduction", json={"raw_work_minutes": 565})
    assert resp.status_code == 200
    assert resp.json()["auto_deducted_minutes"] == 30
    assert resp.json()["effective_work_minutes"] == 535


@pytest.mark.asyncio
async def test_auto_deduction_negative_minutes_rejected(client):
    resp = await client.post(f"{BASE_URL}/auto-deduction", json={
        "raw_work_minutes": 400, "qualifying_break_minutes": -5,
    })
    assert resp.status_code == 422


# ── POST /compliance/check ────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_check_compliant_day(client):
    resp = await client.post(f"{BASE_URL}/check", json={"work_minutes": 480, "break_minutes": 30})
    assert resp.status_code == 200
    assert resp.json() == {"is_compliant": True, "notes": []}


@pytest.mark.asyncio
async def test_check_over_10h_with_missing_break(client):
    resp = await client.post(f"{BASE_URL}/check", json={"work_minutes": 601, "break_minutes": 30})
    assert resp.status_code == 200
    data = resp.json()
    assert data["is_compliant"] is False
    assert "10 hours" in data["notes"][0]
    assert "Insufficient break" in data["notes"][1]


# ── POST /compliance/rest-period ──────────────────────────────────────────────

@pytest.mark.asyncio
async def test_rest_period_ok(client):
    resp = await client.post(f"{BASE_URL}/rest-period", json={
        "previous_day_last_event": "2025-09-01T20:00:00+00:00",
        "current_day_first_event": "2025-09-02T07:00:00+00:00",
    })
    assert resp.status_code == 200
    assert resp.json() == {"rest_period_ok": True, "rest_minutes": 660, "min_rest_minutes": 660}


@pytest.mark.asyncio
async def test_rest_period_violation(client):
    resp = await client.post(f"{BASE_URL}/rest-period", json={
        "previous_day_last_event": "2025-09-01T22:00:00+02:00",
        "current_day_first_event": "2025-09-02T06:00:00+02:00",
    })
    assert resp.status_code == 200
    assert resp.json()["rest_period_ok"] is False
    assert resp.json()["rest_minutes"] == 480


@pytest.mark.asyncio
async def test_rest_period_without_previous_day(client):
    resp = await client.post(f"{BASE_URL}/rest-period", json={
        "current_day_first_event": "2025-09-02T06:00:00+00:00",
    })
    assert resp.status_code == 200
    assert resp.json()["rest_period_ok"] is True
    assert resp.json()["rest_minutes"] is None


@pytest.mark.asyncio
async def test_rest_period_requires_timezone(client):
    resp = await client.post(f"{BASE_URL}/rest-period", json={
        "previous_day_last_event": "2025-09-01T20:00:00",
        "current_day_first_event": "2025-09-02T07:00:00",
    })
    assert resp.status_code == 422
