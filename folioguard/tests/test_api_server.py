# Copyright 2026 FolioGuard
# SPDX-License-Identifier: MIT
"""API tests for /health, /api/cards/* and /api/view/*."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient

from app.api.server import app

DIAGNOSTICS = [
    {"id": "riskDiversification", "status": "RED", "score": 30, "details": {"topHoldingPct": "41%"}},
    {"id": "costAnalysis", "status": "YELLOW", "score": 58, "details": {"feesPct": 0.5}},
    {"id": "taxEfficiency", "status": "GREEN", "score": 90},
]

RECOMMENDATIONS = [
    {"id": "trim", "title": "Trim top holding", "priority": 1, "category": "riskDiversification"},
    {"id": "fees", "title": "Swap to index funds", "priority": 3, "category": "costAnalysis"},
]


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "status": "healthy"}


def test_card_severity(client):
    r = client.post("/api/cards/severity", json={"diagnostics": DIAGNOSTICS})
    assert r.status_code == 200
    assert r.json()["items"] == [
        {"id": "riskDiversification", "severity": "EXTREME"},
        {"id": "costAnalysis", "severity": "NORMAL"},
        {"id": "taxEfficiency", "severity": "NORMAL"},
    ]


def test_cards_include_copy_and_recommendations(client):
    r = client.post("/api/cards", json={"diagnostics": DIAGNOSTICS, "recommendations": RECOMMENDATIONS})
    assert r.status_code == 200
    cards = r.json()["cards"]
    assert cards[0]["title"] == "Diversification Check"
    assert [rec["id"] for rec in cards[0]["recommendations"]] == ["trim"]
    assert cards[1]["actions"][0]["deep_link"] == "/holdings"


def test_action_plan_view_keeps_order(client):
    r = client.post("/api/view/action-plan", json={"recommendations": list(reversed(RECOMMENDATIONS))})
    assert r.status_code == 200
    items = r.json()["items"]
    assert [i["id"] for i in items] == ["fees", "trim"]
    assert [i["number"] for i in items] == [1, 2]
    assert [i["urgency"] for i in items] == ["Medium", "High"]


def test_action_plan_view_empty(client):
    r = client.post("/api/view/action-plan", json={})
    assert r.status_code == 200
    assert r.json()["is_empty"] is True
    assert r.json()["message"].startswith("No critical actions detected right now.")


def test_shock_alert_view_and_dismissal(client):
    signal = {
        "severity": "ELEVATED",
        "message": "Rates spiked",
        "drivers": ["Duration risk"],
        "actions": [{"label": "Review bonds", "kind": "RISK_REDUCE", "deepLink": "/portfolio"}],
    }
    r = client.post("/api/view/shock-alert", json=signal)
    assert r.status_code == 200
    alert = r.json()["alert"]
    assert alert["emphasized"] is False
    assert alert["actions"][0]["key"] == "RISK_REDUCE-0"

    r = client.post("/api/view/shock-alert", json={**signal, "dismissed": [alert["key"]]})
    assert r.status_code == 200
    assert r.json()["alert"] is None


def test_shock_alert_unknown_severity_is_422(client):
    r = client.post("/api/view/shock-alert", json={"severity": "APOCALYPSE", "message": "x"})
    assert r.status_code == 422


def test_dashboard_view(client):
    r = client.post(
        "/api/view/dashboard",
        json={"diagnostics": DIAGNOSTICS, "recommendations": RECOMMENDATIONS, "dismissed": []},
    )
    assert r.status_code == 200
    data = r.json()
    assert len(data["cards"]) == 3
    assert [i["id"] for i in data["action_plan"]["items"]] == ["trim", "fees"]
    assert data["shock_alert"]["severity"] == "ELEVATED"
    assert data["shock_alert"]["drivers"] == ["Diversification Check"]


@pytest.mark.parametrize(
    "payload",
    [
        {"diagnostics": "nope"},
        {"diagnostics": [{"status": "RED", "score": 10}]},
        {"diagnostics": [{"id": "x", "status": "PURPLE", "score": 10}]},
        {"diagnostics": [], "recommendations": [{"id": "r", "title": "R", "priority": 0}]},
    ],
)
def test_invalid_payloads_are_422(client, payload):
    r = client.post("/api/view/dashboard", json=payload)
    assert r.status_code == 422


def test_api_key_required_when_configured(client, monkeypatch):
    monkeypatch.setenv("FOLIOGUARD_API_KEY", "s3cret")
    assert client.get("/health").status_code == 200
    r = client.post("/api/cards/severity", json={"diagnostics": []})
    assert r.status_code == 401
    r = client.post("/api/cards/severity", json={"diagnostics": []}, headers={"X-API-Key": "s3cret"})
    assert r.status_code == 200
    assert r.json() == {"items": []}


def test_null_score_is_accepted(client):
    r = client.post(
        "/api/cards/severity",
        json={"diagnostics": [{"id": "costAnalysis", "status": "RED", "score": None, "details": {"feesPct": 0.9}}]},
    )
    assert r.status_code == 200
    assert r.json()["items"] == [{"id": "costAnalysis", "severity": "EXTREME"}]


def test_string_drivers_render_as_one_driver(client):
    r = client.post("/api/view/shock-alert", json={"severity": "EXTREME", "message": "m", "drivers": "Fees high"})
    assert r.status_code == 200
    assert r.json()["alert"]["drivers"] == ["Fees high"]
