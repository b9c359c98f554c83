# tests/test_api.py
from __future__ import annotations

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

SAFE_LOSS_BODY = {
    "age": 30,
    "sex": "male",
    "occupation": "desk_job",
    "height_cm": 178,
    "weight_kg": 80,
    "target_weight_kg": 70,
    "timeline_weeks": 20,
    "workouts_per_week": 3,
    "session_minutes": 45,
    "intensity": "intermediate",
    "workout_types": ["strength"],
    "goals": ["weight-loss"],
}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_evaluate_safe_loss():
    r = client.post("/api/v1/plans/evaluate", json=SAFE_LOSS_BODY)
    assert r.status_code == 200
    data = r.json()
    assert data["may_proceed"] is True
    assert data["blocking"] == []
    assert data["metrics"]["goal_direction"] == "lose"
    assert data["metrics"]["deficit_cap"]["reason"] == "recommended"
    assert {f["severity"] for f in data["advisory"]} == {"advisory"}


def test_evaluate_blocked_plan_is_still_200():
    body = {**SAFE_LOSS_BODY, "target_weight_kg": 60, "timeline_weeks": 8}
    r = client.post("/api/v1/plans/evaluate", json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["may_proceed"] is False
    codes = [f["code"] for f in data["blocking"]]
    assert "EXTREMELY_UNREALISTIC" in codes

    extend = next(a for a in data["alternatives"] if a["strategy"] == "extend_timeline")
    assert extend["profile"]["timeline_weeks"] == 34
    assert extend["delta"]["changes"]["timeline_weeks"] == [8, 34]
    assert extend["result"]["may_proceed"] is True


def test_out_of_domain_value_is_422_with_faults():
    body = {**SAFE_LOSS_BODY, "weight_kg": -5}
    r = client.post("/api/v1/plans/evaluate", json=body)
    assert r.status_code == 422
    faults = r.json()["detail"]["faults"]
    assert [f["field"] for f in faults] == ["weight_kg"]


def test_unknown_enum_is_schema_422():
    body = {**SAFE_LOSS_BODY, "sex": "robot"}
    r = client.post("/api/v1/plans/evaluate", json=body)
    assert r.status_code == 422
    assert isinstance(r.json()["detail"], list)


def test_metrics_endpoint():
    r = client.post("/api/v1/plans/metrics", json=SAFE_LOSS_BODY)
    assert r.status_code == 200
    data = r.json()
    assert data["bmr"] == 1767.5
    assert data["macros"]["protein_g"] == 176
    assert data["body_fat"]["source"] == "bmi_formula"


def test_metrics_endpoint_rejects_faults():
    r = client.post("/api/v1/plans/metrics", json={**SAFE_LOSS_BODY, "timeline_weeks": 500})
    assert r.status_code == 422
    assert r.json()["detail"]["faults"][0]["field"] == "timeline_weeks"
