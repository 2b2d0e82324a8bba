from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from backend.companion.main import app
from backend.companion.routers.wellness import MESSAGE_REQUIRED_ERROR, get_companion_service
from backend.companion.service import WellnessCompanionService


@pytest.fixture
def client():
    app.dependency_overrides[get_companion_service] = lambda: WellnessCompanionService(
        provider=None, rng=random.Random(0)
    )
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_analyze_returns_recommendations(client):
    res = client.post("/api/wellness/analyze", json={"message": "I feel stressed and can't sleep"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["emotion"] == "stress"
    assert body["method"] == "rule-based"
    assert "sleepIssues" in body["intents"]
    assert body["activities"][0]["id"] == "sleep-routine"
    assert len(body["activities"]) <= 4
    assert isinstance(body["message"], str) and body["message"]
    assert "x-request-id" in {k.lower() for k in res.headers}


@pytest.mark.parametrize(
    "payload",
    [{"message": ""}, {}, {"message": 42}, {"message": None}, ["message"]],
)
def test_analyze_rejects_bad_message(client, payload):
    res = client.post("/api/wellness/analyze", json=payload)
    assert res.status_code == 400
    assert res.json()["error"] == MESSAGE_REQUIRED_ERROR


def test_analyze_rejects_non_json_body(client):
    res = client.post("/api/wellness/analyze", content=b"not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400


def test_analyze_rejects_overlong_message(client):
    res = client.post("/api/wellness/analyze", json={"message": "x" * 5000})
    assert res.status_code == 400


def test_analyze_unexpected_error_is_500_without_details():
    class _BrokenService:
        async def analyze_message(self, text, request_id=None):
            raise RuntimeError("db password leaked")

    app.dependency_overrides[get_companion_service] = lambda: _BrokenService()
    try:
        res = TestClient(app).post("/api/wellness/analyze", json={"message": "hi"})
    finally:
        app.dependency_overrides.clear()
    assert res.status_code == 500
    assert res.json()["error"] == "Failed to analyze message"
    assert "db password" not in res.text


def test_list_activities(client):
    res = client.get("/api/wellness/activities")
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["count"] == len(body["activities"])
    assert any(a["id"] == "box-breathing" for a in body["activities"])


def test_list_activities_filters(client):
    body = client.get("/api/wellness/activities", params={"difficulty": "intermediate", "quick": "true"}).json()
    assert {a["id"] for a in body["activities"]} == {
        "alternate-nostril-breathing",
        "energy-breathing",
        "anxiety-reframe",
    }


def test_get_activity_by_id(client):
    res = client.get("/api/wellness/activities/box-breathing")
    assert res.status_code == 200
    activity = res.json()["activity"]
    assert activity["id"] == "box-breathing"
    assert activity["category"] == "breathing"
    assert activity["effectiveness"]["stress"] == 0.89


def test_get_activity_not_found(client):
    res = client.get("/api/wellness/activities/does-not-exist")
    assert res.status_code == 404
    assert res.json()["error"] == "Activity not found"


def test_categories(client):
    body = client.get("/api/wellness/categories").json()
    assert body["success"] is True
    assert set(body["categories"]) == {
        "breathing",
        "meditation",
        "grounding",
        "movement",
        "journaling",
        "mindset",
        "sleep",
        "quick-reset",
    }
    assert body["categories"]["sleep"]["name"] == "Sleep"


def test_category_activities(client):
    body = client.get("/api/wellness/categories/grounding").json()
    assert body["category"] == "grounding"
    assert body["count"] == 1
    assert body["activities"][0]["id"] == "5-4-3-2-1-grounding"

    empty = client.get("/api/wellness/categories/nope").json()
    assert empty["count"] == 0
    assert empty["activities"] == []


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"


def test_ready_reports_sentiment_summary(client):
    res = client.get("/ready")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert "sentiment_provider" in body["sentiment"]
