"""
End-to-end through the HTTP surface (in-process, no network): fresh
MemStore per test, Gemini replaced by `FakeGenerator`.
"""
from __future__ import annotations

from fastapi.testclient import TestClient

from core.errors import ExternalServiceFailure
from core.health_tips import FALLBACK_TIPS
from main import create_app
from services.store import MemStore

TIPS = ["Walk after dinner", "Add leafy greens", "Lift twice a week"]


# ── /api/bmi ─────────────────────────────────────────────────────────
def test_bmi_with_model_tips(client, generator):
    generator.replies.append(TIPS)
    r = client.post(
        "/api/bmi",
        json={"userId": "u1", "height": 180, "weight": 75, "age": 30, "gender": "male"},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["bmi"] == 23.1
    assert body["category"] == "Normal Weight"
    assert body["recommendations"] == TIPS
    assert body["userId"] == "u1"
    assert {"id", "height", "weight", "createdAt"} <= body.keys()


def test_bmi_offline_uses_bmi_fallback(client):
    r = client.post("/api/bmi", json={"userId": "u1", "height": 160, "weight": 100, "age": 45})
    assert r.status_code == 200
    body = r.json()
    assert body["bmi"] == 39.1
    assert body["category"] == "Obese"
    assert body["recommendations"] == list(FALLBACK_TIPS["bmi"])


def test_bmi_imperial_body(client):
    r = client.post(
        "/api/bmi",
        json={"heightFeet": 5, "heightInches": 11, "weightLbs": 200, "weight": 50, "height": 100, "age": 28},
    )
    assert r.status_code == 200
    assert round(r.json()["height"], 2) == 180.34
    assert r.json()["category"] == "Overweight"


def test_bmi_missing_age_is_rejected_and_not_stored(client, store: MemStore):
    r = client.post("/api/bmi", json={"userId": "u1", "height": 180, "weight": 75})
    assert r.status_code == 400
    assert "age" in r.json()["message"]
    assert store.get_bmi_records_by_user("u1") == []


def test_bmi_zero_height_is_invalid(client):
    r = client.post("/api/bmi", json={"height": 0, "weight": 70, "age": 30})
    assert r.status_code == 400


def test_bmi_extreme_magnitudes_are_400(client):
    for height, weight in ((1e200, 70), (1e-200, 70), (1e-3, 1e308)):
        r = client.post("/api/bmi", json={"height": height, "weight": weight, "age": 30})
        assert r.status_code == 400, (height, weight)
        assert r.json() == {"message": "height and weight are out of range"}


def test_bmi_non_numeric_body_is_400(client):
    r = client.post("/api/bmi", json={"height": "tall", "weight": 70, "age": 30})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid request data"}


def test_bmi_history_by_user(client):
    for weight in (70, 72):
        client.post("/api/bmi", json={"userId": "u9", "height": 175, "weight": weight, "age": 33})
    client.post("/api/bmi", json={"userId": "other", "height": 175, "weight": 90, "age": 33})

    r = client.get("/api/bmi/u9")
    assert r.status_code == 200
    assert [rec["weight"] for rec in r.json()] == [70, 72]
    assert client.get("/api/bmi/nobody").json() == []


# ── /api/health-tips ─────────────────────────────────────────────────
def test_health_tips_offline(client):
    r = client.post("/api/health-tips", json={"category": "sleep"})
    assert r.json() == {"tips": list(FALLBACK_TIPS["sleep"])}


def test_health_tips_unknown_category(client):
    r = client.post("/api/health-tips", json={"category": "crystals"})
    assert r.json()["tips"] == list(FALLBACK_TIPS["general"])


def test_health_tips_from_model(client, generator):
    generator.replies.append(TIPS)
    r = client.post("/api/health-tips", json={"category": "exercise", "userProfile": {"age": 40}})
    assert r.json()["tips"] == TIPS
    assert "age=40" in generator.calls[0]["contents"]


# ── /api/diet-plans ──────────────────────────────────────────────────
def test_diet_plan_fallback_is_stored(client):
    r = client.post(
        "/api/diet-plans",
        json={"userId": "u1", "goal": "unknown_goal", "activityLevel": "moderate"},
    )
    assert r.status_code == 200
    plan = r.json()
    assert plan["totalCalories"] == 1650
    assert len(plan["meals"]) == 5
    assert plan["goal"] == "unknown_goal"

    listed = client.get("/api/diet-plans/u1").json()
    assert [p["id"] for p in listed] == [plan["id"]]


def test_diet_plan_from_model(client, generator):
    generator.replies.append(
        {
            "meals": [{"name": "Lunch", "food": "Lentil salad", "calories": 520}],
            "totalCalories": 520,
        }
    )
    r = client.post("/api/diet-plans", json={"goal": "weight_loss", "dietType": "vegetarian"})
    plan = r.json()
    assert plan["meals"] == [{"name": "Lunch", "food": "Lentil salad", "calories": 520}]
    assert plan["totalCalories"] == 520
    assert plan["dietType"] == "vegetarian"


def test_diet_plan_without_goal_uses_maintenance(client):
    r = client.post("/api/diet-plans", json={"userId": "u1"})
    assert r.status_code == 200
    assert r.json()["goal"] == "maintenance"
    assert r.json()["totalCalories"] == 1650


# ── /api/chat ────────────────────────────────────────────────────────
def test_chat_accumulates_in_one_session(client, generator):
    generator.replies.extend(["Drink water.", "Sleep more."])
    assert client.post("/api/chat", json={"userId": "u1", "message": "tip?"}).json() == {
        "response": "Drink water."
    }
    client.post("/api/chat", json={"userId": "u1", "message": "another?"})

    sessions = client.get("/api/chat/u1").json()
    assert len(sessions) == 1
    msgs = sessions[0]["messages"]
    assert [(m["role"], m["content"]) for m in msgs] == [
        ("user", "tip?"),
        ("ai", "Drink water."),
        ("user", "another?"),
        ("ai", "Sleep more."),
    ]


def test_chat_failure_is_generic(client, generator):
    generator.replies.append(ExternalServiceFailure("401 API key invalid: sk-123"))
    r = client.post("/api/chat", json={"userId": "u1", "message": "hello"})
    assert r.status_code == 502
    assert r.json() == {"message": "Failed to process chat message"}


# ── /api/profile ─────────────────────────────────────────────────────
def test_profile_lifecycle(client):
    assert client.get("/api/profile/u1").status_code == 404

    r = client.post(
        "/api/profile",
        json={"userId": "u1", "age": 30, "gender": "female", "fitnessGoals": ["run 5k"]},
    )
    assert r.status_code == 200
    created = r.json()
    assert created["fitnessGoals"] == ["run 5k"]

    r = client.put("/api/profile/u1", json={"allergies": "", "weight": 61.5})
    updated = r.json()
    assert updated["id"] == created["id"]
    assert updated["age"] == 30
    assert updated["weight"] == 61.5
    assert updated["allergies"] is None

    assert client.get("/api/profile/u1").json() == updated


def test_profile_post_replaces_existing(client):
    first = client.post("/api/profile", json={"userId": "u1", "age": 30, "allergies": "nuts"}).json()
    second = client.post("/api/profile", json={"userId": "u1", "age": 31}).json()
    assert second["id"] == first["id"]
    assert second["age"] == 31
    assert second["allergies"] is None


def test_profile_put_unknown_is_404(client):
    r = client.put("/api/profile/ghost", json={"age": 20})
    assert r.status_code == 404
    assert r.json() == {"message": "Profile not found"}


def test_profile_get_unknown_is_404(client):
    r = client.get("/api/profile/ghost")
    assert r.status_code == 404
    assert r.json() == {"message": "Profile not found"}


def test_profile_post_requires_user(client):
    assert client.post("/api/profile", json={"age": 20}).status_code == 400


# ── /api/users ───────────────────────────────────────────────────────
def test_users(client):
    r = client.post("/api/users", json={"username": "sam"})
    assert r.status_code == 201
    uid = r.json()["id"]
    assert client.get(f"/api/users/{uid}").json() == {"id": uid, "username": "sam"}
    assert client.post("/api/users", json={"username": "sam"}).status_code == 409
    assert client.get("/api/users/missing").status_code == 404


# ── meta / internal errors ───────────────────────────────────────────
def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_internal_error_hides_details():
    class BrokenStore(MemStore):
        def get_bmi_records_by_user(self, user_id):
            raise RuntimeError("index corrupted at 0xdeadbeef")

    app = create_app(BrokenStore())
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/bmi/u1")
    assert r.status_code == 500
    assert r.json() == {"message": "Internal server error"}
