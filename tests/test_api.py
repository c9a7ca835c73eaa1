"""
HTTP surface — every route against an in-memory catalog with known
subscriptions.
"""

from io import BytesIO

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from glowai.main import app
from glowai.repository import InMemoryCatalog
from glowai.schemas import SubscriptionPlan, SubscriptionStatus, SubscriptionTier
from glowai.seed import sample_catalog
from glowai.services.recommendation import get_catalog_store

QUESTIONNAIRE_PROFILE = {
    "source": "Questionnaire",
    "skin_type": "Oily",
    "main_concerns": ["Acne", "Dullness"],
    "age_group": "18-25",
    "skincare_goal": "Glowing skin",
}

FACE_SCAN_PROFILE = {
    "source": "FaceScan",
    "skin_type": "Combination",
    "detected_skin_tone": "Medium",
    "confidence": 0.87,
}


@pytest.fixture
def client():
    store = InMemoryCatalog(
        sample_catalog(),
        subscriptions={
            "premium-user": SubscriptionTier(plan=SubscriptionPlan.PREMIUM),
            "standard-user": SubscriptionTier(plan=SubscriptionPlan.STANDARD),
            "lapsed-user": SubscriptionTier(
                plan=SubscriptionPlan.PREMIUM, status=SubscriptionStatus.EXPIRED
            ),
        },
    )
    app.dependency_overrides[get_catalog_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _png() -> bytes:
    buf = BytesIO()
    Image.new("RGB", (128, 128), color=(180, 140, 120)).save(buf, format="PNG")
    return buf.getvalue()


class TestMeta:
    def test_health(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert res.json()["status"] == "healthy"

    def test_plans(self, client):
        res = client.get("/plans")
        assert res.status_code == 200
        assert [p["id"] for p in res.json()] == ["standard", "premium"]


class TestQuestionnaireRoutes:
    def test_questions(self, client):
        questions = client.get("/questionnaire").json()["questions"]
        assert len(questions) == 4
        assert questions[1]["type"] == "multiple"

    def test_submit_complete(self, client):
        answers = {k: v for k, v in QUESTIONNAIRE_PROFILE.items() if k != "source"}
        res = client.post("/questionnaire", json=answers)
        assert res.status_code == 200
        data = res.json()
        assert data["source"] == "Questionnaire"
        assert sorted(data["main_concerns"]) == ["Acne", "Dullness"]

    def test_submit_incomplete(self, client):
        res = client.post("/questionnaire", json={"skin_type": "Oily", "main_concerns": ["Acne"]})
        assert res.status_code == 422
        assert res.json()["missing"] == ["age_group", "skincare_goal"]

    def test_unknown_option(self, client):
        res = client.post("/questionnaire", json={"skin_type": "Purple"})
        assert res.status_code == 422


class TestFaceScanRoutes:
    def test_analyze(self, client):
        res = client.post(
            "/face-scan/analyze",
            files={"image": ("face.png", _png(), "image/png")},
        )
        assert res.status_code == 200
        data = res.json()
        assert data["estimate"]["skin_type"] == "Combination"
        assert data["confidence_label"] == "high"

    def test_analyze_failure_is_recoverable(self, client):
        res = client.post(
            "/face-scan/analyze",
            files={"image": ("face.png", b"garbage", "image/png")},
        )
        assert res.status_code == 422
        assert res.json()["retry"] is True

    def test_confirm_with_override(self, client):
        res = client.post(
            "/face-scan/confirm",
            json={
                "estimate": {"skin_tone": "Medium", "skin_type": "Combination", "confidence": 0.87},
                "overrides": {"skin_type": "Dry"},
            },
        )
        assert res.status_code == 200
        data = res.json()
        assert data["skin_type"] == "Dry"
        assert data["confidence"] == 0.87
        assert data["main_concerns"] == []

    def test_confirm_rejects_confidence_override(self, client):
        res = client.post(
            "/face-scan/confirm",
            json={
                "estimate": {"skin_tone": "Medium", "skin_type": "Combination", "confidence": 0.87},
                "overrides": {"confidence": 1.0},
            },
        )
        assert res.status_code == 422


class TestProductRoutes:
    def test_unfiltered(self, client):
        data = client.get("/products").json()
        assert data["count"] == data["total"] == 8

    def test_filtered(self, client):
        data = client.get("/products", params={"skin_type": "Oily", "goal": "Hydration"}).json()
        assert [p["id"] for p in data["products"]] == ["1", "4"]
        assert data["count"] == 2
        assert data["total"] == 8

    def test_search(self, client):
        data = client.get("/products", params={"search": "ordinary"}).json()
        assert [p["id"] for p in data["products"]] == ["2", "6"]

    def test_no_matches(self, client):
        data = client.get("/products", params={"search": "zzz"}).json()
        assert data["products"] == []
        assert data["count"] == 0

    def test_blank_search_is_ignored(self, client):
        data = client.get("/products", params={"search": " "}).json()
        assert data["count"] == 8

    def test_rating_out_of_range(self, client):
        assert client.get("/products", params={"min_rating": 6}).status_code == 422


class TestSubscriptionRoute:
    def test_requires_session(self, client):
        assert client.get("/me/subscription").status_code == 401

    def test_premium(self, client):
        res = client.get("/me/subscription", headers={"X-User-Id": "premium-user"})
        assert res.status_code == 200
        assert res.json()["status_label"] == "Active"

    def test_unknown_user_has_no_plan(self, client):
        res = client.get("/me/subscription", headers={"X-User-Id": "someone"})
        assert res.json()["status_label"] == "No Plan"

    def test_subscribe_requires_session(self, client):
        res = client.post("/subscriptions", json={"plan": "premium"})
        assert res.status_code == 401

    def test_subscribe_then_read_back(self, client):
        headers = {"X-User-Id": "new-user"}
        res = client.post(
            "/subscriptions",
            json={"plan": "standard", "period": "daily"},
            headers=headers,
        )
        assert res.status_code == 201
        receipt = res.json()
        assert receipt["price"] == 35
        assert receipt["currency"] == "KSh"
        assert receipt["status_label"] == "Active"

        summary = client.get("/me/subscription", headers=headers).json()
        assert summary["tier"]["plan"] == "standard"
        assert summary["status_label"] == "Active"

    def test_subscribe_unlocks_personalization(self, client):
        headers = {"X-User-Id": "new-user"}
        client.post("/subscriptions", json={"plan": "premium"}, headers=headers)
        res = client.post(
            "/recommendations", json={"profile": FACE_SCAN_PROFILE}, headers=headers
        )
        assert res.json()["routine"] is not None

    def test_subscribe_free_plan_rejected(self, client):
        res = client.post(
            "/subscriptions", json={"plan": "none"}, headers={"X-User-Id": "new-user"}
        )
        assert res.status_code == 422


class TestRecommendationRoute:
    def test_anonymous_gets_general(self, client):
        res = client.post("/recommendations", json={"profile": QUESTIONNAIRE_PROFILE})
        assert res.status_code == 200
        data = res.json()
        assert data["personalized"] is False
        assert data["routine"] is None
        assert len(data["products"]) == 1

    def test_standard(self, client):
        res = client.post(
            "/recommendations",
            json={"profile": FACE_SCAN_PROFILE},
            headers={"X-User-Id": "standard-user"},
        )
        data = res.json()
        assert data["personalized"] is True
        assert data["routine"] is None
        assert len(data["products"]) == 3

    def test_premium_gets_routine(self, client):
        res = client.post(
            "/recommendations",
            json={"profile": FACE_SCAN_PROFILE},
            headers={"X-User-Id": "premium-user"},
        )
        data = res.json()
        assert data["personalized"] is True
        assert data["routine"]["morning"][0] == "Daily Sunscreen SPF 30"
        assert data["routine"]["afternoon"] == ["Hydrating Facial Mist"]
        assert len(data["products"]) == 7

    def test_lapsed_premium_gets_general(self, client):
        res = client.post(
            "/recommendations",
            json={"profile": FACE_SCAN_PROFILE},
            headers={"X-User-Id": "lapsed-user"},
        )
        assert res.json()["personalized"] is False

    def test_premium_no_matches(self, client):
        profile = dict(QUESTIONNAIRE_PROFILE, skin_type="Dry", skincare_goal="Acne-free")
        res = client.post(
            "/recommendations",
            json={"profile": profile},
            headers={"X-User-Id": "premium-user"},
        )
        assert res.status_code == 200
        assert res.json()["products"] == []
        assert res.json()["routine"] is None

    def test_incomplete_profile(self, client):
        res = client.post(
            "/recommendations",
            json={"profile": {"source": "Questionnaire", "skin_type": "Oily"}},
        )
        assert res.status_code == 422
        assert "main_concerns" in res.json()["missing"]
