from __future__ import annotations

import sqlite3

import pytest
from fastapi.testclient import TestClient

from tests.conftest import reload_app


FULL_PAYLOAD = {
    "name": "Ada",
    "age": 12,
    "answers": [
        {"q": 1, "a": "Very familiar"},
        {"q": 2, "a": "Frequently"},
        {"q": 3, "a": "Very important"},
        {"q": 4, "a": "Disagree"},
        {"q": 5, "a": "Almost Always"},
        {"q": 6, "a": "Agree"},
        {"q": 7, "a": "Neutral"},
        {"q": 8, "a": "Rarely"},
        {"q": 9, "a": "Agree"},
        {"q": 10, "a": "I realised I learn best by teaching others."},
    ],
}


def test_health_and_questions(app_env):
    _storage, app_module = app_env
    client = TestClient(app_module.app)

    assert client.get("/api/health").json() == {"ok": True}

    resp = client.get("/api/questions")
    assert resp.status_code == 200
    qs = resp.json()["questions"]
    assert sorted(q["id"] for q in qs) == list(range(1, 11))
    text_q = next(q for q in qs if q["id"] == 10)
    assert text_q["type"] == "text" and "options" not in text_q


def test_submit_scores_persists_and_logs(tmp_path, monkeypatch):
    storage, app_module = reload_app(tmp_path, monkeypatch)
    client = TestClient(app_module.app)

    resp = client.post("/api/submit", json=FULL_PAYLOAD)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["timestamp"]
    assert body["dominantType"] == "Openness"
    assert body["overallScore"] == 2.97
    assert body["categoryScores"]["Conscientiousness"] == 4.33
    assert body["recommendedLearningStyles"] == ["Visual", "Read/Write", "Kinesthetic"]
    assert len(body["calculationSteps"]) == 10

    stored = storage.load_submission(body["id"])
    assert stored["name"] == "Ada"
    assert stored["age"] == 12
    assert stored["timestamp"] == body["timestamp"]
    assert stored["categoryScores"] == body["categoryScores"]
    assert stored["recommendedLearningStyles"] == body["recommendedLearningStyles"]
    assert stored["answers"] == FULL_PAYLOAD["answers"]

    log_text = (tmp_path / "submissions_log.txt").read_text(encoding="utf-8")
    assert log_text.startswith("=== Submission ===\n")
    assert "Name: Ada" in log_text
    assert body["calculationSteps"][0] in log_text

    fetched = client.get(f"/api/submissions/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["personalizedDescription"] == body["personalizedDescription"]


def test_submissions_get_incrementing_ids(app_env):
    _storage, app_module = app_env
    client = TestClient(app_module.app)
    first = client.post("/api/submit", json={"name": "A", "age": 10, "answers": []}).json()
    second = client.post("/api/submit", json={"name": "B", "age": 11, "answers": []}).json()
    assert second["id"] == first["id"] + 1
    assert first["recommendedLearningStyles"] == ["Multimodal"]


def test_unknown_submission_is_404(app_env):
    _storage, app_module = app_env
    client = TestClient(app_module.app)
    resp = client.get("/api/submissions/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Submission not found"}


@pytest.mark.parametrize(
    "payload",
    [
        {"age": 12, "answers": []},
        {"name": "", "age": 12, "answers": []},
        {"name": "   ", "age": 12, "answers": []},
        {"name": "Ada", "answers": []},
        {"name": "Ada", "age": 0, "answers": []},
        {"name": "Ada", "age": -3, "answers": []},
        {"name": "Ada", "age": 12},
        {"name": "Ada", "age": 12, "answers": "Agree"},
        {"name": "Ada", "age": 12, "answers": [{"q": 1}]},
        {"name": "Ada", "age": 12, "answers": [{"q": "first", "a": "Agree"}]},
        {"name": "Ada", "age": 12, "answers": [{"q": 1, "a": 5}]},
    ],
)
def test_invalid_payload_rejected_before_scoring(app_env, payload, monkeypatch):
    storage, app_module = app_env

    def _must_not_score(*a, **kw):
        raise AssertionError("scoring should not run")

    monkeypatch.setattr(app_module, "compute_result", _must_not_score)
    client = TestClient(app_module.app)
    resp = client.post("/api/submit", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid payload"}
    assert storage.load_submission(1) is None


def test_persistence_failure_is_opaque(app_env, monkeypatch):
    _storage, app_module = app_env

    def _broken(*a, **kw):
        raise sqlite3.OperationalError("disk I/O error at /secret/path")

    monkeypatch.setattr(app_module, "save_submission", _broken)
    client = TestClient(app_module.app)
    resp = client.post("/api/submit", json=FULL_PAYLOAD)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Server error"}
    assert "secret" not in resp.text


def test_notification_scheduled_when_configured(tmp_path, monkeypatch):
    _storage, app_module = reload_app(tmp_path, monkeypatch)
    monkeypatch.setenv("EMAIL_TO", "staff@test")
    monkeypatch.setenv("EMAIL_USER", "bot@test")
    monkeypatch.setenv("EMAIL_PASS", "pw")

    sent = []
    monkeypatch.setattr(app_module, "send_summary", lambda *a: sent.append(a) or True)
    client = TestClient(app_module.app)
    resp = client.post("/api/submit", json=FULL_PAYLOAD)
    assert resp.status_code == 200
    assert len(sent) == 1
    name, age, result, entry, settings = sent[0]
    assert (name, age) == ("Ada", 12)
    assert result.dominant_type == "Openness"
    assert entry.startswith("=== Submission ===")
    assert settings.to == "staff@test"


def test_notification_skipped_without_credentials(app_env, monkeypatch):
    _storage, app_module = app_env
    sent = []
    monkeypatch.setattr(app_module, "send_summary", lambda *a: sent.append(a) or True)
    client = TestClient(app_module.app)
    assert client.post("/api/submit", json=FULL_PAYLOAD).status_code == 200
    assert sent == []


def test_notification_failure_does_not_fail_submission(tmp_path, monkeypatch):
    _storage, app_module = reload_app(tmp_path, monkeypatch)
    monkeypatch.setenv("EMAIL_TO", "staff@test")
    monkeypatch.setenv("EMAIL_USER", "bot@test")
    monkeypatch.setenv("EMAIL_PASS", "pw")
    import quiz_core.notify as notify

    def _refuse(*a, **kw):
        raise ConnectionRefusedError("smtp down")

    monkeypatch.setattr(notify.smtplib, "SMTP", _refuse)
    client = TestClient(app_module.app)
    resp = client.post("/api/submit", json=FULL_PAYLOAD)
    assert resp.status_code == 200
    assert resp.json()["success"] is True
