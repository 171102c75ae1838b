import inspect

import pytest
from fastapi.testclient import TestClient

from api.router import analyze_batch, analyze_quick, limiter
from main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["skills_loaded"] >= 100


def test_list_skills():
    response = client.get("/skills")
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == len(data["skills"])
    names = [s["name"] for s in data["skills"]]
    assert "Java" in names
    assert names == sorted(names, key=lambda n: (n.lower(), n))


def test_analyze_quick():
    response = client.post(
        "/analyze/quick",
        json={
            "resume_text": "Java developer, strong SQL skills.",
            "job_description": "Looking for Java, Spring and Docker experience.",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["matched_skills"] == ["Java"]
    assert data["missing_skills"] == ["Docker", "Spring"]
    assert data["match_percentage"] == 33.3
    assert isinstance(data["suggestions"], list)
    assert data["report"].startswith("=")


def test_analyze_quick_rejects_blank_resume():
    response = client.post(
        "/analyze/quick",
        json={"resume_text": "   ", "job_description": "Java"},
    )
    assert response.status_code == 422


def test_analyze_quick_rejects_script_injection():
    response = client.post(
        "/analyze/quick",
        json={"resume_text": "Java", "job_description": "<script>alert(1)</script>"},
    )
    assert response.status_code == 422


def test_analyze_batch_preserves_order():
    response = client.post(
        "/analyze/batch",
        json={
            "items": [
                {"resume_text": "Python", "job_description": "Python and Docker"},
                {"resume_text": "Go", "job_description": "Rust"},
            ]
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["results"][0]["match_percentage"] == 50.0
    assert data["results"][1]["match_percentage"] == 0.0


def test_analyze_batch_rejects_empty():
    response = client.post("/analyze/batch", json={"items": []})
    assert response.status_code == 422


def test_analyze_quick_accepts_skill_heading_with_colon():
    response = client.post(
        "/analyze/quick",
        json={
            "resume_text": "Skills\nJavaScript: React, Docker",
            "job_description": "React and Docker",
        },
    )
    assert response.status_code == 200
    assert response.json()["matched_skills"] == ["Docker", "React"]


def test_analyze_endpoints_are_sync():
    # Sync handlers run in FastAPI's threadpool instead of the event loop
    assert not inspect.iscoroutinefunction(analyze_quick)
    assert not inspect.iscoroutinefunction(analyze_batch)
