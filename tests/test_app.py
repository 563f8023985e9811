"""
Tests for the HTTP endpoints.
"""

import inspect

import pytest
from fastapi.testclient import TestClient

import app as app_module
from coverletter import provider
from coverletter.errors import GenerationError
from coverletter.render import count_pages
from coverletter.session import REQUIRED_FIELDS_MESSAGE


@pytest.fixture
def client():
    return TestClient(app_module.app)


@pytest.fixture
def fake_complete(monkeypatch):
    prompts = []

    def complete(prompt, settings=None):
        prompts.append(prompt)
        return "Dear team,\n\n- **Python**\n\nSincerely,"

    monkeypatch.setattr(provider, "complete", complete)
    return prompts


class TestProxy:
    def test_relays_text(self, client, fake_complete):
        resp = client.post("/api/generate-cover-letter", json={"prompt": "hi"})
        assert resp.status_code == 200
        assert resp.json() == {"text": "Dear team,\n\n- **Python**\n\nSincerely,"}
        assert fake_complete == ["hi"]

    def test_missing_prompt(self, client, fake_complete):
        resp = client.post("/api/generate-cover-letter", json={})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing required field: prompt"}
        assert fake_complete == []

    def test_provider_failure(self, client, monkeypatch):
        def boom(prompt, settings=None):
            raise RuntimeError("upstream down")

        monkeypatch.setattr(provider, "complete", boom)
        resp = client.post("/api/generate-cover-letter", json={"prompt": "hi"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Failed to generate cover letter", "details": "upstream down"}

    def test_missing_api_key(self, client, monkeypatch):
        def unconfigured(prompt, settings=None):
            raise provider.ProviderNotConfigured("Server configuration error: Missing API key")

        monkeypatch.setattr(provider, "complete", unconfigured)
        resp = client.post("/api/generate-cover-letter", json={"prompt": "hi"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Server configuration error: Missing API key"}

    def test_method_not_allowed(self, client):
        assert client.get("/api/generate-cover-letter").status_code == 405


class TestCoverLetter:
    def test_generates(self, client, fake_complete):
        resp = client.post("/cover-letter", json={
            "full_name": "Ada", "email": "a@b.c", "job_description": "Engines",
        })
        assert resp.status_code == 200
        assert resp.json()["text"].startswith("Dear team")
        assert "Engines" in fake_complete[0]

    def test_validation(self, client, fake_complete):
        resp = client.post("/cover-letter", json={"full_name": "Ada"})
        assert resp.status_code == 400
        assert resp.json() == {"error": REQUIRED_FIELDS_MESSAGE}
        assert fake_complete == []

    def test_generation_error(self, client, monkeypatch):
        def fail(prompt, settings=None):
            raise GenerationError("Unexpected response format from the generation API")

        monkeypatch.setattr(provider, "complete", fail)
        resp = client.post("/cover-letter", json={
            "full_name": "Ada", "email": "a@b.c", "job_description": "Engines",
        })
        assert resp.status_code == 502
        assert resp.json() == {"error": "Unexpected response format from the generation API"}


class TestPdf:
    def test_pdf(self, client):
        resp = client.post("/pdf", json={"full_name": "Ada Lovelace", "email": "a@b.c", "text": "Hello\n- **Go**"})
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert 'filename="cover-letter-ada-lovelace-' in resp.headers["content-disposition"]
        assert resp.headers["x-pages"] == "1"
        assert resp.headers["x-truncated"] == "false"
        assert count_pages(resp.content) == 1

    def test_truncated_flag(self, client):
        text = "\n".join("A fairly long line of letter text that keeps going." for _ in range(200))
        resp = client.post("/pdf", json={"full_name": "Ada", "text": text})
        assert resp.headers["x-truncated"] == "true"
        assert resp.headers["x-pages"] == "1"

    def test_missing_name(self, client):
        resp = client.post("/pdf", json={"text": "Hello"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Full name is required to build the PDF."}


def test_health(client):
    resp = client.get("/health")
    assert resp.json()["status"] == "ok"


@pytest.mark.parametrize("endpoint", ["generate_cover_letter", "cover_letter", "download_pdf", "health"])
def test_endpoints_run_in_threadpool(endpoint):
    assert not inspect.iscoroutinefunction(getattr(app_module, endpoint))
