"""
Tests for the generation client, the prompt and the form session.
"""

import datetime as dt

import pytest
import requests

from coverletter.client import GenerationClient
from coverletter.errors import BusyError, GenerationError, LayoutPreconditionError, ValidationError
from coverletter.prompt import build_prompt
from coverletter.render import count_pages
from coverletter.session import REQUIRED_FIELDS_MESSAGE, CoverLetterSession


class FakeResponse:
    def __init__(self, status_code, payload=None, body_is_json=True):
        self.status_code = status_code
        self._payload = payload
        self._body_is_json = body_is_json

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if not self._body_is_json:
            raise ValueError("not json")
        return self._payload


class FakeHttp:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc:
            raise self.exc
        return self.response


class FakeGenerator:
    def __init__(self, text="Dear team,\n\nI'd love to join.\n\nSincerely,", error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.text


def client_with(response=None, exc=None):
    http = FakeHttp(response, exc)
    return GenerationClient(endpoint="http://test/api/generate-cover-letter", timeout=5, session=http), http


# --------------------------------------------------------------------------- #
# Generation client
# --------------------------------------------------------------------------- #

class TestGenerationClient:
    def test_success(self):
        client, http = client_with(FakeResponse(200, {"text": "Hello"}))
        assert client.generate("write it") == "Hello"
        url, kwargs = http.calls[0]
        assert url == "http://test/api/generate-cover-letter"
        assert kwargs["json"] == {"prompt": "write it"}
        assert kwargs["timeout"] == 5

    def test_error_payload(self):
        client, _ = client_with(FakeResponse(429, {"error": "quota exceeded"}))
        with pytest.raises(GenerationError) as exc:
            client.generate("p")
        assert exc.value.message == "quota exceeded"
        assert exc.value.status_code == 429

    def test_error_with_details(self):
        client, _ = client_with(FakeResponse(500, {"error": "Failed to generate cover letter", "details": "boom"}))
        with pytest.raises(GenerationError) as exc:
            client.generate("p")
        assert exc.value.details == "boom"

    def test_error_without_json(self):
        client, _ = client_with(FakeResponse(502, body_is_json=False))
        with pytest.raises(GenerationError, match="Failed to generate cover letter"):
            client.generate("p")

    def test_success_without_text(self):
        client, _ = client_with(FakeResponse(200, {"answer": "Hello"}))
        with pytest.raises(GenerationError, match="Malformed"):
            client.generate("p")

    def test_network_failure(self):
        client, _ = client_with(exc=requests.ConnectionError("refused"))
        with pytest.raises(GenerationError, match="refused"):
            client.generate("p")


# --------------------------------------------------------------------------- #
# Prompt
# --------------------------------------------------------------------------- #

class TestPrompt:
    def test_includes_job_and_rules(self):
        prompt = build_prompt("Ada", "Build engines {fast}")
        assert "Build engines {fast}" in prompt
        assert "---***---" in prompt
        assert "'## '" in prompt
        assert "has not provided a resume" in prompt
        assert "personal website/portfolio" not in prompt

    def test_resume_and_website(self):
        prompt = build_prompt("Ada", "JD", resume="Analytical Engine", website="ada.dev")
        assert "--- RESUME START ---\nAnalytical Engine" in prompt
        assert "personal website/portfolio: ada.dev" in prompt


# --------------------------------------------------------------------------- #
# Session
# --------------------------------------------------------------------------- #

def filled_session(generator):
    session = CoverLetterSession(generator)
    session.full_name = "Ada Lovelace"
    session.email = "ada@example.com"
    session.job_description = "Engine programmer"
    return session


class TestSession:
    def test_validation_before_network(self):
        generator = FakeGenerator()
        session = CoverLetterSession(generator)
        session.full_name = "Ada"
        with pytest.raises(ValidationError):
            session.generate_cover_letter()
        assert generator.prompts == []
        assert session.error == REQUIRED_FIELDS_MESSAGE
        assert not session.is_loading

    def test_generate(self):
        session = filled_session(FakeGenerator(text="Letter"))
        assert session.generate_cover_letter() == "Letter"
        assert session.cover_letter == "Letter"
        assert session.error is None
        assert not session.is_loading

    def test_generation_error_keeps_form(self):
        client, _ = client_with(FakeResponse(429, {"error": "quota exceeded"}))
        session = filled_session(client)
        session.phone = "555"
        with pytest.raises(GenerationError):
            session.generate_cover_letter()
        assert session.error == "quota exceeded"
        assert not session.is_loading
        assert (session.full_name, session.email, session.phone, session.job_description) == (
            "Ada Lovelace", "ada@example.com", "555", "Engine programmer")

    def test_busy_refuses(self):
        generator = FakeGenerator()
        session = filled_session(generator)
        session.is_loading = True
        with pytest.raises(BusyError):
            session.generate_cover_letter()
        assert generator.prompts == []

    def test_copy_text(self):
        session = filled_session(FakeGenerator(text="  Letter\n"))
        assert session.copy_text() == ""
        session.generate_cover_letter()
        assert session.copy_text() == "Letter\n\nAda Lovelace"

    def test_download_requires_letter(self):
        session = filled_session(FakeGenerator())
        with pytest.raises(LayoutPreconditionError):
            session.download_pdf()
        assert not session.is_downloading_pdf

    def test_download(self):
        session = filled_session(FakeGenerator())
        session.generate_cover_letter()
        artifact = session.download_pdf(today=dt.date(2026, 10, 19))
        assert artifact.filename == "cover-letter-ada-lovelace-2026-10-19.pdf"
        assert artifact.media_type == "application/pdf"
        assert not artifact.truncated
        assert count_pages(artifact.content) == 1
        assert not session.is_downloading_pdf
