"""
HTTP client for the generation proxy: ``POST {prompt}`` -> ``{text}``.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from coverletter.config import load_settings
from coverletter.errors import GenerationError

logger = logging.getLogger(__name__)

DEFAULT_ERROR = "Failed to generate cover letter"


class GenerationClient:
    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None, session=None):
        settings = load_settings()
        self.endpoint = endpoint or settings.endpoint
        self.timeout = timeout if timeout is not None else settings.timeout
        self.session = session or requests.Session()

    def generate(self, prompt: str) -> str:
        """
        Return the generated text for ``prompt``.

        Raises GenerationError for transport failures, non-2xx replies and
        payloads without a ``text`` string. Nothing is retried.
        """
        try:
            resp = self.session.post(
                self.endpoint,
                json={"prompt": prompt},
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Generation request to %s failed: %s", self.endpoint, e)
            raise GenerationError(str(e)) from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if not resp.ok:
            payload = data if isinstance(data, dict) else {}
            message = payload.get("error") or DEFAULT_ERROR
            logger.warning("Generation failed with status %s: %s", resp.status_code, message)
            raise GenerationError(message, status_code=resp.status_code, details=payload.get("details"))

        if not isinstance(data, dict) or not isinstance(data.get("text"), str):
            raise GenerationError("Malformed response from the generation service", status_code=resp.status_code)
        return data["text"]
