"""
OpenAI-compatible chat completion backend used by the proxy endpoint.
"""

from __future__ import annotations

import logging
from typing import Optional

from openai import OpenAI

from coverletter.config import Settings, load_settings
from coverletter.errors import GenerationError

logger = logging.getLogger(__name__)

_clients: dict[tuple[str, Optional[str]], OpenAI] = {}


class ProviderNotConfigured(GenerationError):
    """No API key is available for the backend."""


def get_client(settings: Settings) -> OpenAI:
    """Lazily create one API client per (api_key, base_url)."""
    if not settings.api_key:
        raise ProviderNotConfigured("Server configuration error: Missing API key")
    key = (settings.api_key, settings.base_url)
    if key not in _clients:
        _clients[key] = OpenAI(api_key=settings.api_key, base_url=settings.base_url)
    return _clients[key]


def complete(prompt: str, settings: Optional[Settings] = None) -> str:
    """Send ``prompt`` as a single user message and return the reply text."""
    settings = settings or load_settings()
    client = get_client(settings)

    response = client.chat.completions.create(
        model=settings.model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        messages=[{"role": "user", "content": prompt}],
    )

    text = response.choices[0].message.content if response.choices else None
    if not isinstance(text, str):
        raise GenerationError("Unexpected response format from the generation API")
    logger.info("Generated %d characters with %s", len(text), settings.model)
    return text.strip()
