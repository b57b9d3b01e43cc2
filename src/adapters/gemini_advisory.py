"""
Gemini advisory adapter.

Implements AdvisoryPort over the Generative Language REST API using an
async httpx client. Transport errors, HTTP error statuses and unexpected
response shapes all surface as AdvisoryUnavailable.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from src.components.advisory import AdvisoryUnavailable

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-3-flash-preview"


class GeminiAdvisoryAdapter:
    """generateContent client for the dashboard insight panel."""

    def __init__(
        self,
        api_key: str | None,
        *,
        model: str = DEFAULT_MODEL,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            api_key: API key; requests fail fast when missing
            model: Model name
            endpoint: API base URL
            timeout_seconds: Overall request timeout
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self._api_key = api_key
        self.model = model
        self.endpoint = endpoint.rstrip("/")
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    def _build_body(self, prompt: str, system_instruction: str | None) -> dict[str, Any]:
        body: dict[str, Any] = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        if system_instruction:
            body["systemInstruction"] = {"parts": [{"text": system_instruction}]}
        return body

    async def generate(self, prompt: str, *, system_instruction: str | None = None) -> str:
        if not self._api_key:
            raise AdvisoryUnavailable("API key is not configured")

        url = f"{self.endpoint}/models/{self.model}:generateContent"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=self._build_body(prompt, system_instruction),
                    headers={"x-goog-api-key": self._api_key},
                )
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            raise AdvisoryUnavailable(f"Advisory service answered {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise AdvisoryUnavailable(f"Advisory service unreachable: {e}") from e
        except ValueError as e:
            raise AdvisoryUnavailable("Advisory response was not JSON") from e

        return extract_text(payload)


def extract_text(payload: Any) -> str:
    """Join the text parts of the first candidate."""
    try:
        parts = payload["candidates"][0]["content"]["parts"]
        return "".join(part.get("text", "") for part in parts)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        raise AdvisoryUnavailable("Malformed advisory response") from e


class DisabledAdvisory:
    """Stand-in used when the advisory feature is switched off in config."""

    async def generate(self, prompt: str, *, system_instruction: str | None = None) -> str:
        raise AdvisoryUnavailable("Advisory is disabled")
