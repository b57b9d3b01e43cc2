"""
Advisory component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class AdvisoryPort(Protocol):
    """Text-generation collaborator that turns a sales summary into guidance."""

    async def generate(self, prompt: str, *, system_instruction: str | None = None) -> str:
        """
        Return narrative text (may contain simple HTML markup).

        Raises:
            AdvisoryUnavailable: On transport, quota or response-shape failure
        """
        ...
