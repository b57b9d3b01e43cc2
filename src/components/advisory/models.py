"""
Advisory component - data models.
"""

from __future__ import annotations

from dataclasses import dataclass

UNAVAILABLE_MESSAGE = "Unable to reach AI Analyst. Ensure API_KEY is configured."
EMPTY_MESSAGE = "Insight generation failed."


class AdvisoryUnavailable(Exception):
    """The advisory service failed, timed out or answered with garbage."""


@dataclass(frozen=True)
class InsightResult:
    """
    Outcome of one insight request.

    applied is False when the response arrived after the request was
    superseded or the panel was closed; such results must not be shown.
    """

    text: str
    ok: bool
    applied: bool = True
