"""
Advisory component - narrative insight for the dashboard.

Key behaviors:
- The prompt carries revenue (with currency symbol), order count and branch names
- One outstanding request per panel: a newer request supersedes the older
  one and the older response is discarded
- Responses arriving after close() are discarded
- Every failure degrades to a plain-text fallback; nothing is raised into
  the rendering path and nothing is retried
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from src.components.stats import StatsSnapshot
from src.domain.entities import AppSettings, Branch

from .models import EMPTY_MESSAGE, UNAVAILABLE_MESSAGE, InsightResult
from .ports import AdvisoryPort

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You are a world-class hospitality data analyst. "
    "Format output as clean HTML bullet points. Use standard business English."
)


def build_insight_prompt(
    snapshot: StatsSnapshot,
    settings: AppSettings,
    branches: Iterable[Branch],
) -> str:
    """Render the consultant prompt for a snapshot."""
    branch_names = ", ".join(b.name for b in branches) or "none"
    return (
        "As an Enterprise Restaurant Consultant, analyze this POS data and provide "
        "3 brief, high-impact bullet points for business improvement:\n"
        f"- Total Revenue: {settings.currency_symbol}{snapshot.total_revenue}\n"
        f"- Total Orders: {snapshot.total_orders}\n"
        f"- Branches: {branch_names}\n"
        "Provide professional, actionable advice on pricing, labor, or inventory. "
        "Keep it under 100 words."
    )


class InsightPanel:
    """
    Per-view state for the advisory call.

    Holds the last applied insight and a pending flag; results of superseded
    or post-close requests are returned with applied=False and leave the
    panel untouched.
    """

    def __init__(
        self,
        advisory: AdvisoryPort,
        *,
        system_instruction: str = SYSTEM_INSTRUCTION,
    ) -> None:
        self._advisory = advisory
        self._system_instruction = system_instruction
        self._generation = 0
        self._closed = False
        self.insight: str | None = None
        self.pending = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def generate(
        self,
        snapshot: StatsSnapshot,
        settings: AppSettings,
        branches: Iterable[Branch],
    ) -> InsightResult:
        self._generation += 1
        ticket = self._generation
        self.pending = True

        prompt = build_insight_prompt(snapshot, settings, branches)
        try:
            text = await self._advisory.generate(
                prompt, system_instruction=self._system_instruction
            )
        except Exception:
            logger.exception("Advisory request failed")
            result = InsightResult(text=UNAVAILABLE_MESSAGE, ok=False)
        else:
            text = (text or "").strip()
            result = InsightResult(text=text or EMPTY_MESSAGE, ok=bool(text))
        finally:
            # Also runs on cancellation; a newer request owns the flag otherwise
            if ticket == self._generation:
                self.pending = False

        if self._closed or ticket != self._generation:
            logger.info("Discarding stale advisory response (request %d)", ticket)
            return replace(result, applied=False)

        self.insight = result.text
        return result

    def reset(self) -> None:
        """Clear the shown insight so a fresh analysis can be requested."""
        self.insight = None

    def close(self) -> None:
        """The owning view went away; drop any in-flight result."""
        self._closed = True
        self.pending = False
