"""
Tests for the advisory component (prompt building and InsightPanel).
"""

from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest

from src.components.advisory import (
    EMPTY_MESSAGE,
    UNAVAILABLE_MESSAGE,
    AdvisoryUnavailable,
    InsightPanel,
    build_insight_prompt,
)
from src.components.stats import BucketType, StatsSnapshot
from src.domain.entities import AppSettings, Branch

SNAPSHOT = StatsSnapshot(
    total_revenue=Decimal("1234.50"), total_orders=17, bucket_type=BucketType.TOTAL
)
SETTINGS = AppSettings(currency_symbol="₹")
BRANCHES = [Branch(id="b1", name="Main Branch"), Branch(id="b2", name="City Center Cafe")]


class MockAdvisory:
    def __init__(self, text: str = "- Trim the menu", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str | None]] = []

    async def generate(self, prompt: str, *, system_instruction: str | None = None) -> str:
        self.calls.append((prompt, system_instruction))
        if self.error is not None:
            raise self.error
        return self.text


class GatedAdvisory:
    """Each call blocks until released, so responses can arrive out of order."""

    def __init__(self) -> None:
        self.gates: list[asyncio.Event] = []
        self.replies: list[str] = []

    async def generate(self, prompt: str, *, system_instruction: str | None = None) -> str:
        gate = asyncio.Event()
        self.gates.append(gate)
        index = len(self.gates) - 1
        await gate.wait()
        return self.replies[index]


class TestPrompt:
    def test_contains_revenue_with_currency_orders_and_branches(self):
        prompt = build_insight_prompt(SNAPSHOT, SETTINGS, BRANCHES)
        assert "₹1234.50" in prompt
        assert "17" in prompt
        assert "Main Branch, City Center Cafe" in prompt

    def test_no_branches(self):
        assert "Branches: none" in build_insight_prompt(SNAPSHOT, SETTINGS, [])


class TestInsightPanel:
    def test_success(self):
        advisory = MockAdvisory("  - Trim the menu \n")
        panel = InsightPanel(advisory)

        result = asyncio.run(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))

        assert result.ok is True
        assert result.applied is True
        assert result.text == "- Trim the menu"
        assert panel.insight == "- Trim the menu"
        assert panel.pending is False
        assert advisory.calls[0][1] is not None

    def test_failure_degrades_to_fallback(self):
        panel = InsightPanel(MockAdvisory(error=AdvisoryUnavailable("timeout")))

        result = asyncio.run(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))

        assert result.ok is False
        assert result.text == UNAVAILABLE_MESSAGE
        assert panel.insight == UNAVAILABLE_MESSAGE
        assert panel.pending is False

    def test_unexpected_error_also_degrades(self):
        panel = InsightPanel(MockAdvisory(error=RuntimeError("boom")))
        result = asyncio.run(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))
        assert result.text == UNAVAILABLE_MESSAGE

    def test_empty_response(self):
        panel = InsightPanel(MockAdvisory(text="   "))
        result = asyncio.run(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))
        assert result.ok is False
        assert result.text == EMPTY_MESSAGE

    def test_no_retry_on_failure(self):
        advisory = MockAdvisory(error=AdvisoryUnavailable("down"))
        asyncio.run(InsightPanel(advisory).generate(SNAPSHOT, SETTINGS, BRANCHES))
        assert len(advisory.calls) == 1

    def test_newer_request_supersedes_older(self):
        advisory = GatedAdvisory()
        advisory.replies = ["old insight", "new insight"]
        panel = InsightPanel(advisory)

        async def scenario():
            first = asyncio.create_task(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))
            await asyncio.sleep(0)
            second = asyncio.create_task(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))
            await asyncio.sleep(0)
            # Newer response lands first, older one afterwards
            advisory.gates[1].set()
            newer = await second
            advisory.gates[0].set()
            older = await first
            return older, newer

        older, newer = asyncio.run(scenario())

        assert newer.applied is True
        assert older.applied is False
        assert panel.insight == "new insight"

    def test_close_discards_in_flight_result(self):
        advisory = GatedAdvisory()
        advisory.replies = ["late insight"]
        panel = InsightPanel(advisory)

        async def scenario():
            task = asyncio.create_task(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))
            await asyncio.sleep(0)
            assert panel.pending is True
            panel.close()
            advisory.gates[0].set()
            return await task

        result = asyncio.run(scenario())

        assert result.applied is False
        assert panel.insight is None
        assert panel.closed is True
        assert panel.pending is False

    def test_reset_clears_insight(self):
        panel = InsightPanel(MockAdvisory())
        asyncio.run(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))
        panel.reset()
        assert panel.insight is None

    def test_cancelled_request_clears_pending(self):
        advisory = GatedAdvisory()
        advisory.replies = ["never delivered"]
        panel = InsightPanel(advisory)

        async def scenario():
            task = asyncio.create_task(panel.generate(SNAPSHOT, SETTINGS, BRANCHES))
            await asyncio.sleep(0)
            assert panel.pending is True
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(scenario())

        assert panel.pending is False
        assert panel.insight is None
