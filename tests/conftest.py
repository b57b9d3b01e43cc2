from datetime import UTC, datetime, tzinfo

import pytest

from src.adapters.auth.crypto import Argon2AuthAdapter
from src.adapters.local_storage import InMemoryBackend
from src.app_shell.context import ServiceContext
from src.components.durable_store import DurableStore
from src.config.models import PosConfig


class FixedClock:
    """Clock pinned to one instant; advance() moves it forward."""

    def __init__(self, now: datetime) -> None:
        self._now = now

    @property
    def timezone(self) -> tzinfo | None:
        return self._now.tzinfo

    def now(self) -> datetime:
        return self._now

    def now_utc(self) -> datetime:
        return self._now.astimezone(UTC)

    def set(self, now: datetime) -> None:
        self._now = now


class StubAdvisory:
    """Advisory port returning canned text (or raising a canned error)."""

    def __init__(self, text: str = "- Raise dessert prices", error: Exception | None = None):
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str, *, system_instruction: str | None = None) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 15, 14, 30, tzinfo=UTC)


@pytest.fixture
def clock(now) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def backend() -> InMemoryBackend:
    return InMemoryBackend()


@pytest.fixture
def store(backend) -> DurableStore:
    return DurableStore(backend)


@pytest.fixture
def auth_adapter() -> Argon2AuthAdapter:
    # Cheap parameters keep hashing fast in tests
    return Argon2AuthAdapter(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def advisory() -> StubAdvisory:
    return StubAdvisory()


@pytest.fixture
def test_ctx(backend, clock, advisory, auth_adapter) -> ServiceContext:
    """Full ServiceContext over an in-memory backend and a pinned clock."""
    return ServiceContext.create(
        PosConfig(),
        backend=backend,
        clock=clock,
        advisory=advisory,
        auth_adapter=auth_adapter,
    )
