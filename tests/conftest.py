"""Shared fixtures for the campaign dashboard tests."""

from __future__ import annotations

from typing import Optional

import pytest

from dashboard.controller import CampaignDashboard
from dashboard.errors import PersistenceReadError, PersistenceWriteError
from dashboard.ids import IdGenerator
from dashboard.messages import Messenger
from dashboard.storage import MemoryStorage
from dashboard.store import CampaignStore


class FlakyStorage(MemoryStorage):
    """Memory storage whose reads or writes can be switched off."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False
        self.fail_reads = False
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise PersistenceReadError("storage disabled")
        return super().get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise PersistenceWriteError("quota exceeded")
        self.writes += 1
        super().set(key, value)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def storage():
    return FlakyStorage()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(storage):
    # Frozen clock: every id after the first comes from the counter
    return CampaignStore(storage, ids=IdGenerator(clock=lambda: 1_700_000_000_000))


@pytest.fixture
def dashboard(store, clock):
    return CampaignDashboard(store, Messenger(dismiss_after=5, clock=clock))
