"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ghost_pacer.web import app as app_module
from ghost_pacer.web.service import SessionService


class FakeClock:
    """Manually advanced monotonic clock shared by tracker and ghost."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def client(clock, monkeypatch):
    """FastAPI test client with a fresh session service on a fake clock."""
    monkeypatch.setattr(app_module, "service", SessionService(_time_fn=clock))
    with TestClient(app_module.app) as c:
        yield c
