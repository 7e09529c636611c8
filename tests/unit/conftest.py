# tests/unit/conftest.py
"""Fixtures shared by unit tests.

Provides environment isolation and an in-memory stand-in for the content API.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from portfolio.errors import AppError


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """Force an isolated environment for unit tests.

    Goals:
    - unit tests never reach a real content API
    - local developer variables do not change test outcomes
    """
    monkeypatch.setenv("FLASK_ENV", "testing")
    monkeypatch.setenv("SECRET_KEY", "test-secret-key")
    monkeypatch.setenv("RPC_BASE_URL", "http://content-api.test")
    monkeypatch.setenv("WTF_CSRF_ENABLED", "false")
    monkeypatch.delenv("RPC_SESSION_COOKIE", raising=False)
    monkeypatch.delenv("FLASK_DEBUG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEFAULT_LOCALE", raising=False)


class FakeRpcClient:
    """Records calls and answers queries from a procedure -> data table."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = dict(data or {})
        self.failures: dict[str, AppError] = {}
        self.calls: list[tuple[str, str, Any]] = []

    def query(self, procedure: str, payload: Any = None) -> Any:
        self.calls.append(("query", procedure, payload))
        if procedure in self.failures:
            raise self.failures[procedure]
        return copy.deepcopy(self.data.get(procedure, []))

    def mutation(self, procedure: str, payload: Any = None) -> Any:
        self.calls.append(("mutation", procedure, payload))
        if procedure in self.failures:
            raise self.failures[procedure]
        return {"success": True}

    @property
    def mutations(self) -> list[tuple[str, Any]]:
        return [(procedure, payload) for kind, procedure, payload in self.calls if kind == "mutation"]


@pytest.fixture
def fake_rpc() -> FakeRpcClient:
    return FakeRpcClient()
