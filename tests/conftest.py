"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import os
from typing import Any

import pytest

from resultkit import configure

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Recorder:
    """Callable test double that records every call it receives."""

    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def recorder() -> Recorder:
    """Return a fresh call recorder for side-effect combinators."""
    return Recorder()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "resultkit.config.load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_resultkit_env(monkeypatch):
    """Ensure a clean RESULTKIT_* environment for each test."""
    for key in list(os.environ.keys()):
        if key.startswith("RESULTKIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_config():
    """Drop any active Config so each test resolves its own."""
    configure(None)
    yield
    configure(None)

