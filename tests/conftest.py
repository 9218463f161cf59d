"""Shared fixtures for mailsim tests."""

from pathlib import Path

import pytest

from mailsim.services.dispatch.base import Dispatcher


class FakeDispatcher(Dispatcher):
    """Dispatcher that records calls instead of running a command."""

    def __init__(self, accept: bool = True, error: Exception = None):
        self.accept = accept
        self.error = error
        self.calls: list[Path] = []
        self.seen_content: list[str] = []

    @property
    def name(self) -> str:
        return "fake"

    def dispatch(self, file_path: Path) -> bool:
        self.calls.append(file_path)
        self.seen_content.append(file_path.read_text(encoding="utf-8"))
        if self.error is not None:
            raise self.error
        return self.accept


@pytest.fixture
def fake_dispatcher():
    """Dispatcher that accepts every message."""
    return FakeDispatcher()


@pytest.fixture
def rejecting_dispatcher():
    """Dispatcher that behaves like a command exiting nonzero."""
    return FakeDispatcher(accept=False)


@pytest.fixture
def dispatcher_factory():
    """Build fake dispatchers with custom behaviour."""
    return FakeDispatcher
