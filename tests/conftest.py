"""
Global pytest fixtures for the Short-code Platform test suite.

Responsibilities:
    - Provide a fresh MappingStore per test (no shared state between tests)
    - Provide a FastAPI TestClient built by the app factory around that store
    - Provide small generator/lock doubles for forcing collisions, failures
      and interleavings deterministically

Why an app factory?
    Using `create_app(store=...)` gives each test its own store, and lets the
    test inspect exactly the store the HTTP layer writes to.
"""

import threading
from typing import Callable, Iterable, List, Optional

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shortcode_platform.generator.base import BaseCodeGenerator
from shortcode_platform.storage.rwlock import ReadWriteLock
from shortcode_platform.storage.storage import MappingStore


class ScriptedGenerator(BaseCodeGenerator):
    """Returns pre-set codes in order; records every call."""

    def __init__(self, codes: Iterable[str]):
        self._codes = list(codes)
        self._guard = threading.Lock()
        self.calls: List[int] = []

    def generate(self, length: int) -> str:
        with self._guard:
            self.calls.append(length)
            if not self._codes:
                raise AssertionError("ScriptedGenerator ran out of codes")
            return self._codes.pop(0)


class FailingRng:
    """Stands in for random.SystemRandom when the OS entropy source is gone."""

    def choice(self, seq):
        raise OSError("entropy source unavailable")


class HookedLock(ReadWriteLock):
    """
    ReadWriteLock that runs `before_write` once, right before the first
    exclusive acquisition. Lets a test slot another save() between a
    caller's pre-check and its insert.
    """

    def __init__(self, before_write: Optional[Callable[[], None]] = None):
        super().__init__()
        self.before_write = before_write
        self.write_acquisitions = 0

    def acquire_write(self) -> None:
        hook, self.before_write = self.before_write, None
        if hook is not None:
            hook()
        self.write_acquisitions += 1
        super().acquire_write()


@pytest.fixture
def store() -> MappingStore:
    """Fresh in-memory store with the real secure generator."""
    return MappingStore()


@pytest.fixture
def client(store: MappingStore) -> TestClient:
    """Fresh TestClient serving the `store` fixture."""
    return TestClient(create_app(store=store))


@pytest.fixture
def scripted_generator():
    """Factory fixture: scripted_generator(["AAAAAAAA", ...])."""
    return ScriptedGenerator


@pytest.fixture
def failing_rng() -> FailingRng:
    return FailingRng()


@pytest.fixture
def hooked_lock():
    """Factory fixture: hooked_lock(before_write=callable)."""
    return HookedLock
