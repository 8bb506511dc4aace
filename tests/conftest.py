"""Shared pytest fixtures for progress-tracker tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest

from progress_tracker import configuration
from progress_tracker.repository.configuration import CONFIGURATION_REPO
from progress_tracker.repository.tracker import (
    TRACKER_STATE_REPO,
    TrackerStateRepository,
)
from progress_tracker.view import state as view_state

START_MS = 1_700_000_000_000


class MemoryKeyValueStore:
    """In-memory stand-in for the durable key-value store."""

    def __init__(self) -> None:
        self.values: dict[str, bytes] = {}
        self.writes: list[str] = []

    def get(self, key: str) -> Optional[bytes]:
        return self.values.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.writes.append(key)
        self.values[key] = value


class FailingKeyValueStore(MemoryKeyValueStore):
    """Store whose writes always fail, like a full disk."""

    def set(self, key: str, value: bytes) -> None:
        raise OSError("No space left on device")


class FakeClock:
    """Clock that advances one second per reading."""

    def __init__(self, start: int = START_MS) -> None:
        self.current = start

    def __call__(self) -> int:
        value = self.current
        self.current += 1000
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def id_generator() -> Callable[[], str]:
    """Sequential ids: id-0001, id-0002, ..."""
    counter = {"value": 0}

    def generate() -> str:
        counter["value"] += 1
        return f"id-{counter['value']:04d}"

    return generate


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def repository(memory_store: MemoryKeyValueStore) -> TrackerStateRepository:
    return TrackerStateRepository(memory_store)


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration at a temporary, not yet existing config file."""
    path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    monkeypatch.setattr(configuration, "CONFIG_PATH", path.parent)
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return path


@pytest.fixture
def cli_repository(
    monkeypatch: pytest.MonkeyPatch,
    memory_store: MemoryKeyValueStore,
    config_path: Path,
) -> TrackerStateRepository:
    """Swap the process-wide repository onto an in-memory store."""
    monkeypatch.setattr(TRACKER_STATE_REPO, "_store", memory_store)
    monkeypatch.setattr(TRACKER_STATE_REPO, "_state", None)
    monkeypatch.setattr(TRACKER_STATE_REPO, "is_dirty", False)
    view_state.set_show_header(True)
    return TRACKER_STATE_REPO
