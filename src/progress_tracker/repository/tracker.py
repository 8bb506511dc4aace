# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from typing import Any, Optional

from progress_tracker import configuration
from progress_tracker.model.app_state import AppState
from progress_tracker.model.tracker import Tracker
from progress_tracker.repository.store import FileKeyValueStore, KeyValueStore
from progress_tracker.service.dataset import tracker_from_wire, tracker_to_wire

LOGGER = logging.getLogger(__name__)

ACTIVE_TRACKER_KEY = "pt_active"
HISTORY_KEY = "pt_history"


class TrackerStateRepository:
    """
    Holds the active tracker and history for the running process.

    State is read from the store once, on first access. Missing or
    unreadable keys fall back to no active tracker and an empty history.
    """

    def __init__(self, store: Optional[KeyValueStore] = None) -> None:
        self._store = store
        self._state: Optional[AppState] = None
        self.is_dirty = False

    @property
    def store(self) -> KeyValueStore:
        if self._store is None:
            self._store = FileKeyValueStore(configuration.DATA_PATH)
        return self._store

    @property
    def state(self) -> AppState:
        if self._state is None:
            self.__load_data()
        if self._state is None:
            raise ValueError()
        return self._state

    def __load_key(self, key: str) -> Any:
        raw = self.store.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            LOGGER.warning("Ignoring unreadable persisted value for %s", key)
            return None

    def __load_active_tracker(self) -> Optional[Tracker]:
        raw_tracker = self.__load_key(ACTIVE_TRACKER_KEY)
        if raw_tracker is None:
            return None
        if not isinstance(raw_tracker, dict):
            LOGGER.warning("Ignoring malformed persisted active tracker")
            return None
        return tracker_from_wire(raw_tracker)

    def __load_history(self) -> list[Tracker]:
        raw_history = self.__load_key(HISTORY_KEY)
        if raw_history is None:
            return []
        if not isinstance(raw_history, list):
            LOGGER.warning("Ignoring malformed persisted history")
            return []
        return [
            tracker_from_wire(raw_tracker)
            for raw_tracker in raw_history
            if isinstance(raw_tracker, dict)
        ]

    def __load_data(self) -> None:
        self._state = {
            "active_tracker": self.__load_active_tracker(),
            "history": self.__load_history(),
        }

    def __save_data(self, state: AppState) -> None:
        active_tracker = state["active_tracker"]
        serializable_active = (
            tracker_to_wire(active_tracker) if active_tracker is not None else None
        )
        serializable_history = [tracker_to_wire(t) for t in state["history"]]

        # Both keys are rewritten in full
        self.store.set(
            ACTIVE_TRACKER_KEY, json.dumps(serializable_active).encode("utf-8")
        )
        self.store.set(HISTORY_KEY, json.dumps(serializable_history).encode("utf-8"))

    def flush(self) -> bool:
        if self._state is not None and self.is_dirty:
            try:
                self.__save_data(self._state)
            except OSError:
                # In-memory state stays authoritative for this session
                LOGGER.warning("Could not persist tracker state", exc_info=True)
                return False
            self.is_dirty = False
            return True
        return False

    def get_state(self) -> AppState:
        return deepcopy(self.state)

    def save_state(self, state: AppState) -> None:
        self.is_dirty = True
        self._state = deepcopy(state)


TRACKER_STATE_REPO = TrackerStateRepository()
