# SPDX-License-Identifier: MIT

from typing import Iterator, Optional, Sequence

from progress_tracker.model.entity_id import EntityId
from progress_tracker.model.tracker import Tracker


class HistoryLookupError(Exception):
    """Raised when an id does not identify exactly one archived tracker."""

    pass


class HistoryView:
    """Restartable view over archived trackers in stored order."""

    def __init__(self, history: Sequence[Tracker]) -> None:
        self._history = history

    def __iter__(self) -> Iterator[Tracker]:
        for tracker in self._history:
            yield tracker

    def __len__(self) -> int:
        return len(self._history)


def add_to_history(history: Sequence[Tracker], tracker: Tracker) -> list[Tracker]:
    # Newest first, no deduplication by id
    return [tracker, *history]


def remove_from_history(history: Sequence[Tracker], id: EntityId) -> list[Tracker]:
    return [tracker for tracker in history if tracker.get("id") != id]


def list_history(history: Sequence[Tracker]) -> HistoryView:
    return HistoryView(history)


def find_in_history(history: Sequence[Tracker], id_or_prefix: str) -> Tracker:
    """
    Resolve a full id or a unique id prefix to an archived tracker.

    Raises:
        HistoryLookupError: If nothing matches or the prefix is ambiguous
    """
    exact: Optional[Tracker] = next(
        (tracker for tracker in history if tracker.get("id") == id_or_prefix), None
    )
    if exact is not None:
        return exact

    matches = {
        tracker["id"]: tracker
        for tracker in history
        if str(tracker.get("id", "")).startswith(id_or_prefix)
    }
    if len(matches) == 0:
        raise HistoryLookupError(f"No archived tracker matches '{id_or_prefix}'.")
    if len(matches) > 1:
        raise HistoryLookupError(
            f"'{id_or_prefix}' matches {len(matches)} archived trackers. "
            "Use a longer id."
        )
    return next(iter(matches.values()))
