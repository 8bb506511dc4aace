# SPDX-License-Identifier: MIT

"""
Operations over the application state container.

Every function takes an AppState and returns a new one; a rejected
operation returns the given state object unchanged.
"""

from typing import Optional

from progress_tracker.model.app_data import AppData
from progress_tracker.model.app_state import AppState
from progress_tracker.model.entity_id import EntityId, generate_entity_id
from progress_tracker.service.dataset import export_dataset, import_dataset
from progress_tracker.service.history import add_to_history, remove_from_history
from progress_tracker.service.tracker import (
    Clock,
    IdGenerator,
    archive_tracker,
    create_tracker,
    decrement_tracker,
    increment_tracker,
)
from progress_tracker.time import now_ms


def create(
    state: AppState,
    label: Optional[str],
    target_input: str | int,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> AppState:
    # Replaces the active tracker without archiving it
    tracker = create_tracker(label, target_input, now, generate_id)
    if tracker is None:
        return state
    return {"active_tracker": tracker, "history": state["history"]}


def increment(
    state: AppState,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> AppState:
    active_tracker = state["active_tracker"]
    if active_tracker is None:
        return state

    updated = increment_tracker(active_tracker, now, generate_id)
    if updated is active_tracker:
        return state
    return {"active_tracker": updated, "history": state["history"]}


def decrement(
    state: AppState,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> AppState:
    active_tracker = state["active_tracker"]
    if active_tracker is None:
        return state

    updated = decrement_tracker(active_tracker, now, generate_id)
    if updated is active_tracker:
        return state
    return {"active_tracker": updated, "history": state["history"]}


def archive(
    state: AppState,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> AppState:
    active_tracker = state["active_tracker"]
    if active_tracker is None:
        return state

    archived = archive_tracker(active_tracker, now, generate_id)
    return {
        "active_tracker": None,
        "history": add_to_history(state["history"], archived),
    }


def delete_from_history(state: AppState, id: EntityId) -> AppState:
    return {
        "active_tracker": state["active_tracker"],
        "history": remove_from_history(state["history"], id),
    }


def export_state(state: AppState) -> AppData:
    return export_dataset(state["active_tracker"], state["history"])


def import_state(raw: bytes | str) -> AppState:
    """
    Build a replacement state from an exported document.

    Raises DatasetError on invalid input, in which case the caller keeps
    its current state.
    """
    active_tracker, history = import_dataset(raw)
    return {"active_tracker": active_tracker, "history": history}
