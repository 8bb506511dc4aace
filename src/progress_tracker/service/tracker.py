# SPDX-License-Identifier: MIT

import logging
import re
from typing import Any, Callable, Optional, cast

from progress_tracker.model.entity_id import EntityId, generate_entity_id
from progress_tracker.model.log_entry import LogAction
from progress_tracker.model.tracker import DEFAULT_LABEL, Tracker
from progress_tracker.template.tracker import (
    get_log_entry_template,
    get_tracker_template,
)
from progress_tracker.time import Milliseconds, now_ms

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], Milliseconds]
IdGenerator = Callable[[], EntityId]

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


def parse_target(target_input: str | int) -> Optional[int]:
    """
    Parse a target the way a form field would: leading whitespace, an
    optional sign, then digits. Trailing garbage is ignored ("20abc" -> 20).

    Returns None unless the result is an integer >= 1.
    """
    if isinstance(target_input, int):
        target = target_input
    else:
        match = _LEADING_INTEGER.match(target_input)
        if match is None:
            return None
        target = int(match.group(1))

    if target < 1:
        return None
    return target


def _patch(tracker: Tracker, **changes: Any) -> Tracker:
    return cast(Tracker, {**tracker, **changes})


def _append_log(
    tracker: Tracker,
    action: LogAction,
    detail: str,
    timestamp: Milliseconds,
    generate_id: IdGenerator,
) -> Tracker:
    entry = get_log_entry_template(generate_id(), timestamp, action, detail)
    return _patch(tracker, logs=[*tracker["logs"], entry])


def is_complete(tracker: Tracker) -> bool:
    return tracker["current"] >= tracker["target"]


def is_archived(tracker: Tracker) -> bool:
    return tracker.get("archived_at") is not None


def get_percent(tracker: Tracker) -> int:
    if tracker["target"] <= 0:
        return 0
    return round(tracker["current"] / tracker["target"] * 100)


def create_tracker(
    label: Optional[str],
    target_input: str | int,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> Optional[Tracker]:
    """Create a fresh tracker, or None if the target is not an integer >= 1."""
    target = parse_target(target_input)
    if target is None:
        LOGGER.debug("rejected tracker target: %r", target_input)
        return None

    timestamp = now()
    tracker = get_tracker_template(generate_id(), timestamp)
    tracker["label"] = (label or "").strip() or DEFAULT_LABEL
    tracker["target"] = target

    tracker = _append_log(
        tracker,
        "created",
        f'Created "{tracker["label"]}" with target {target}',
        timestamp,
        generate_id,
    )
    LOGGER.debug("created tracker %s", tracker["id"])
    return tracker


def increment_tracker(
    tracker: Tracker,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> Tracker:
    """
    Advance the counter by one. Reaching the target completes the tracker in
    the same transition: completed_at is set and a "completed" log entry
    follows the "increment" entry.

    Returns the input unchanged when the tracker is complete or archived.
    """
    if is_archived(tracker) or is_complete(tracker):
        return tracker

    timestamp = now()
    updated = _patch(tracker, current=tracker["current"] + 1)
    updated = _append_log(
        updated,
        "increment",
        f"Progress: {updated['current']}/{updated['target']}",
        timestamp,
        generate_id,
    )

    if is_complete(updated):
        updated = _patch(updated, completed_at=timestamp)
        updated = _append_log(
            updated, "completed", "Completed! 🎉", timestamp, generate_id
        )
        LOGGER.debug("completed tracker %s", updated["id"])

    return updated


def decrement_tracker(
    tracker: Tracker,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> Tracker:
    """
    Step the counter back by one, clearing completed_at if the tracker was
    complete. Returns the input unchanged at zero or when archived.
    """
    if is_archived(tracker) or tracker["current"] <= 0:
        return tracker

    completed_at = None if is_complete(tracker) else tracker["completed_at"]
    updated = _patch(
        tracker, current=tracker["current"] - 1, completed_at=completed_at
    )
    return _append_log(
        updated,
        "decrement",
        f"Progress: {updated['current']}/{updated['target']}",
        now(),
        generate_id,
    )


def archive_tracker(
    tracker: Tracker,
    now: Clock = now_ms,
    generate_id: IdGenerator = generate_entity_id,
) -> Tracker:
    if is_archived(tracker):
        return tracker

    timestamp = now()
    archived = _patch(tracker, archived_at=timestamp)
    archived = _append_log(
        archived, "archived", "Tracker archived", timestamp, generate_id
    )
    LOGGER.debug("archived tracker %s", archived["id"])
    return archived
