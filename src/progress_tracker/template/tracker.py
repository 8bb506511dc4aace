# SPDX-License-Identifier: MIT

from progress_tracker.model.entity_id import EntityId
from progress_tracker.model.log_entry import LogAction, LogEntry
from progress_tracker.model.tracker import DEFAULT_LABEL, Tracker
from progress_tracker.time import Milliseconds


def get_tracker_template(id: EntityId, created_at: Milliseconds) -> Tracker:
    return {
        "id": id,
        "label": DEFAULT_LABEL,
        "target": 1,
        "current": 0,
        "created_at": created_at,
        "completed_at": None,
        "archived_at": None,
        "logs": [],
    }


def get_log_entry_template(
    id: EntityId, timestamp: Milliseconds, action: LogAction, detail: str
) -> LogEntry:
    return {
        "id": id,
        "timestamp": timestamp,
        "action": action,
        "detail": detail,
    }
