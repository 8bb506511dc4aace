# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from progress_tracker.model.entity_id import EntityId
from progress_tracker.model.log_entry import LogEntry
from progress_tracker.time import Milliseconds

DEFAULT_LABEL = "Tracker"


class Tracker(TypedDict):
    id: EntityId
    label: str  # e.g., "Push-ups"
    target: int  # goal, >= 1 when created
    current: int  # 0 <= current <= target

    created_at: Milliseconds
    completed_at: Optional[Milliseconds]  # Reset when decremented below target
    archived_at: Optional[Milliseconds]  # Immutable once set

    logs: list[LogEntry]  # Append-only, oldest first
