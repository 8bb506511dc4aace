# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from progress_tracker.model.entity_id import EntityId
from progress_tracker.time import Milliseconds

LogAction = Literal["created", "increment", "decrement", "completed", "archived"]


class LogEntry(TypedDict):
    id: EntityId
    timestamp: Milliseconds
    action: LogAction
    detail: str  # fixed at creation, never edited
