# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from progress_tracker.model.tracker import Tracker


class AppState(TypedDict):
    active_tracker: Optional[Tracker]
    history: list[Tracker]  # Most recently archived first


def get_empty_state() -> AppState:
    return {"active_tracker": None, "history": []}
