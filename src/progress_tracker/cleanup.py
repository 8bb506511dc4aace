# SPDX-License-Identifier: MIT

import atexit

from progress_tracker.repository.configuration import CONFIGURATION_REPO
from progress_tracker.repository.tracker import TRACKER_STATE_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    TRACKER_STATE_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
