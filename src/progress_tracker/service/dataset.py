# SPDX-License-Identifier: MIT

import json
import logging
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum

from progress_tracker.model.app_data import DATA_FORMAT_VERSION, AppData
from progress_tracker.model.entity_id import generate_entity_id
from progress_tracker.model.tracker import Tracker
from progress_tracker.template.tracker import get_tracker_template
from progress_tracker.time import datetime_to_local_date_str, now_ms

LOGGER = logging.getLogger(__name__)

INVALID_FILE_MESSAGE = (
    "Invalid file. Please select a valid Progress Tracker export (.json)."
)

# Python field name -> export/persisted field name
_WIRE_KEYS = {
    "created_at": "createdAt",
    "completed_at": "completedAt",
    "archived_at": "archivedAt",
}
_MODEL_KEYS = {wire: model for model, wire in _WIRE_KEYS.items()}


class DatasetError(Exception):
    """Raised when an imported document is rejected."""

    pass


class ParseError(DatasetError):
    """The raw content is not valid JSON."""

    pass


class SchemaError(DatasetError):
    """The content parses but is not a dataset document."""

    pass


def tracker_to_wire(tracker: Tracker) -> dict[str, Any]:
    return {_WIRE_KEYS.get(key, key): value for key, value in tracker.items()}


def tracker_from_wire(raw_tracker: dict[str, Any]) -> Tracker:
    """
    Convert field names and back-fill missing fields from the template.
    Values that are present are trusted as-is.
    """
    fields = {_MODEL_KEYS.get(key, key): value for key, value in raw_tracker.items()}
    template = get_tracker_template(
        fields.get("id") or generate_entity_id(), now_ms()
    )
    return cast(Tracker, {**template, **fields})


def export_dataset(
    active_tracker: Optional[Tracker], history: list[Tracker]
) -> AppData:
    return {
        "version": DATA_FORMAT_VERSION,
        "activeTracker": (
            tracker_to_wire(deepcopy(active_tracker))
            if active_tracker is not None
            else None
        ),
        "history": [tracker_to_wire(deepcopy(tracker)) for tracker in history],
    }


def encode_document(document: AppData) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False)


def get_export_filename(now: pendulum.DateTime) -> str:
    return f"progress-tracker-backup-{datetime_to_local_date_str(now)}.json"


def import_dataset(raw: bytes | str) -> tuple[Optional[Tracker], list[Tracker]]:
    """
    Validate a dataset document and return its active tracker and history.

    Only the document shape is checked: a version must be present and
    truthy, and at least one of activeTracker/history must be present.
    Individual trackers are returned verbatim, so counters from a hand
    edited file are not re-validated.

    Raises:
        ParseError: If the content is not JSON
        SchemaError: If the content is not a dataset document
    """
    try:
        document = json.loads(raw)
    except ValueError as error:
        raise ParseError(f"Content is not valid JSON: {error}") from error

    if not isinstance(document, dict):
        raise SchemaError("Document is not a JSON object")
    if not document.get("version"):
        raise SchemaError("Document has no version")

    raw_active = document.get("activeTracker")
    raw_history = document.get("history")
    if raw_active is None and raw_history is None:
        raise SchemaError("Document has neither activeTracker nor history")
    if raw_active is not None and not isinstance(raw_active, dict):
        raise SchemaError("activeTracker is not an object")
    if raw_history is not None and (
        not isinstance(raw_history, list)
        or not all(isinstance(tracker, dict) for tracker in raw_history)
    ):
        raise SchemaError("history is not a list of objects")

    active_tracker = tracker_from_wire(raw_active) if raw_active is not None else None
    history = [tracker_from_wire(tracker) for tracker in raw_history or []]

    LOGGER.debug(
        "imported dataset version %s with %d archived trackers",
        document["version"],
        len(history),
    )
    return active_tracker, history
