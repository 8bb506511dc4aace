# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from progress_tracker.repository.tracker import TRACKER_STATE_REPO
from progress_tracker.service import state as app_state
from progress_tracker.service.dataset import (
    INVALID_FILE_MESSAGE,
    DatasetError,
    encode_document,
    get_export_filename,
)
from progress_tracker.time import now_utc

LOGGER = logging.getLogger(__name__)


def export(
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="File to write (default: ./progress-tracker-backup-<date>.json)",
        ),
    ] = None,
) -> None:
    """Export the active tracker and history to a JSON file."""
    state = TRACKER_STATE_REPO.get_state()
    document = app_state.export_state(state)

    output_path = output if output is not None else Path(get_export_filename(now_utc()))
    try:
        output_path.write_text(encode_document(document), encoding="utf-8")
    except OSError as error:
        LOGGER.info("Could not write export file %s: %s", output_path, error)
        typer.echo(f"Could not write export file: {output_path}")
        raise typer.Exit(1)

    typer.echo(f"Exported {len(document['history'])} archived tracker(s) to {output_path}")


def import_(
    files: Annotated[
        list[Path],
        typer.Argument(help="Exported .json file (only the first file is used)"),
    ],
) -> None:
    """Replace all current data with a previously exported file."""
    try:
        raw = files[0].read_bytes()
    except OSError as error:
        LOGGER.info("Could not read import file %s: %s", files[0], error)
        typer.echo(INVALID_FILE_MESSAGE)
        raise typer.Exit(1)

    try:
        new_state = app_state.import_state(raw)
    except DatasetError as error:
        LOGGER.info("Rejected import of %s: %s", files[0], error)
        typer.echo(INVALID_FILE_MESSAGE)
        raise typer.Exit(1)

    TRACKER_STATE_REPO.save_state(new_state)
    typer.echo(
        f"Imported {len(new_state['history'])} archived tracker(s)"
        + (" and an active tracker." if new_state["active_tracker"] is not None else ".")
    )
