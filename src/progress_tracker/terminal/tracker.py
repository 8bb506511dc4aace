# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from progress_tracker.model.app_state import AppState
from progress_tracker.model.tracker import Tracker
from progress_tracker.repository.configuration import CONFIGURATION_REPO
from progress_tracker.repository.tracker import TRACKER_STATE_REPO
from progress_tracker.service import state as app_state
from progress_tracker.service.tracker import is_archived, is_complete, parse_target
from progress_tracker.view.tracker import active_tracker_view, log_entries_view


def _require_active_tracker(state: AppState) -> Tracker:
    active_tracker = state["active_tracker"]
    if active_tracker is None:
        typer.echo("No active tracker. Start one with 'create --target N'.")
        raise typer.Exit(1)
    return active_tracker


def _require_open_tracker(state: AppState) -> Tracker:
    active_tracker = _require_active_tracker(state)
    if is_archived(active_tracker):
        typer.echo("Active tracker is already archived and can no longer change.")
        raise typer.Exit(1)
    return active_tracker


def _show(state: AppState) -> None:
    active_tracker = state["active_tracker"]
    if active_tracker is None:
        return
    config = CONFIGURATION_REPO.get_config()
    active_tracker_view(active_tracker, config["log_display_limit"])


def create(
    label: Annotated[
        Optional[str],
        typer.Argument(help="e.g. Push-ups, Chapters, Laps"),
    ] = None,
    target: Annotated[
        str,
        typer.Option("--target", "-t", help="Target number (whole number, >= 1)"),
    ] = "",
    replace: Annotated[
        bool,
        typer.Option(
            "--replace",
            "-r",
            help="Replace the active tracker without archiving it",
        ),
    ] = False,
) -> None:
    """Start a new tracker."""
    state = TRACKER_STATE_REPO.get_state()

    if parse_target(target) is None:
        typer.echo(f"Invalid target: '{target}'. Target must be a number >= 1.")
        raise typer.Exit(1)

    if state["active_tracker"] is not None and not replace:
        typer.echo(
            "A tracker is already active. Archive it first or pass --replace."
        )
        raise typer.Exit(1)

    new_state = app_state.create(state, label, target)
    TRACKER_STATE_REPO.save_state(new_state)
    _show(new_state)


def show() -> None:
    """Show the active tracker."""
    state = TRACKER_STATE_REPO.get_state()
    _require_active_tracker(state)
    _show(state)


def increment() -> None:
    """Add one to the active tracker."""
    state = TRACKER_STATE_REPO.get_state()
    active_tracker = _require_open_tracker(state)

    if is_complete(active_tracker):
        typer.echo("Tracker is already complete.")
        raise typer.Exit(1)

    new_state = app_state.increment(state)
    TRACKER_STATE_REPO.save_state(new_state)
    _show(new_state)


def decrement() -> None:
    """Take one away from the active tracker."""
    state = TRACKER_STATE_REPO.get_state()
    active_tracker = _require_open_tracker(state)

    if active_tracker["current"] <= 0:
        typer.echo("Tracker is already at zero.")
        raise typer.Exit(1)

    new_state = app_state.decrement(state)
    TRACKER_STATE_REPO.save_state(new_state)
    _show(new_state)


def archive() -> None:
    """Archive the active tracker into history."""
    state = TRACKER_STATE_REPO.get_state()
    active_tracker = _require_active_tracker(state)

    new_state = app_state.archive(state)
    TRACKER_STATE_REPO.save_state(new_state)
    typer.echo(f'Archived "{active_tracker["label"]}".')


def log() -> None:
    """Show every log entry of the active tracker."""
    state = TRACKER_STATE_REPO.get_state()
    active_tracker = _require_active_tracker(state)
    log_entries_view(active_tracker)
