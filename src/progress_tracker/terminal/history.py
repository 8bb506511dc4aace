# SPDX-License-Identifier: MIT

import typer

from progress_tracker.repository.tracker import TRACKER_STATE_REPO
from progress_tracker.service import state as app_state
from progress_tracker.service.history import (
    HistoryLookupError,
    find_in_history,
    list_history,
)
from progress_tracker.terminal.custom_typer import AliasedTyperGroup
from progress_tracker.view.tracker import history_view, log_entries_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("list, ls")
def list_() -> None:
    """List archived trackers, most recently archived first."""
    state = TRACKER_STATE_REPO.get_state()
    history_view(list_history(state["history"]))


@app.command("log, l", no_args_is_help=True)
def log(id: str) -> None:
    """Show the log of an archived tracker (full id or unique prefix)."""
    state = TRACKER_STATE_REPO.get_state()
    try:
        tracker = find_in_history(state["history"], id)
    except HistoryLookupError as error:
        typer.echo(str(error))
        raise typer.Exit(1)

    log_entries_view(tracker)


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    """Delete an archived tracker (full id or unique prefix)."""
    state = TRACKER_STATE_REPO.get_state()
    try:
        tracker = find_in_history(state["history"], id)
    except HistoryLookupError as error:
        typer.echo(str(error))
        raise typer.Exit(1)

    new_state = app_state.delete_from_history(state, tracker["id"])
    TRACKER_STATE_REPO.save_state(new_state)
    typer.echo(f'Deleted "{tracker["label"]}" from history.')
