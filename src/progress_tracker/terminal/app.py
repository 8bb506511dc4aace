# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from progress_tracker.terminal import configuration, dataset, history, tracker
from progress_tracker.terminal.custom_typer import OrderedAliasedTyperGroup
from progress_tracker.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Progress Tracker - one goal at a time, one step at a time",
    no_args_is_help=True,
)
app.command(name="create, cr", no_args_is_help=True)(tracker.create)
app.command(name="show, s")(tracker.show)
app.command(name="increment, inc")(tracker.increment)
app.command(name="decrement, dec")(tracker.decrement)
app.command(name="archive, ar")(tracker.archive)
app.command(name="log, l")(tracker.log)
app.add_typer(history.app, name="history, h")
app.command(name="export, ex")(dataset.export)
app.command(name="import, im", no_args_is_help=True)(dataset.import_)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
) -> None:
    """
    Progress Tracker - one goal at a time, one step at a time

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
