# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from progress_tracker import configuration
from progress_tracker.repository.configuration import CONFIGURATION_REPO
from progress_tracker.terminal.custom_typer import AliasedTyperGroup

LOGGER = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_log_level(log_level: Optional[str]) -> Optional[str]:
    if log_level is None:
        return None
    if log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of {', '.join(LOG_LEVELS)}")
    return log_level


def validate_log_display_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None:
        return None
    if limit < 1:
        raise typer.BadParameter("Log display limit must be at least 1")
    return limit


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row("log_display_limit", str(config["log_display_limit"]))
    table.add_row("log_level", config["log_level"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory for storing tracker data",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    log_display_limit: Annotated[
        Optional[int],
        typer.Option(
            "--log-display-limit",
            help="Number of log entries shown with the active tracker",
            callback=validate_log_display_limit,
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option(
            "--log-level",
            help="DEBUG, INFO, WARNING, ERROR, CRITICAL",
            callback=validate_log_level,
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above views",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        log_display_limit=log_display_limit,
        log_level=log_level,
        show_header=show_header,
    )
    LOGGER.debug("configuration updated")

    typer.echo("Configuration updated.")
