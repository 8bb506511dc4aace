# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from rich.progress_bar import ProgressBar
from rich.table import Table

from progress_tracker.model.log_entry import LogAction, LogEntry
from progress_tracker.model.tracker import Tracker
from progress_tracker.service.tracker import get_percent, is_complete
from progress_tracker.time import (
    ms_to_display_local_datetime_str,
    ms_to_display_local_datetime_str_optional,
)
from progress_tracker.view.header import header

LOG_ACTION_COLORS: dict[LogAction, str] = {
    "created": "blue",
    "increment": "green",
    "decrement": "yellow",
    "completed": "magenta",
    "archived": "grey70",
}


def _progress_bar(tracker: Tracker) -> ProgressBar:
    return ProgressBar(
        total=max(tracker["target"], 1),
        completed=min(tracker["current"], tracker["target"]),
        width=40,
        complete_style="slate_blue1",
        finished_style="spring_green2",
    )


def _log_table(logs: list[LogEntry]) -> Table:
    log_table = Table(box=box.SIMPLE, show_header=False)
    log_table.add_column("action")
    log_table.add_column("timestamp", style="grey50")
    log_table.add_column("detail")

    for log_entry in logs:
        color = LOG_ACTION_COLORS.get(log_entry.get("action"), "white")
        log_table.add_row(
            f"[{color}]●[/{color}]",
            ms_to_display_local_datetime_str_optional(log_entry.get("timestamp"))
            or "",
            escape(str(log_entry.get("detail", ""))),
        )
    return log_table


def active_tracker_view(tracker: Tracker, log_display_limit: int) -> None:
    """
    Display the active tracker with its progress and the most recent
    activity, newest first.
    """
    header("tracker")
    console = Console()

    done = is_complete(tracker)
    title = f"[bold]{escape(tracker['label'])}[/bold]"
    if done:
        title += "  [spring_green2]Done![/spring_green2]"
    console.print(Padding(title, (1, 1, 0, 1)))
    console.print(
        Padding(
            f"[grey50]Started {ms_to_display_local_datetime_str(tracker['created_at'])}[/grey50]",
            (0, 1),
        )
    )

    counter_color = "spring_green2" if done else "white"
    console.print(
        Padding(
            f"[bold {counter_color}]{tracker['current']}[/bold {counter_color}]"
            f" / {tracker['target']}   [grey50]{get_percent(tracker)}% complete[/grey50]",
            (1, 1, 0, 1),
        )
    )
    console.print(Padding(_progress_bar(tracker), (0, 1, 1, 1)))

    logs = list(reversed(tracker["logs"]))
    console.print(Padding("[bold]Activity Log[/bold]", (0, 1)))
    console.print(_log_table(logs[:log_display_limit]))
    if len(logs) > log_display_limit:
        console.print(
            Padding(
                f"[grey50]Showing {log_display_limit} of {len(logs)} entries, "
                "run 'log' to see all[/grey50]",
                (0, 1),
            )
        )


def log_entries_view(tracker: Tracker) -> None:
    """Display every log entry of a tracker, oldest first."""
    header(f"{escape(tracker['label'])} - logs")
    console = Console()
    console.print(_log_table(tracker["logs"]))


def history_view(history: Iterable[Tracker], id_length: Optional[int] = 8) -> None:
    header("history")
    console = Console()

    history_table = Table(box=box.SIMPLE)
    history_table.add_column("id")
    history_table.add_column("label")
    history_table.add_column("created")
    history_table.add_column("archived")
    history_table.add_column("status")
    history_table.add_column("progress", justify="right")

    row_count = 0
    for tracker in history:
        row_count += 1
        if is_complete(tracker):
            status = "[spring_green2]Completed[/spring_green2]"
        else:
            status = f"[orange1]{get_percent(tracker)}%[/orange1]"

        history_table.add_row(
            str(tracker["id"])[:id_length],
            escape(tracker["label"]),
            ms_to_display_local_datetime_str(tracker["created_at"]),
            ms_to_display_local_datetime_str_optional(tracker["archived_at"]) or "",
            status,
            f"{tracker['current']}/{tracker['target']}",
        )

    if row_count == 0:
        console.print(Padding("[grey50]No archived trackers yet.[/grey50]", (1, 1)))
        return

    console.print(history_table)
