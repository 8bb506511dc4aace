"""Tests for the command line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from progress_tracker.model.app_state import get_empty_state
from progress_tracker.repository.tracker import TrackerStateRepository
from progress_tracker.service.dataset import INVALID_FILE_MESSAGE
from progress_tracker.terminal.app import app

runner = CliRunner(env={"COLUMNS": "200"})


def invoke(*args: str):
    return runner.invoke(app, list(args))


class TestTrackerCommands:
    def test_create_and_show(self, cli_repository: TrackerStateRepository):
        result = invoke("create", "Push-ups", "--target", "20")

        assert result.exit_code == 0, result.output
        assert "Push-ups" in result.output
        state = cli_repository.get_state()
        assert state["active_tracker"]["target"] == 20
        assert cli_repository.is_dirty

        result = invoke("show")
        assert result.exit_code == 0
        assert "0 / 20" in result.output

    def test_alias(self, cli_repository: TrackerStateRepository):
        result = invoke("cr", "Laps", "-t", "3")

        assert result.exit_code == 0, result.output
        assert cli_repository.get_state()["active_tracker"]["label"] == "Laps"

    def test_invalid_target(self, cli_repository: TrackerStateRepository):
        result = invoke("create", "Push-ups", "--target", "0")

        assert result.exit_code == 1
        assert "Invalid target" in result.output
        assert cli_repository.get_state() == get_empty_state()

    def test_create_refuses_to_replace(self, cli_repository: TrackerStateRepository):
        invoke("create", "First", "--target", "2")

        result = invoke("create", "Second", "--target", "2")
        assert result.exit_code == 1
        assert cli_repository.get_state()["active_tracker"]["label"] == "First"

        result = invoke("create", "Second", "--target", "2", "--replace")
        assert result.exit_code == 0
        state = cli_repository.get_state()
        assert state["active_tracker"]["label"] == "Second"
        assert state["history"] == []

    def test_increment_to_completion(self, cli_repository: TrackerStateRepository):
        invoke("create", "Once", "--target", "2")
        invoke("inc")
        result = invoke("increment")

        assert result.exit_code == 0, result.output
        assert "Done!" in result.output
        tracker = cli_repository.get_state()["active_tracker"]
        assert tracker["completed_at"] is not None

        result = invoke("inc")
        assert result.exit_code == 1
        assert "already complete" in result.output

    def test_decrement_guard(self, cli_repository: TrackerStateRepository):
        invoke("create", "Pages", "--target", "2")

        result = invoke("dec")

        assert result.exit_code == 1
        assert "already at zero" in result.output
        assert len(cli_repository.get_state()["active_tracker"]["logs"]) == 1

    @pytest.mark.parametrize("command", ["show", "inc", "dec", "archive", "log"])
    def test_requires_active_tracker(self, command, cli_repository):
        result = invoke(command)

        assert result.exit_code == 1
        assert "No active tracker" in result.output

    def test_archive_and_history(self, cli_repository: TrackerStateRepository):
        invoke("create", "Laps", "--target", "2")
        result = invoke("archive")

        assert result.exit_code == 0
        state = cli_repository.get_state()
        assert state["active_tracker"] is None
        assert state["history"][0]["label"] == "Laps"

        result = invoke("history", "ls")
        assert result.exit_code == 0
        assert "Laps" in result.output

    def test_history_log_and_delete(self, cli_repository: TrackerStateRepository):
        invoke("create", "Old", "--target", "2")
        invoke("archive")
        tracker_id = cli_repository.get_state()["history"][0]["id"]

        result = invoke("history", "log", tracker_id[:8])
        assert result.exit_code == 0
        assert "Tracker archived" in result.output

        result = invoke("h", "d", tracker_id[:8])
        assert result.exit_code == 0
        assert cli_repository.get_state()["history"] == []

    def test_history_unknown_id(self, cli_repository: TrackerStateRepository):
        result = invoke("history", "delete", "nope")

        assert result.exit_code == 1
        assert "No archived tracker" in result.output

    def test_empty_history(self, cli_repository: TrackerStateRepository):
        result = invoke("history", "list")

        assert result.exit_code == 0
        assert "No archived trackers yet." in result.output


class TestDatasetCommands:
    def test_export_then_import(self, cli_repository, tmp_path: Path):
        invoke("create", "Old", "--target", "2")
        invoke("archive")
        invoke("create", "Current", "--target", "5")
        invoke("inc")
        before = cli_repository.get_state()
        output = tmp_path / "backup.json"

        result = invoke("export", "--output", str(output))

        assert result.exit_code == 0, result.output
        document = json.loads(output.read_text())
        assert document["version"] == 1
        assert document["activeTracker"]["label"] == "Current"
        assert document["history"][0]["label"] == "Old"

        invoke("archive")
        result = invoke("import", str(output))

        assert result.exit_code == 0, result.output
        assert cli_repository.get_state() == before

    def test_import_uses_first_file(self, cli_repository, tmp_path: Path):
        good = tmp_path / "good.json"
        good.write_text('{"version": 1, "history": []}')
        bad = tmp_path / "bad.json"
        bad.write_text("garbage")
        invoke("create", "Current", "--target", "5")

        result = invoke("import", str(good), str(bad))

        assert result.exit_code == 0, result.output
        assert cli_repository.get_state() == get_empty_state()

    @pytest.mark.parametrize(
        "content",
        [
            "garbage",
            '{"version":0,"activeTracker":null,"history":[]}',
            '{"version":1}',
        ],
    )
    def test_invalid_import_keeps_state(self, content, cli_repository, tmp_path):
        invoke("create", "Keep me", "--target", "3")
        before = cli_repository.get_state()
        path = tmp_path / "import.json"
        path.write_text(content)

        result = invoke("import", str(path))

        assert result.exit_code == 1
        assert INVALID_FILE_MESSAGE in result.output
        assert cli_repository.get_state() == before

    def test_unreadable_import_file(self, cli_repository, tmp_path: Path):
        result = invoke("import", str(tmp_path / "missing.json"))

        assert result.exit_code == 1
        assert INVALID_FILE_MESSAGE in result.output

    def test_sparse_import_stays_usable(self, cli_repository, tmp_path: Path):
        path = tmp_path / "edited.json"
        path.write_text(
            json.dumps(
                {
                    "version": 1,
                    "activeTracker": {"label": "Edited", "target": 5},
                    "history": [{"label": "Old", "target": 2, "current": 2}],
                }
            )
        )

        result = invoke("import", str(path))
        assert result.exit_code == 0, result.output

        result = invoke("show")
        assert result.exit_code == 0, result.output
        assert "0 / 5" in result.output

        result = invoke("inc")
        assert result.exit_code == 0, result.output
        assert cli_repository.get_state()["active_tracker"]["current"] == 1

        result = invoke("dec")
        assert result.exit_code == 0, result.output

        result = invoke("history", "ls")
        assert result.exit_code == 0, result.output
        assert "Old" in result.output

    @pytest.mark.parametrize("command", ["inc", "dec"])
    def test_archived_active_tracker_is_frozen(
        self, command, cli_repository, tmp_path: Path
    ):
        path = tmp_path / "archived.json"
        path.write_text(
            json.dumps(
                {
                    "version": 1,
                    "activeTracker": {
                        "label": "Frozen",
                        "target": 5,
                        "current": 2,
                        "archivedAt": 1_700_000_000_000,
                    },
                }
            )
        )
        invoke("import", str(path))
        before = cli_repository.get_state()

        result = invoke(command)

        assert result.exit_code == 1
        assert "already archived" in result.output
        assert cli_repository.get_state() == before

    def test_export_to_missing_directory(self, cli_repository, tmp_path: Path):
        output = tmp_path / "no" / "such" / "dir" / "backup.json"

        result = invoke("export", "-o", str(output))

        assert result.exit_code == 1
        assert "Could not write export file" in result.output
        assert not output.exists()


class TestConfigCommands:
    def test_view(self, cli_repository, config_path: Path):
        result = invoke("config", "view")

        assert result.exit_code == 0
        assert "log_display_limit" in result.output

    def test_set(self, cli_repository, config_path: Path):
        from progress_tracker.repository.configuration import CONFIGURATION_REPO

        result = invoke("config", "set", "--log-display-limit", "10")

        assert result.exit_code == 0, result.output
        assert CONFIGURATION_REPO.get_config()["log_display_limit"] == 10

    def test_set_rejects_unknown_log_level(self, cli_repository):
        result = invoke("c", "s", "--log-level", "LOUD")
        assert result.exit_code == 2
