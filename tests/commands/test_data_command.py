"""Tests for the data management commands."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from studyplan_cli.main import app
from studyplan_cli.services.app_context import get_app_context

runner = CliRunner()


@pytest.fixture()
def seeded():
    ctx = get_app_context()
    task = ctx.tasks.create_task({"title": "Algebra HW", "due_date": "2024-01-10"})
    ctx.notes.create_note({"task_id": task.id, "title": "Chapter 3"})
    return ctx


class TestExport:
    def test_export_to_file(self, seeded, tmp_path):
        target = tmp_path / "backup.json"

        result = runner.invoke(app, ["data", "export", "--output", str(target)])

        assert result.exit_code == 0, result.output
        assert "Export Summary" in result.output
        doc = json.loads(target.read_text())
        assert doc["version"] == "1.0"
        assert len(doc["tasks"]) == 1
        assert len(doc["notes"]) == 1

    def test_export_default_filename(self, seeded, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["data", "export"])
        assert result.exit_code == 0
        assert len(list(tmp_path.glob("study-planner-backup-*.json"))) == 1

    def test_export_stdout(self, seeded):
        result = runner.invoke(app, ["data", "export", "--stdout"])
        assert result.exit_code == 0
        assert json.loads(result.output)["tasks"][0]["title"] == "Algebra HW"


class TestImport:
    def _backup(self, tmp_path, doc) -> str:
        path = tmp_path / "backup.json"
        path.write_text(doc if isinstance(doc, str) else json.dumps(doc))
        return str(path)

    def test_import_round_trip(self, seeded, tmp_path):
        path = tmp_path / "backup.json"
        runner.invoke(app, ["data", "export", "-o", str(path)])
        before = list(seeded.state.tasks)
        runner.invoke(app, ["data", "clear", "--yes"])

        result = runner.invoke(app, ["data", "import", str(path), "--yes"])

        assert result.exit_code == 0, result.output
        assert "Imported 1 task(s) and 1 note(s)" in result.output
        assert get_app_context().state.tasks == before

    def test_import_confirm_declined(self, seeded, tmp_path):
        path = self._backup(tmp_path, {"tasks": [], "notes": []})

        result = runner.invoke(app, ["data", "import", path], input="n\n")

        assert result.exit_code == 0
        assert "Import cancelled" in result.output
        assert len(seeded.state.tasks) == 1

    def test_import_confirm_accepted(self, seeded, tmp_path):
        path = self._backup(tmp_path, {"tasks": [], "notes": []})
        result = runner.invoke(app, ["data", "import", path], input="y\n")
        assert result.exit_code == 0
        assert seeded.state.tasks == []

    def test_import_missing_file(self, seeded):
        result = runner.invoke(app, ["data", "import", "missing.json", "--yes"])
        assert result.exit_code == 5
        assert "File not found" in result.output

    def test_import_unparseable(self, seeded, tmp_path):
        path = self._backup(tmp_path, "{ not json")

        result = runner.invoke(app, ["data", "import", path, "--yes"])

        assert result.exit_code == 2
        assert "Error reading backup file" in result.output
        assert len(seeded.state.tasks) == 1

    @pytest.mark.parametrize(
        "doc",
        [{}, {"tasks": []}, [], {"tasks": [1], "notes": []}],
        ids=["empty", "no-notes", "array", "task-not-object"],
    )
    def test_import_invalid_format(self, seeded, tmp_path, doc):
        path = self._backup(tmp_path, doc)

        result = runner.invoke(app, ["data", "import", path, "--yes"])

        assert result.exit_code == 2
        assert "Invalid backup file format" in result.output
        assert len(seeded.state.tasks) == 1
        assert len(seeded.state.notes) == 1

    def test_import_minimal_entries(self, seeded, tmp_path):
        path = self._backup(
            tmp_path,
            {"tasks": [{"id": "a", "title": "Algebra HW"}, {"id": "b"}], "notes": []},
        )

        result = runner.invoke(app, ["data", "import", path, "--yes"])

        assert result.exit_code == 0, result.output
        assert "Imported 1 task(s)" in result.output
        assert "Skipped 1 entry" in result.output
        assert [t.id for t in seeded.state.tasks] == ["a"]


class TestClear:
    def test_clear_yes(self, seeded, isolated_dirs):
        result = runner.invoke(app, ["data", "clear", "--yes"])

        assert result.exit_code == 0
        assert seeded.state.tasks == []
        assert seeded.state.notes == []
        assert json.loads((isolated_dirs / "data" / "tasks.json").read_text()) == []

    def test_clear_cancelled(self, seeded):
        result = runner.invoke(app, ["data", "clear"], input="n\n")
        assert result.exit_code == 0
        assert "Clear cancelled" in result.output
        assert len(seeded.state.tasks) == 1


def test_clear_recovers_from_undecodable_store(isolated_dirs):
    data_dir = isolated_dirs / "data"
    data_dir.mkdir()
    (data_dir / "tasks.json").write_bytes(b"[\xff\xfe]")

    result = runner.invoke(app, ["data", "clear", "--yes"])

    assert result.exit_code == 0, result.output
    assert json.loads((data_dir / "tasks.json").read_text(encoding="utf-8")) == []
