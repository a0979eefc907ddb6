"""Tests for output formatters."""

from __future__ import annotations

import json
from datetime import date, datetime

import pytest
import yaml

from studyplan_cli.models import TaskStats
from studyplan_cli.utils.ui import formatters
from studyplan_cli.utils.ui.formatters import (
    format_due_date,
    format_error,
    format_notes_table,
    format_output,
    format_stats,
    format_task_detail,
    format_tasks_table,
)

from conftest import make_note, make_task


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    # Keep table rows on one line
    monkeypatch.setattr(formatters.console, "width", 200)


class TestFormatOutput:
    def test_json(self, capsys):
        assert format_output({"a": 1}, "json") is True
        assert json.loads(capsys.readouterr().out) == {"a": 1}

    def test_yaml(self, capsys):
        assert format_output({"a": [1, 2]}, "yaml") is True
        assert yaml.safe_load(capsys.readouterr().out) == {"a": [1, 2]}

    @pytest.mark.parametrize("fmt", ["table", "pretty", ""])
    def test_table_formats_left_to_caller(self, fmt, capsys):
        assert format_output({"a": 1}, fmt) is False
        assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "-"),
        ("", "-"),
        (date(2024, 1, 5), "Jan 05, 2024"),
        (datetime(2024, 1, 5, 23, 0), "Jan 05, 2024"),
        ("2024-01-05", "Jan 05, 2024"),
        ("2024-01-05T10:00:00Z", "Jan 05, 2024"),
    ],
)
def test_format_due_date(value, expected):
    assert format_due_date(value) == expected


def test_format_due_date_custom_format():
    assert format_due_date(date(2024, 1, 5), "%Y/%m/%d") == "2024/01/05"


def test_tasks_table_empty(capsys):
    format_tasks_table([])
    assert "No tasks found" in capsys.readouterr().out


def test_tasks_table_rows(capsys):
    tasks = [
        make_task("aaaaaaaa1111", "Algebra HW", due_date="2000-01-01", priority="high"),
        make_task("bbbbbbbb2222", "Chem Lab", status="completed"),
    ]

    format_tasks_table(tasks, {"aaaaaaaa1111": 2})
    out = capsys.readouterr().out

    assert "aaaaaaaa" in out
    assert "aaaaaaaa1111" not in out
    assert "Algebra HW" in out
    assert "Jan 01, 2000 !" in out
    assert "completed" in out


def test_task_detail_marks_overdue(capsys):
    task = make_task(due_date="2000-01-01", subject="Math")
    format_task_detail(task, [make_note(content="Quadratics")])
    out = capsys.readouterr().out

    assert "(overdue)" in out
    assert "1 note" in out
    assert "Quadratics" in out


def test_task_detail_without_notes(capsys):
    format_task_detail(make_task(), [])
    out = capsys.readouterr().out
    assert "0 notes" in out
    assert "No notes yet" not in out


def test_notes_table_empty(capsys):
    format_notes_table([])
    assert "No notes yet" in capsys.readouterr().out


def test_stats_panel(capsys):
    format_stats(TaskStats(total=3, completed=1, in_progress=1, overdue=1))
    out = capsys.readouterr().out
    assert "Study Progress" in out
    assert "In progress" in out


def test_format_error(capsys):
    format_error("boom")
    assert "Error: boom" in capsys.readouterr().out
