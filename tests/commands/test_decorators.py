"""Unit tests for command decorators."""

from unittest.mock import patch

import pytest
import typer
from pydantic import BaseModel, ValidationError

from studyplan_cli.commands.decorators import AppError, command_wrapper, describe_validation_error


class _Sample(BaseModel):
    count: int


def _validation_error() -> ValidationError:
    try:
        _Sample(count="many")
    except ValidationError as e:
        return e
    raise AssertionError("expected a ValidationError")


class TestAppError:
    def test_default_exit_code(self):
        assert AppError("boom").exit_code == 1

    def test_custom_exit_code(self):
        err = AppError("missing", exit_code=5)
        assert err.exit_code == 5
        assert str(err) == "missing"


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def ok():
            return 42

        assert ok() == 42

    def test_preserves_name(self):
        @command_wrapper
        def my_command():
            pass

        assert my_command.__name__ == "my_command"

    def test_app_error_maps_to_exit_code(self):
        @command_wrapper
        def fails():
            raise AppError("Task not found: x", exit_code=5)

        with patch("studyplan_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                fails()

        assert exc_info.value.exit_code == 5
        fmt.assert_called_once_with("Task not found: x")

    def test_validation_error_maps_to_invalid_args(self):
        @command_wrapper
        def fails():
            raise _validation_error()

        with patch("studyplan_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                fails()

        assert exc_info.value.exit_code == 2
        assert fmt.call_args.args[0].startswith("Invalid input: count:")

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def cancelled():
            raise typer.Exit(0)

        with pytest.raises(typer.Exit) as exc_info:
            cancelled()
        assert exc_info.value.exit_code == 0

    def test_unexpected_error_maps_to_general(self):
        @command_wrapper
        def crashes():
            raise RuntimeError("disk on fire")

        with patch("studyplan_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                crashes()

        assert exc_info.value.exit_code == 1
        assert "disk on fire" in fmt.call_args.args[0]

    def test_failures_are_logged(self, isolated_dirs):
        @command_wrapper
        def fails():
            raise AppError("nope", exit_code=5)

        with patch("studyplan_cli.commands.decorators.format_error"):
            with pytest.raises(typer.Exit):
                fails()

        log = (isolated_dirs / "logs" / "studyplan.log").read_text()
        assert "command started: fails" in log
        assert "[ERROR_NOT_FOUND] - nope" in log

    def test_success_is_logged(self, isolated_dirs):
        @command_wrapper
        def works():
            pass

        works()

        log = (isolated_dirs / "logs" / "studyplan.log").read_text()
        assert "command completed: works" in log


def test_describe_validation_error():
    message = describe_validation_error(_validation_error())
    assert message.startswith("count: ")
