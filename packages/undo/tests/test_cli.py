"""Tests for simple_undo.cli"""
from __future__ import annotations

import pytest
from typer.testing import CliRunner

from simple_undo.cli import _number_op, _text_op, app, parse_steps
from simple_undo.config import VERSION

runner = CliRunner()


class TestStepParsing:
    def test_text_ops(self):
        assert _text_op("append:bar")("foo") == "foobar"
        assert _text_op("prepend:bar")("foo") == "barfoo"

    def test_text_op_keeps_colons_in_argument(self):
        assert _text_op("append:a:b")("") == "a:b"

    def test_number_ops(self):
        assert _number_op("add:3")(2) == 5
        assert _number_op("sub:3")(2) == -1
        assert _number_op("mul:-3")(2) == -6

    @pytest.mark.parametrize("step", ["append", "delete:x", "add:one", "pow:2"])
    def test_invalid_steps(self, step):
        parse_op = _number_op if step.startswith(("add", "pow")) else _text_op
        with pytest.raises(ValueError):
            parse_op(step)

    def test_control_steps_have_no_operation(self):
        parsed = parse_steps(["add:1", "undo", "redo"], _number_op)
        assert [s for s, _ in parsed] == ["add:1", "undo", "redo"]
        assert parsed[0][1] is not None
        assert parsed[1][1] is None
        assert parsed[2][1] is None


class TestTextCommand:
    def test_motivating_example(self):
        result = runner.invoke(
            app,
            ["text", "append:Simple ", "append:undo !", "undo", "undo", "redo", "append:redo !"],
        )
        assert result.exit_code == 0, result.output
        assert "Final value: 'Simple redo !'" in result.output

    def test_initial_option(self):
        result = runner.invoke(app, ["text", "--initial", "abc", "append:d", "undo"])
        assert result.exit_code == 0, result.output
        assert "Final value: 'abc'" in result.output

    def test_history_table(self):
        result = runner.invoke(app, ["text", "--history", "append:a", "append:b", "undo"])
        assert result.exit_code == 0, result.output
        assert "History" in result.output
        assert "append:b" in result.output

    def test_invalid_step_exits_2(self):
        result = runner.invoke(app, ["text", "delete:x"])
        assert result.exit_code == 2
        assert "Invalid step" in result.output


class TestNumberCommand:
    def test_counter_example(self):
        result = runner.invoke(
            app,
            ["number", "add:1", "add:1", "add:1", "undo", "undo", "redo", "mul:10", "redo"],
        )
        assert result.exit_code == 0, result.output
        assert "Final value: 20" in result.output

    def test_invalid_integer(self):
        result = runner.invoke(app, ["number", "add:x"])
        assert result.exit_code == 2


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert VERSION in result.output


class TestVerbose:
    def test_verbose_emits_debug_logs(self):
        result = runner.invoke(app, ["number", "-v", "add:1", "undo", "undo"])
        assert result.exit_code == 0, result.output
        assert "Applied operation #0" in result.output
        assert "Nothing to undo" in result.output


class TestModuleEntry:
    def test_import_does_not_run_cli(self):
        import importlib

        module = importlib.import_module("simple_undo.__main__")
        assert module.main is not None
