# MathEngine - Command Line Tests
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""
Tests for the REPL and the one-shot command line.
"""

import io

import pytest

from mathengine import Config
from mathengine.cli import main, repl, run_line
from mathengine.lang import Interpreter


class TestRunLine:
    """Tests for run_line()."""

    def test_result_prefixed(self):
        """Results are printed with the prefix."""
        out = io.StringIO()
        assert run_line(Interpreter(), "1 + 2", out)
        assert out.getvalue() == " |> 3\n"

    def test_error_reported(self):
        """Errors are printed, not raised."""
        out = io.StringIO()
        assert not run_line(Interpreter(), "y = 12 @ x", out)
        assert "Variable 'x' does not appear" in out.getvalue()

    def test_division_by_zero_reported(self):
        """Division by zero is reported."""
        out = io.StringIO()
        assert not run_line(Interpreter(), "1 / 0", out)
        assert out.getvalue().startswith(" |> ")

    def test_superscript_reported(self):
        """Lexer errors on superscripts are reported."""
        out = io.StringIO()
        assert not run_line(Interpreter(), "2 * ² + 1", out)
        assert "Lexer Error" in out.getvalue()


class TestRepl:
    """Tests for the interactive loop."""

    def test_reads_until_exit(self, monkeypatch):
        """The loop stops at exit and skips blank lines."""
        lines = iter(["x + x", "", "2 * x = 4 @ x", "exit", "never read"])
        monkeypatch.setattr("builtins.input", lambda prompt: next(lines))
        out = io.StringIO()
        repl(Interpreter(), out)
        assert out.getvalue() == " |> (x * 2)\n |> x = 2\n"

    def test_stops_at_end_of_input(self, monkeypatch):
        """End of input ends the loop."""
        def fake_input(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)
        out = io.StringIO()
        repl(Interpreter(), out)
        assert out.getvalue() == "\n"

    def test_prompt(self, monkeypatch):
        """Test the prompt text."""
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return "quit"

        monkeypatch.setattr("builtins.input", fake_input)
        repl(Interpreter(Config()), io.StringIO())
        assert prompts == ["MathEngine >>> "]


class TestMain:
    """Tests for main()."""

    def test_command(self, capsys):
        """Test one-shot mode."""
        assert main(["-c", "3 = x * 2 @ x"]) == 0
        assert capsys.readouterr().out == " |> x = 3/2\n"

    def test_command_error_exit_code(self, capsys):
        """A failing command exits with 1."""
        assert main(["-c", "x +"]) == 1
        assert "Parser Error" in capsys.readouterr().out

    def test_exact_flag(self, capsys):
        """Test --exact."""
        assert main(["--exact", "-c", "0.5 + 0.25"]) == 0
        assert capsys.readouterr().out == " |> 3/4\n"

    def test_precision_flag(self, capsys):
        """Test --precision."""
        assert main(["--precision", "53", "-c", "0.5"]) == 0
        assert capsys.readouterr().out == " |> 0.5\n"

    def test_invalid_precision(self, capsys):
        """An invalid precision exits with 2."""
        assert main(["--precision", "1", "-c", "1"]) == 2
        assert "precision" in capsys.readouterr().err


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
