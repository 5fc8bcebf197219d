"""
tpcheck Command-Line Tests
==========================

Integration tests that run the tpcheck command through Click's test
runner against files in an isolated filesystem.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from toyparse import __version__
from toyparse.cli.errors import ExitCode, handle_cli_exception
from toyparse.cli.tpcheck import main
from toyparse.errors import SourceLocation, SourceUnavailableError
from toyparse.frontend.errors import UnexpectedTokenError
from toyparse.frontend.tokens import Token, TokenKind


@pytest.fixture
def runner(monkeypatch):
    for name in (
        "TOYPARSE_DEFAULT_EXTENSION",
        "TOYPARSE_ALLOW_UNTERMINATED",
        "TOYPARSE_SYMBOL_ORDER",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestTpcheckSuccess:
    """Accepted programs."""

    def test_accepts_program(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("x = 1 + 2;\n")
            result = runner.invoke(main, ["prog.txt"])

            assert result.exit_code == ExitCode.SUCCESS, result.output
            assert "Parsing successful!" in result.output
            assert "Symbol Table:" in result.output
            assert "Token Name: x" in result.output
            assert "\tType: Identifier, Value: x, Line Number: 1" in result.output

    def test_appends_default_extension(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("x = 1;")
            result = runner.invoke(main, ["prog"])
            assert result.exit_code == 0, result.output

    def test_custom_extension(self, runner):
        with runner.isolated_filesystem():
            Path("prog.toy").write_text("x = 1;")
            result = runner.invoke(main, ["-e", "toy", "prog"])
            assert result.exit_code == 0, result.output

    def test_no_symbols(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("x = 1;")
            result = runner.invoke(main, ["--no-symbols", "prog.txt"])
            assert result.exit_code == 0
            assert "Symbol Table:" not in result.output

    def test_sorted_symbols(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("b = a;")
            result = runner.invoke(main, ["--sorted", "prog.txt"])
            assert result.exit_code == 0
            assert result.output.index("Token Name: a") < result.output.index("Token Name: b")

    def test_tokens(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("x += 1;")
            result = runner.invoke(main, ["--tokens", "--no-symbols", "prog.txt"])
            assert result.exit_code == 0
            assert "Type: Identifier, Value: x, Line Number: 1" in result.output
            assert "Type: Operator, Value: +=, Line Number: 1" in result.output
            assert "Type: End" not in result.output

    def test_trace(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("x = 1;")
            result = runner.invoke(main, ["--trace", "prog.txt"])
            assert result.exit_code == 0
            assert "Matched: Identifier, Value: x" in result.output
            assert "Matched: Punctuation Symbol, Value: ;" in result.output

    def test_verbose(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("a = 1;\nb = 2;\n")
            result = runner.invoke(main, ["-v", "prog.txt"])
            assert result.exit_code == 0
            assert "Statements: 2" in result.output
            assert "Tokens: 8" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestTpcheckFailure:
    """Rejected programs and unreadable sources."""

    def test_syntax_error(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("=x;")
            result = runner.invoke(main, ["prog.txt"])
            assert result.exit_code == ExitCode.REJECTED
            assert "prog.txt:1: error: unexpected Operator '='" in result.output
            assert "Symbol Table:" not in result.output

    def test_trace_before_error(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text("a = 1;\nb = ;")
            result = runner.invoke(main, ["--trace", "prog.txt"])
            assert result.exit_code == ExitCode.REJECTED
            assert "Matched: Identifier, Value: b" in result.output
            assert "prog.txt:2: error" in result.output

    def test_unterminated_literal(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text('s = "abc')
            result = runner.invoke(main, ["prog.txt"])
            assert result.exit_code == ExitCode.REJECTED
            assert "unterminated literal" in result.output

    def test_lenient_literals(self, runner):
        with runner.isolated_filesystem():
            Path("prog.txt").write_text('s = "abc')
            result = runner.invoke(main, ["--lenient-literals", "prog.txt"])
            assert result.exit_code == ExitCode.REJECTED
            assert "unexpected Literal 'abc'" in result.output

    def test_missing_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["nothing"])
            assert result.exit_code == ExitCode.INVALID_ARGS
            assert "nothing.txt" in result.output

    def test_undecodable_byte(self, runner):
        """A stray Latin-1 byte is rejected at its line, not an internal error."""
        with runner.isolated_filesystem():
            Path("prog.txt").write_bytes(b"x = 1;\ny = \xe9;\n")
            result = runner.invoke(main, ["prog.txt"])
            assert result.exit_code == ExitCode.REJECTED, result.output
            assert "prog.txt:2: error: unexpected Invalid" in result.output
            assert "Internal error" not in result.output

    def test_deep_nesting(self, runner):
        with runner.isolated_filesystem():
            depth = 5000
            Path("prog.txt").write_text("x = " + "(" * depth + "1" + ")" * depth + ";")
            result = runner.invoke(main, ["prog.txt"])
            assert result.exit_code == ExitCode.REJECTED
            assert "prog.txt:1: error: expression nested too deeply" in result.output


class TestHandleCliException:
    """Exception to exit code mapping."""

    def test_frontend_error(self, capsys):
        error = UnexpectedTokenError(
            Token(TokenKind.OPERATOR, "=", 1), "identifier", SourceLocation("p.txt", 1)
        )
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error)
        assert exc_info.value.code == ExitCode.REJECTED
        assert "p.txt:1: error:" in capsys.readouterr().err

    def test_source_unavailable(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(SourceUnavailableError("gone.txt", "No such file"))
        assert exc_info.value.code == ExitCode.INVALID_ARGS
        assert capsys.readouterr().err.startswith("Error: cannot open source file")

    def test_anything_else_is_internal(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(RuntimeError("boom"))
        assert exc_info.value.code == ExitCode.INTERNAL_ERROR
        assert "Internal error: boom" in capsys.readouterr().err

    def test_bad_option_rejected_by_click(self, runner):
        """Usage errors exit before the handler is reached."""
        result = runner.invoke(main, ["--no-such-option", "prog.txt"])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Internal error" not in result.output
