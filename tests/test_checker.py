# =============================================================================
# test_checker.py - Syntax Checker and Configuration Tests
# =============================================================================
# Tests for the checker that wires the lexer to the parser, its options,
# and source name resolution.
# =============================================================================

from pathlib import Path

import pytest
from toyparse import check_file, check_source
from toyparse.errors import SourceLocation, SourceUnavailableError, ToyParseError
from toyparse.frontend.checker import (
    CheckerOptions,
    SyntaxChecker,
    resolve_source_path,
)
from toyparse.frontend.errors import (
    FrontendError,
    UnexpectedTokenError,
    UnterminatedLiteralError,
)
from toyparse.frontend.tokens import TokenKind


# =============================================================================
# Source Checking
# =============================================================================

class TestCheckSource:
    """Tests for checking source text."""

    def test_result_counts(self):
        result = check_source("x = x + 1;")
        assert result.filename == "<input>"
        assert result.statement_count == 1
        assert result.token_count == 6
        assert len(result.symbol_table.occurrences_of("x")) == 2
        assert result.trace == []

    def test_empty_source(self):
        result = check_source("")
        assert result.statement_count == 0
        assert result.token_count == 0
        assert len(result.symbol_table) == 0

    def test_trace_collected(self):
        options = CheckerOptions(trace=True)
        result = check_source("x=1;", options=options)
        assert result.trace == [
            "Matched: Identifier, Value: x",
            "Matched: Operator, Value: =",
            "Matched: Constant, Value: 1",
            "Matched: Punctuation Symbol, Value: ;",
            "Matched: End, Value: ",
        ]

    def test_on_match_streams_before_failure(self):
        seen = []
        checker = SyntaxChecker(on_match=seen.append)
        with pytest.raises(UnexpectedTokenError):
            checker.check_source("a = 1;\n= 2;")
        assert [t.text for t in seen] == ["a", "=", "1", ";"]

    def test_rejection_raises_frontend_error(self):
        with pytest.raises(FrontendError) as exc_info:
            check_source("=x;", "prog.txt")
        assert str(exc_info.value).startswith("prog.txt:1: error:")

    def test_unterminated_literal_default(self):
        with pytest.raises(UnterminatedLiteralError):
            check_source('s = "abc')

    def test_unterminated_literal_lenient(self):
        """Lenient scanning lets the parser see (and reject) the literal."""
        options = CheckerOptions(allow_unterminated_literals=True)
        with pytest.raises(UnexpectedTokenError) as exc_info:
            check_source('s = "abc', options=options)
        assert exc_info.value.token.kind is TokenKind.LITERAL

    def test_all_errors_share_base(self):
        with pytest.raises(ToyParseError):
            check_source("x = @;")


# =============================================================================
# File Checking
# =============================================================================

class TestCheckFile:
    """Tests for checking files on disk."""

    def test_check_file(self, tmp_path):
        path = tmp_path / "prog.txt"
        path.write_text("a = 1;\nb = a * 2;\n")
        result = check_file(path)
        assert result.statement_count == 2
        assert result.filename == str(path)

    def test_default_extension_applied(self, tmp_path):
        (tmp_path / "prog.txt").write_text("a = 1;")
        result = check_file(tmp_path / "prog")
        assert result.filename.endswith("prog.txt")

    def test_custom_extension(self, tmp_path):
        (tmp_path / "prog.toy").write_text("a = 1;")
        options = CheckerOptions(default_extension="toy")
        result = check_file(tmp_path / "prog", options=options)
        assert result.statement_count == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceUnavailableError) as exc_info:
            check_file(tmp_path / "absent")
        assert exc_info.value.path.endswith("absent.txt")

    def test_error_location_uses_path(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("a = 1;\n\nb = ;\n")
        with pytest.raises(UnexpectedTokenError) as exc_info:
            check_file(path)
        assert exc_info.value.location == SourceLocation(str(path), 3)


class TestResolveSourcePath:
    """Tests for default extension handling."""

    def test_appends_extension(self):
        assert resolve_source_path("prog") == Path("prog.txt")

    def test_keeps_existing_extension(self):
        assert resolve_source_path("prog.toy") == Path("prog.toy")

    def test_directory_with_dot(self):
        assert resolve_source_path("v1.2/prog") == Path("v1.2/prog.txt")

    def test_custom_extension(self):
        assert resolve_source_path("prog", ".src") == Path("prog.src")

    def test_no_extension_configured(self):
        assert resolve_source_path("prog", "") == Path("prog")


# =============================================================================
# Options
# =============================================================================

class TestCheckerOptions:
    """Tests for configuration."""

    def test_defaults(self):
        options = CheckerOptions()
        assert options.default_extension == ".txt"
        assert options.allow_unterminated_literals is False
        assert options.symbol_order == "insertion"
        assert options.trace is False

    def test_extension_gets_dot(self):
        assert CheckerOptions(default_extension="toy").default_extension == ".toy"

    def test_bad_symbol_order(self):
        with pytest.raises(ValueError):
            CheckerOptions(symbol_order="hash")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TOYPARSE_DEFAULT_EXTENSION", "src")
        monkeypatch.setenv("TOYPARSE_ALLOW_UNTERMINATED", "yes")
        monkeypatch.setenv("TOYPARSE_SYMBOL_ORDER", "sorted")
        options = CheckerOptions.from_env()
        assert options.default_extension == ".src"
        assert options.allow_unterminated_literals is True
        assert options.symbol_order == "sorted"

    def test_from_env_defaults(self, monkeypatch):
        for name in (
            "TOYPARSE_DEFAULT_EXTENSION",
            "TOYPARSE_ALLOW_UNTERMINATED",
            "TOYPARSE_SYMBOL_ORDER",
        ):
            monkeypatch.delenv(name, raising=False)
        assert CheckerOptions.from_env() == CheckerOptions()

    def test_from_env_ignores_unknown_order(self, monkeypatch):
        monkeypatch.setenv("TOYPARSE_SYMBOL_ORDER", "random")
        assert CheckerOptions.from_env().symbol_order == "insertion"
