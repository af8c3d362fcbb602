"""
Tests for the error hierarchy, the ErrorCollector and ScannerOptions.
"""

import logging

import pytest

from loxkit.config import ScannerOptions
from loxkit.errors import (
    ErrorCollector,
    LexicalError,
    LexicalErrorsFound,
    LoxError,
    ScannerStateError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)


# =============================================================================
# Error Formatting
# =============================================================================

class TestLexicalErrors:
    """Tests for LexicalError formatting."""

    def test_hierarchy(self):
        for cls in (UnexpectedCharacterError, UnterminatedStringError, UnterminatedCommentError):
            assert issubclass(cls, LexicalError)
        assert issubclass(LexicalError, LoxError)
        assert issubclass(LexicalErrorsFound, LoxError)
        assert issubclass(ScannerStateError, LoxError)

    def test_source_location_str(self):
        assert str(SourceLocation("a.lox", 3, 7)) == "a.lox:3:7"

    def test_caret_under_column(self):
        error = UnexpectedCharacterError("@", SourceLocation("a.lox", 1, 4), "(){@")
        lines = str(error).splitlines()
        assert lines[0] == "a.lox:1:4: error: Unexpected character '@' (U+0040)"
        assert lines[1] == "    (){@"
        assert lines[2] == "       ^"

    def test_hint(self):
        error = UnterminatedStringError(SourceLocation("a.lox", 2, 1))
        assert str(error).endswith("hint: add closing '\"' to complete the string")

    def test_short_message(self):
        error = UnterminatedCommentError(SourceLocation("a.lox", 5, 1))
        assert error.short_message() == "error on line: 5 Unterminated block comment"
        assert error.line == 5


# =============================================================================
# Error Collector
# =============================================================================

class TestErrorCollector:
    """Tests for ErrorCollector."""

    def make_error(self, line: int) -> LexicalError:
        return UnexpectedCharacterError("@", SourceLocation("t.lox", line, 1))

    def test_empty(self):
        collector = ErrorCollector()
        assert not collector.has_errors()
        assert collector.error_count() == 0
        collector.raise_if_errors()

    def test_add_and_stop(self):
        collector = ErrorCollector(max_errors=2)
        collector.add(self.make_error(1))
        assert not collector.should_stop()
        collector.add(self.make_error(2))
        assert collector.should_stop()
        assert collector.error_count() == 2

    def test_report(self):
        collector = ErrorCollector()
        collector.add(self.make_error(1))
        report = collector.report()
        assert "t.lox:1:1: error:" in report
        assert report.endswith("1 error")

        collector.add(self.make_error(2))
        assert collector.report().endswith("2 errors")

    def test_raise_if_errors(self):
        collector = ErrorCollector()
        collector.add(self.make_error(4))
        with pytest.raises(LexicalErrorsFound) as exc_info:
            collector.raise_if_errors()
        assert exc_info.value.errors[0].line == 4
        assert "t.lox:4:1" in str(exc_info.value)

    def test_clear(self):
        collector = ErrorCollector()
        collector.add(self.make_error(1))
        collector.clear()
        assert not collector.has_errors()


# =============================================================================
# Configuration
# =============================================================================

class TestScannerOptions:
    """Tests for ScannerOptions defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOXKIT_MAX_ERRORS", raising=False)
        monkeypatch.delenv("LOXKIT_LOG_LEVEL", raising=False)
        options = ScannerOptions.from_env()
        assert options == ScannerOptions()
        assert options.filename == "<stdin>"
        assert options.first_line == 1
        assert options.max_errors == 100
        assert options.logging_level == logging.WARNING

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("LOXKIT_MAX_ERRORS", "5")
        monkeypatch.setenv("LOXKIT_LOG_LEVEL", "debug")
        options = ScannerOptions.from_env()
        assert options.max_errors == 5
        assert options.log_level == "DEBUG"
        assert options.logging_level == logging.DEBUG

    def test_invalid_env_ignored(self, monkeypatch):
        monkeypatch.setenv("LOXKIT_MAX_ERRORS", "lots")
        monkeypatch.setenv("LOXKIT_LOG_LEVEL", "chatty")
        options = ScannerOptions.from_env()
        assert options.max_errors == 100
        assert options.log_level == "WARNING"

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_non_positive_max_errors_ignored(self, monkeypatch, value):
        """A limit below 1 would hide every diagnostic, so it is ignored."""
        monkeypatch.setenv("LOXKIT_MAX_ERRORS", value)
        options = ScannerOptions.from_env()
        assert options.max_errors == 100
