"""
loxkit Error Hierarchy
======================

This module defines the exception hierarchy for the loxkit toolchain.
All exceptions inherit from LoxError, allowing callers to catch every
toolchain error with a single except clause.

Exception Hierarchy
-------------------
LoxError (base)
├── LexicalError - recoverable scanning error (reported, not raised)
│   ├── UnexpectedCharacterError - character with no token rule
│   ├── UnterminatedStringError - missing closing quote
│   └── UnterminatedCommentError - missing closing */
├── LexicalErrorsFound - aggregate report of collected lexical errors
└── ScannerStateError - scanner used after its scan has completed

Lexical errors are never raised out of Scanner.scan(). The scanner builds
them, hands them to an ErrorCollector and carries on with the next
character. Callers decide afterwards whether the collected errors are
fatal (see ErrorCollector.raise_if_errors).

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
            ^ (pointer to error location)
    hint: suggestion for fixing
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all loxkit errors.

        try:
            tokens = scan(source)
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<stdin>" for REPL input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(LoxError):
    """
    Recoverable error found while scanning.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> int:
        return self.location.line

    def short_message(self) -> str:
        """Single-line console form: 'error on line: N description'."""
        return f"error on line: {self.location.line} {self.message}"

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            <stdin>:1:5: error: unexpected character '@'
                (a) @
                    ^
        """
        parts = [f"{self.location}: error: {self.message}"]

        # Source context with caret pointer
        if self.source_line is not None and self.location.column > 0:
            parts.append(f"    {self.source_line}")
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(LexicalError):
    """
    Character that does not start any token.

    The offending character is skipped; scanning resumes right after it.
    """

    def __init__(
        self,
        char: str,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"Unexpected character {char!r} (U+{ord(char):04X})",
            location,
            source_line=source_line,
        )


class UnterminatedStringError(LexicalError):
    """
    String literal with no closing quote before end of input.

    Example:
        "hello    // everything up to end of input is swallowed
    """

    def __init__(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated string",
            location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class UnterminatedCommentError(LexicalError):
    """Block comment with no closing */ before end of input."""

    def __init__(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated block comment",
            location,
            hint="add closing */ to terminate the comment",
            source_line=source_line,
        )


class LexicalErrorsFound(LoxError):
    """
    Aggregate of collected lexical errors.

    The message is a pre-formatted report from ErrorCollector.
    """

    def __init__(self, report: str, errors: List[LexicalError]):
        self.errors = list(errors)
        super().__init__(report)


# =============================================================================
# Usage Errors
# =============================================================================

class ScannerStateError(LoxError):
    """Raised when scan() is called twice on the same Scanner."""
    pass


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class ErrorCollector:
    """
    Collects lexical errors for batch reporting.

    The scanner reports into a collector instead of raising, so a single
    pass surfaces every bad character in the input. Once max_errors is
    reached the scanner stops reporting (it still finishes the scan).

    Example:
        collector = ErrorCollector(max_errors=10)
        tokens = Scanner(source, errors=collector).scan()
        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before stopping
        """
        self.errors: List[LexicalError] = []
        self.max_errors = max_errors

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise LexicalErrorsFound if any errors were collected."""
        if self.has_errors():
            raise LexicalErrorsFound(self.report(), self.errors)
