"""
Scanner (Tokenizer)
===================

This module converts Lox source text into a flat list of tokens in a
single forward pass with at most one character of lookahead.

Scanning Rules
--------------
- Whitespace: space, tab and carriage return are skipped; a newline is
  skipped and advances the line counter.
- Comments: ``// ...`` runs to the end of the line (the newline itself is
  left to the whitespace rule); ``/* ... */`` may span lines and does not
  nest.
- Operators: ``!``, ``=``, ``>`` and ``<`` combine with a following ``=``
  (maximal munch).
- Strings: ``"..."`` may span lines; the lexeme keeps both quotes and the
  token carries the line of the opening quote. There are no escapes.

Lexical errors (unexpected character, unterminated string, unterminated
block comment) are reported to an ErrorCollector and logged; they never
abort the scan, and the returned list always ends with one EOF token.

Example Usage
-------------
>>> from loxkit.scanner import scan
>>> scan("(!= <")
[Token(LEFT_PAREN, '(', line 1), Token(BANG_EQUAL, '!=', line 1), Token(LESS, '<', line 1), Token(EOF, line 1)]
"""

import logging
from typing import List, Optional

from loxkit.errors import (
    ErrorCollector,
    LexicalError,
    ScannerStateError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from loxkit.tokens import EQUAL_PAIRS, SINGLE_CHAR_TOKENS, Token, TokenKind

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Scans one unit of source text into tokens.

    A Scanner holds the cursor state for exactly one scan; create a new
    instance for every input.

    Usage:
        scanner = Scanner(source, "main.lox")
        tokens = scanner.scan()
        if scanner.had_error:
            ...

    Attributes:
        source: The source text being scanned
        filename: Name of the source (for diagnostics)
    """

    WHITESPACE = " \t\r"

    def __init__(
        self,
        source: str,
        filename: str = "<stdin>",
        line_number: int = 1,
        errors: Optional[ErrorCollector] = None,
    ):
        """
        Initialize the scanner with source text.

        Args:
            source: The text to scan
            filename: Name of the source (for error messages)
            line_number: Line number of the first line of source
            errors: Collector receiving lexical errors (a private one
                is created when omitted)
        """
        self.source = source
        self.filename = filename
        self.error_collector = errors if errors is not None else ErrorCollector()

        self._tokens: List[Token] = []
        self._errors: List[LexicalError] = []
        self._start = 0
        self._current = 0
        self._line = line_number
        self._line_start_pos = 0
        self._scanned = False

    @property
    def errors(self) -> List[LexicalError]:
        """Lexical errors reported by this scanner."""
        return self._errors

    @property
    def had_error(self) -> bool:
        return bool(self._errors)

    def scan(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order, ending with exactly one EOF token

        Raises:
            ScannerStateError: If this scanner has already been used
        """
        if self._scanned:
            raise ScannerStateError("scanner has already scanned its source")
        self._scanned = True

        while not self._at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenKind.EOF, self._line, ""))
        logger.debug(
            f"Scanned {self.filename}: {len(self._tokens)} tokens, "
            f"{len(self._errors)} errors, {self._line} lines"
        )
        return self._tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._current >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """Character at current + offset, or "" past end of source."""
        pos = self._current + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking newlines."""
        char = self.source[self._current]
        self._current += 1

        if char == "\n":
            self._line += 1
            self._line_start_pos = self._current

        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character if it equals expected."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    # =========================================================================
    # Token Dispatch
    # =========================================================================

    def _scan_token(self) -> None:
        start_line = self._line
        start_column = self._current - self._line_start_pos + 1
        start_line_pos = self._line_start_pos

        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char], start_line)
            return

        if char in EQUAL_PAIRS:
            alone, with_equal = EQUAL_PAIRS[char]
            self._add_token(with_equal if self._match("=") else alone, start_line)
            return

        if char == "/":
            if self._match("/"):
                self._skip_line_comment()
            elif self._match("*"):
                self._skip_block_comment(start_line, start_column, start_line_pos)
            else:
                self._add_token(TokenKind.SLASH, start_line)
            return

        if char == '"':
            self._scan_string(start_line, start_column, start_line_pos)
            return

        if char == "\n" or char in self.WHITESPACE:
            return

        self._report(
            UnexpectedCharacterError(
                char,
                SourceLocation(self.filename, start_line, start_column),
                self._line_text(start_line_pos),
            )
        )

    def _add_token(self, kind: TokenKind, line: int) -> None:
        """Emit a token whose lexeme is source[start:current]."""
        self._tokens.append(Token(kind, line, self.source[self._start:self._current]))

    # =========================================================================
    # Comments and Strings
    # =========================================================================

    def _skip_line_comment(self) -> None:
        # Leave the newline for the whitespace rule.
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self, start_line: int, start_column: int, line_pos: int) -> None:
        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                return
            self._advance()

        self._report(
            UnterminatedCommentError(
                SourceLocation(self.filename, start_line, start_column),
                self._line_text(line_pos),
            )
        )

    def _scan_string(self, start_line: int, start_column: int, line_pos: int) -> None:
        """Scan a string literal; the opening quote is already consumed."""
        while not self._at_end() and self._peek() != '"':
            self._advance()

        if self._at_end():
            self._report(
                UnterminatedStringError(
                    SourceLocation(self.filename, start_line, start_column),
                    self._line_text(line_pos),
                )
            )
            return

        self._advance()  # closing "
        self._add_token(TokenKind.STRING, start_line)

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def _report(self, error: LexicalError) -> None:
        # A full collector only stops collecting; this scan still records it.
        self._errors.append(error)
        if not self.error_collector.should_stop():
            self.error_collector.add(error)
        logger.info(f"{error.location}: {error.short_message()}")

    def _line_text(self, line_pos: int) -> str:
        """Source text of the line starting at line_pos."""
        line_end = self.source.find("\n", line_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_pos:line_end]


# =============================================================================
# Convenience Function
# =============================================================================

def scan(
    source: str,
    filename: str = "<stdin>",
    errors: Optional[ErrorCollector] = None,
) -> List[Token]:
    """
    Scan source text with a fresh Scanner.

    Args:
        source: The text to scan
        filename: Name of the source (for error messages)
        errors: Collector receiving lexical errors (optional)

    Returns:
        Tokens in source order, ending with exactly one EOF token
    """
    return Scanner(source, filename, errors=errors).scan()
