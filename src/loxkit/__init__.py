"""
loxkit - Front End Toolchain for the Lox Language
=================================================

This package provides the lexical-analysis front end of a small
interpreted-language toolchain. Source text goes in, a flat list of
typed tokens comes out; the parser and evaluator that consume those
tokens live outside this package.

Main Components
---------------
- **tokens**: TokenKind enumeration and the immutable Token record
- **scanner**: single-pass Scanner with one character of lookahead
- **errors**: exception hierarchy and the ErrorCollector diagnostic sink
- **config**: ScannerOptions with environment overrides
- **cli**: the loxscan command (REPL and file modes)

Quick Start
-----------
    >>> from loxkit import scan
    >>> [str(t.kind) for t in scan("!= ;")]
    ['BANG_EQUAL', 'SEMICOLON', 'EOF']

Or use the command-line tool:
    $ loxscan script.lox
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from loxkit.config import ScannerOptions
from loxkit.errors import (
    LoxError,
    SourceLocation,
    LexicalError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    UnterminatedCommentError,
    LexicalErrorsFound,
    ScannerStateError,
    ErrorCollector,
)
from loxkit.scanner import Scanner, scan
from loxkit.tokens import Token, TokenKind

__all__ = [
    "__version__",
    # Scanning
    "Scanner",
    "scan",
    "Token",
    "TokenKind",
    "ScannerOptions",
    # Errors
    "LoxError",
    "SourceLocation",
    "LexicalError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "UnterminatedCommentError",
    "LexicalErrorsFound",
    "ScannerStateError",
    "ErrorCollector",
]
