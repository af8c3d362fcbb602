"""
loxscan - Scanner Command-Line Interface
========================================

This module implements the command-line front end of the scanner. It
either runs an interactive read-scan-print loop or tokenizes a file.

Usage Examples
--------------
Interactive mode (an empty line or end of input exits):
    $ loxscan
    > (!= "hi")
    Token Type: LEFT_PAREN Line: 1
    Token Type: BANG_EQUAL Line: 1
    Token Type: STRING Line: 1
    Token Type: RIGHT_PAREN Line: 1
    Token Type: EOF Line: 1
    >

Tokenize a file, showing lexemes:
    $ loxscan --lexemes script.lox

Exit Codes
----------
0 - Success
1 - Lexical errors found (file mode)
2 - Invalid arguments or unreadable file
3 - Internal error
"""

import logging
from pathlib import Path
from typing import List, Optional

import click

from loxkit import __version__
from loxkit.cli.errors import handle_cli_exception
from loxkit.config import ScannerOptions
from loxkit.errors import ErrorCollector
from loxkit.scanner import Scanner
from loxkit.tokens import Token

logger = logging.getLogger(__name__)

PROMPT = "> "


# =============================================================================
# Output Helpers
# =============================================================================

def setup_logging(options: ScannerOptions, verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else options.logging_level
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token, show_lexeme: bool = False) -> str:
    """Format one token as a console row."""
    row = f"Token Type: {token.kind} Line: {token.line}"
    if show_lexeme:
        row += f" Lexeme: {token.lexeme}"
    return row


def print_tokens(tokens: List[Token], show_lexeme: bool = False) -> None:
    for token in tokens:
        click.echo(format_token(token, show_lexeme))


# =============================================================================
# Modes
# =============================================================================

def run_repl(options: ScannerOptions, show_lexeme: bool) -> None:
    """
    Read lines from stdin, scanning and printing each one.

    Every line is scanned independently and starts at the configured
    first line (1 by default). Lexical errors are echoed to stderr and
    the loop continues.
    """
    stdin = click.get_text_stream("stdin")

    while True:
        click.echo(PROMPT, nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break

        line = line.rstrip("\r\n")
        if not line:
            break

        collector = ErrorCollector(max_errors=options.max_errors)
        scanner = Scanner(line, options.filename, options.first_line, errors=collector)
        tokens = scanner.scan()

        for error in collector.errors:
            click.echo(error.short_message(), err=True)
        print_tokens(tokens, show_lexeme)


def run_file(input_file: Path, options: ScannerOptions, show_lexeme: bool) -> None:
    """
    Scan a whole file and print its tokens.

    Raises:
        LexicalErrorsFound: If the file contained lexical errors
    """
    source = input_file.read_text(encoding="utf-8", errors="replace")

    collector = ErrorCollector(max_errors=options.max_errors)
    scanner = Scanner(source, str(input_file), options.first_line, errors=collector)
    tokens = scanner.scan()
    logger.debug(f"{input_file}: {len(tokens)} tokens")

    print_tokens(tokens, show_lexeme)
    collector.raise_if_errors()


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--lexemes",
    is_flag=True,
    help="Print each token's lexeme after its line number",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Stop reporting after this many lexical errors (default: 100)",
)
@click.option(
    "--first-line",
    type=click.IntRange(min=1),
    default=None,
    help="Line number of the first line of input (default: 1)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    input_file: Optional[Path],
    lexemes: bool,
    max_errors: Optional[int],
    first_line: Optional[int],
    verbose: bool,
) -> None:
    """
    Tokenize Lox source code.

    With INPUT_FILE, scan the whole file and print its tokens. Without it,
    start an interactive loop that scans one line at a time.

    \b
    Examples:
        loxscan                      # Interactive mode
        loxscan script.lox           # Tokenize a file
        loxscan --lexemes script.lox # Include lexemes in the output
        loxscan --first-line 40 a.lox # Number lines from 40

    \b
    Environment:
        LOXKIT_MAX_ERRORS            # Default for --max-errors
        LOXKIT_LOG_LEVEL             # Logging level name
    """
    options = ScannerOptions.from_env()
    if max_errors is not None:
        options.max_errors = max_errors
    if first_line is not None:
        options.first_line = first_line
    setup_logging(options, verbose)

    try:
        if input_file is None:
            run_repl(options, lexemes)
        else:
            run_file(input_file, options, lexemes)
    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
