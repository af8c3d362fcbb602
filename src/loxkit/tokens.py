"""
Token Model
===========

Token kinds and the immutable Token record produced by the scanner.

Token Categories
----------------
- Punctuation: ( ) { } , . ;
- Arithmetic: - + / *
- One or two character operators: ! != = == > >= < <=
- Literals: "double quoted strings"
- EOF: end-of-input sentinel

Example
-------
>>> from loxkit.tokens import Token, TokenKind
>>> Token(TokenKind.BANG_EQUAL, 1, "!=")
Token(BANG_EQUAL, '!=', line 1)
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Lexical categories recognised by the scanner."""

    # === Punctuation ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    SEMICOLON = auto()      # ;

    # === Arithmetic Operators ===
    MINUS = auto()          # -
    PLUS = auto()           # +
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Operators ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    STRING = auto()         # "..."

    # === Structural ===
    EOF = auto()            # End of input

    def __str__(self) -> str:
        return self.name


# Characters that always form a token on their own
SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    ";": TokenKind.SEMICOLON,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    "*": TokenKind.STAR,
}

# Characters that pair with a following '=': char -> (alone, with '=')
EQUAL_PAIRS: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from source text.

    Attributes:
        kind: The TokenKind classification
        line: Line on which the token starts (1-indexed)
        lexeme: Exact source text matched; empty for EOF
    """
    kind: TokenKind
    line: int
    lexeme: str

    def __repr__(self) -> str:
        if self.kind is TokenKind.EOF:
            return f"Token(EOF, line {self.line})"
        return f"Token({self.kind.name}, {self.lexeme!r}, line {self.line})"

    def is_eof(self) -> bool:
        """Return True if this is the end-of-input sentinel."""
        return self.kind is TokenKind.EOF

    @property
    def string_value(self) -> str:
        """
        Contents of a STRING token without the surrounding quotes.

        Raises:
            ValueError: If the token is not a STRING
        """
        if self.kind is not TokenKind.STRING:
            raise ValueError(f"{self.kind.name} token has no string value")
        return self.lexeme[1:-1]
