"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from armacfg.text import TextRange, TextSize


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # quoted string
    INT = 22
    FLOAT = 23

    # -------------------------
    # Operators
    # -------------------------
    EQUAL = 30  # =
    PLUS_EQUAL = 31  # +=
    PLUS = 32  # +
    MINUS = 33  # -

    # -------------------------
    # Punctuation / separators
    # -------------------------
    COLON = 40  # :
    SEMICOLON = 41  # ;
    COMMA = 42  # ,

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]

    # Any other character, rejected by the parser.
    UNKNOWN = 70

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.COMMENT,
        )


class TriviaKind(IntEnum):
    """The trivia vocabulary (separate from TokenKind for type-safety)."""

    WHITESPACE = 1
    NEWLINE = 2
    COMMENT = 3


def trivia_kind_from_token_kind(kind: TokenKind) -> TriviaKind:
    """Map lexer trivia token kinds to TriviaKind.

    Raises if called with a non-trivia TokenKind.
    """
    match kind:
        case TokenKind.NEWLINE:
            return TriviaKind.NEWLINE
        case TokenKind.WHITESPACE:
            return TriviaKind.WHITESPACE
        case TokenKind.COMMENT:
            return TriviaKind.COMMENT
        case _:
            raise ValueError(f"Not a trivia token kind: {kind!r}")


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    HAS_ESCAPE = 1 << 0  # string contains `""`
    UNTERMINATED = 1 << 1  # string or block comment ran into EOF


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def is_unterminated(self) -> bool:
        return bool(self.flags & TokenFlags.UNTERMINATED)


@dataclass(frozen=True, slots=True)
class Trivia:
    """Range-based trivia recorded by the TokenSource.

    `trailing` trivia belongs to the token before it (up to the next line
    break), everything else leads the following token.
    """

    kind: TriviaKind
    range: TextRange
    trailing: bool


@dataclass(frozen=True, slots=True)
class TriviaPiece:
    """Compact trivia unit stored in the CST (kind + length)."""

    kind: TriviaKind
    length: TextSize

