"""Lexer."""

import string

from armacfg.diagnostics import Diagnostic
from armacfg.diagnostics.codes import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from armacfg.lexer.tokens import Token, TokenFlags, TokenKind
from armacfg.text import TextRange, TextSize

_DIGITS = frozenset(string.digits)
_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "=": TokenKind.EQUAL,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    ",": TokenKind.COMMA,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}


class Lexer:
    """Lossless lexer that emits trivia and non-trivia tokens.

    Never fails: unterminated strings and block comments are emitted with
    `TokenFlags.UNTERMINATED` and a diagnostic, and characters outside the
    language become `TokenKind.UNKNOWN`. Rejecting them is up to the parser.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = TextSize(0)
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, TextSize(self._position))

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        self._current_start = TextSize(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._current_start), self._current_flags)

        kind = self._lex_token()
        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        """Lex the whole source. The last token is always EOF."""
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\r" or ch == "\n" or ch == "\t" or ch == " ":
            return self._consume_newline_or_whitespaces()

        if ch == "/" and self._peek_char() == "/":
            return self._lex_line_comment()

        if ch == "/" and self._peek_char() == "*":
            return self._lex_block_comment()

        if ch == '"':
            return self._lex_string()

        if ch == "-" and self._peek_char() in _DIGITS:
            self._advance(1)
            return self._lex_number()

        if ch in _IDENTIFIER_CHARS:
            return self._lex_word()

        if ch == "+" and self._peek_char() == "=":
            self._advance(2)
            return TokenKind.PLUS_EQUAL

        kind = _SINGLE_CHAR_TOKENS.get(ch, TokenKind.UNKNOWN)
        self._advance(1)
        return kind

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                return TokenKind.COMMENT
            self._advance(1)

        self._report_unterminated(LEXER_UNTERMINATED_BLOCK_COMMENT)
        return TokenKind.COMMENT

    def _lex_string(self) -> TokenKind:
        self._advance(1)

        while not self.is_eof:
            if self._current_char() == '"':
                # `""` is an escaped quote, checked before treating `"` as the terminator.
                if self._peek_char() == '"':
                    self._current_flags |= TokenFlags.HAS_ESCAPE
                    self._advance(2)
                    continue
                self._advance(1)
                return TokenKind.STRING
            self._advance(1)

        self._report_unterminated(LEXER_UNTERMINATED_STRING)
        return TokenKind.STRING

    def _lex_number(self) -> TokenKind:
        while self._current_char() in _DIGITS:
            self._advance(1)
        if self._current_char() != ".":
            return TokenKind.INT
        self._advance(1)
        while self._current_char() in _DIGITS:
            self._advance(1)
        return TokenKind.FLOAT

    def _lex_word(self) -> TokenKind:
        all_digits = True
        while self._current_char() in _IDENTIFIER_CHARS:
            if self._current_char() not in _DIGITS:
                all_digits = False
            self._advance(1)

        if not all_digits:
            return TokenKind.IDENTIFIER
        if self._current_char() != ".":
            return TokenKind.INT
        self._advance(1)
        while self._current_char() in _DIGITS:
            self._advance(1)
        return TokenKind.FLOAT

    def _report_unterminated(self, spec: DiagnosticSpec) -> None:
        self._current_flags |= TokenFlags.UNTERMINATED
        self._diagnostics.append(
            Diagnostic.from_spec(
                spec,
                TextRange(self._current_start, TextSize(self._position)),
            )
        )

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return token.range.slice(source)
