"""Token source that hides trivia and records it separately."""

from armacfg.diagnostics import Diagnostic
from armacfg.lexer import Lexer, Token, TokenKind
from armacfg.lexer.tokens import Trivia, TriviaKind, trivia_kind_from_token_kind
from armacfg.text import TextRange, TextSize


class TokenSource:
    """Bridge between lexer and parser that strips trivia but records ownership.

    The whole input is lexed up front; the parser walks the significant
    (non-trivia) tokens and may look ahead any number of them.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._text = lexer.source
        self._tokens = lexer.lex()
        self._lexer_diagnostics = {d.range.start: d for d in lexer.diagnostics}
        self._significant = [i for i, token in enumerate(self._tokens) if not token.kind.is_trivia]
        self._cursor = 0
        self._trivia: list[Trivia] = []
        self._pending_diagnostic: Diagnostic | None = None
        self._record_preceding_trivia(first_token=True)

    @property
    def text(self) -> str:
        return self._text

    @property
    def current(self) -> TokenKind:
        return self._token(0).kind

    @property
    def current_range(self) -> TextRange:
        return self._token(0).range

    @property
    def current_text(self) -> str:
        return self._token(0).range.slice(self._text)

    @property
    def position(self) -> TextSize:
        return self.current_range.start

    @property
    def has_preceding_trivia(self) -> bool:
        index = self._significant_index(0)
        previous = self._significant[index - 1] if index > 0 else -1
        return self._significant[index] - previous > 1

    def bump(self) -> None:
        if self.current == TokenKind.EOF:
            return
        self._cursor += 1
        self._record_preceding_trivia(first_token=False)

    def nth(self, n: int) -> TokenKind:
        return self._token(n).kind

    def nth_text(self, n: int) -> str:
        return self._token(n).range.slice(self._text)

    def take_lexer_diagnostic(self) -> Diagnostic | None:
        """Lexer error attached to the trivia or token the parser just reached."""
        diagnostic = self._pending_diagnostic
        self._pending_diagnostic = None
        return diagnostic

    def finish(self) -> list[Trivia]:
        return self._trivia

    def _significant_index(self, n: int) -> int:
        return min(self._cursor + n, len(self._significant) - 1)

    def _token(self, n: int) -> Token:
        return self._tokens[self._significant[self._significant_index(n)]]

    def _record_preceding_trivia(self, first_token: bool) -> None:
        current_index = self._significant[self._cursor]
        previous_index = self._significant[self._cursor - 1] if self._cursor > 0 else -1
        trailing = not first_token

        for token in self._tokens[previous_index + 1 : current_index]:
            trivia_kind = trivia_kind_from_token_kind(token.kind)
            if trivia_kind == TriviaKind.NEWLINE:
                trailing = False
            self._trivia.append(Trivia(trivia_kind, token.range, trailing))
            self._check_unterminated(token)

        self._check_unterminated(self._tokens[current_index])

    def _check_unterminated(self, token: Token) -> None:
        if self._pending_diagnostic is None and token.is_unterminated():
            self._pending_diagnostic = self._lexer_diagnostics.get(token.range.start)
