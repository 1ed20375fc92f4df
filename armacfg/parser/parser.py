"""Event-based parser core."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import NoReturn

from armacfg.diagnostics import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_EOF,
    ConfigSyntaxError,
    Diagnostic,
    DiagnosticSpec,
    ParseError,
    UnexpectedEofError,
)
from armacfg.lexer import TokenKind
from armacfg.parser.event import Event, StartEvent, TokenEvent
from armacfg.parser.marker import Marker
from armacfg.parser.options import ParserOptions
from armacfg.parser.token_source import TokenSource
from armacfg.syntax import ConfigSyntaxKind
from armacfg.text import LineIndex, TextRange, TextSize

_UNTERMINATED_EXPECTATIONS: dict[str, tuple[str, ...]] = {
    LEXER_UNTERMINATED_STRING.code: ("'\"'",),
    LEXER_UNTERMINATED_BLOCK_COMMENT.code: ("'*/'",),
}


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            position = parser.position.value
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name}, offset {position}")


class Parser:
    """Event-based, fail-fast parser.

    Grammar routines drive the parser with lookahead and `bump`; the first
    error raises a `ParseError` and abandons the event stream. Tolerated
    constructs (permissive mode) are recorded as warning diagnostics.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._events: list[Event] = []
        self._diagnostics: list[Diagnostic] = []
        self._depth = 0
        self._line_index: LineIndex | None = None

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        return self._source.current_text

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def has_preceding_trivia(self) -> bool:
        return self._source.has_preceding_trivia

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n)

    def nth_text(self, n: int) -> str:
        return self._source.nth_text(n)

    def start(self) -> Marker:
        pos = len(self._events)
        self._events.append(StartEvent())
        return Marker(pos=pos, start=self.position)

    def bump(self) -> None:
        self.bump_as(ConfigSyntaxKind.from_token_kind(self.current))

    def bump_as(self, kind: ConfigSyntaxKind) -> None:
        """Consume the current token, recording it in the tree as `kind`."""
        if self.current == TokenKind.EOF:
            return
        self._events.append(TokenEvent(kind=kind, end=self.current_range.end))
        self._source.bump()
        self.check_lexer_diagnostic()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, spec: DiagnosticSpec, expected: str) -> None:
        if not self.eat(kind):
            self.error(spec, expected=(expected,))

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Enter a class body or array, enforcing the nesting limit."""
        if self._depth >= self._options.max_nesting_depth:
            self.error(PARSER_NESTING_TOO_DEEP)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def warn(self, spec: DiagnosticSpec, range: TextRange | None = None) -> None:
        self._diagnostics.append(Diagnostic.from_spec(spec, range if range is not None else self.current_range))

    def error(self, spec: DiagnosticSpec, *, expected: tuple[str, ...] = ()) -> NoReturn:
        error_type: type[ParseError] = ConfigSyntaxError
        if self.at(TokenKind.EOF) and self._depth > 0:
            spec = PARSER_UNEXPECTED_EOF
            error_type = UnexpectedEofError

        found = _describe_token(self.current, self.current_text)
        message = spec.message
        if expected:
            message = f"{spec.message}: expected {_join_expected(expected)}, found {found}"

        diagnostic = Diagnostic.from_spec(spec, self.current_range, message=message)
        raise self._build_error(
            error_type,
            diagnostic,
            offset=self.current_range.start.value,
            expected=expected,
            found=found,
        )

    def check_lexer_diagnostic(self) -> None:
        """Raise the lexer error attached to the input just reached, if any."""
        diagnostic = self._source.take_lexer_diagnostic()
        if diagnostic is None:
            return
        raise self._build_error(
            UnexpectedEofError,
            diagnostic,
            offset=diagnostic.range.end.value,
            expected=_UNTERMINATED_EXPECTATIONS.get(diagnostic.code, ()),
            found="end of input",
        )

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._diagnostics

    def _build_error(
        self,
        error_type: type[ParseError],
        diagnostic: Diagnostic,
        *,
        offset: int,
        expected: tuple[str, ...],
        found: str,
    ) -> ParseError:
        if self._line_index is None:
            self._line_index = LineIndex(self._source.text)
        location = self._line_index.line_col(offset)
        return error_type(
            diagnostic,
            offset=offset,
            line=location.line,
            column=location.column,
            expected=expected,
            found=found,
        )


def _describe_token(kind: TokenKind, text: str) -> str:
    if kind == TokenKind.EOF:
        return "end of input"
    return repr(text)


def _join_expected(expected: tuple[str, ...]) -> str:
    if len(expected) == 1:
        return expected[0]
    return f"{', '.join(expected[:-1])} or {expected[-1]}"
