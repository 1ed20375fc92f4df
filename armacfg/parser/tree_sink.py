"""Green tree sink: replayed parser events become a lossless CST."""

from dataclasses import dataclass

from armacfg.cst import GreenNode, TreeBuilder
from armacfg.diagnostics import Diagnostic
from armacfg.lexer import Trivia, TriviaPiece
from armacfg.syntax import ConfigSyntaxKind
from armacfg.text import TextSize


@dataclass(frozen=True, slots=True)
class ParsedGreenTree:
    """A successfully parsed green tree plus any warnings raised on the way."""

    root: GreenNode
    diagnostics: list[Diagnostic]


class GreenTreeSink:
    """Builds the green tree and hangs every trivia run off exactly one token.

    Trivia the token source marked as trailing belongs to the token before
    it; the rest leads the token after it. Whatever follows the last
    significant token leads a zero-width EOF token, added when the outermost
    node closes.
    """

    def __init__(self, text: str, trivia: list[Trivia]) -> None:
        self._text = text
        self._trivia = trivia
        self._next_trivia = 0
        self._offset = 0
        self._open_nodes = 0
        self._has_eof = False
        self._builder = TreeBuilder()

    def start_node(self, kind: ConfigSyntaxKind) -> None:
        self._builder.start_node(kind)
        self._open_nodes += 1

    def token(self, kind: ConfigSyntaxKind, end: TextSize) -> None:
        if kind == ConfigSyntaxKind.EOF:
            self._has_eof = True

        leading = self._take_trivia(trailing=False, limit=end.value)
        text = self._text[self._offset : end.value]
        self._offset = end.value
        trailing = self._take_trivia(trailing=True, limit=len(self._text))
        self._builder.token_with_trivia(kind=kind, text=text, leading=leading, trailing=trailing)

    def finish_node(self) -> None:
        if self._open_nodes == 0:
            raise RuntimeError("Finish event without a matching start event")
        self._open_nodes -= 1
        if self._open_nodes == 0 and not self._has_eof:
            self.token(ConfigSyntaxKind.EOF, TextSize(len(self._text)))
        self._builder.finish_node()

    def finish(self, diagnostics: list[Diagnostic]) -> ParsedGreenTree:
        if self._next_trivia != len(self._trivia):
            raise RuntimeError("Trivia left over after the last token")
        return ParsedGreenTree(root=self._builder.finish(), diagnostics=list(diagnostics))

    def _take_trivia(self, *, trailing: bool, limit: int) -> tuple[TriviaPiece, ...]:
        pieces: list[TriviaPiece] = []
        while self._next_trivia < len(self._trivia):
            trivia = self._trivia[self._next_trivia]
            if trivia.trailing != trailing or trivia.range.start.value != self._offset:
                break
            if trivia.range.end.value > limit:
                break
            pieces.append(TriviaPiece(kind=trivia.kind, length=trivia.range.len()))
            self._offset = trivia.range.end.value
            self._next_trivia += 1
        return tuple(pieces)
