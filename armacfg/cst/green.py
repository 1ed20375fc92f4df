"""Minimal immutable green CST representation."""

from collections.abc import Iterator
from dataclasses import dataclass

from armacfg.lexer import TriviaPiece
from armacfg.syntax import ConfigSyntaxKind
from armacfg.text import TextSize


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: ConfigSyntaxKind
    text: str
    leading_trivia: tuple[TriviaPiece, ...]
    trailing_trivia: tuple[TriviaPiece, ...]

    @property
    def text_len(self) -> TextSize:
        return TextSize(len(self.text))

    @property
    def full_len(self) -> TextSize:
        """Length including leading and trailing trivia."""
        total = len(self.text)
        for piece in self.leading_trivia:
            total += piece.length.value
        for piece in self.trailing_trivia:
            total += piece.length.value
        return TextSize(total)


@dataclass(frozen=True, slots=True)
class GreenNode:
    kind: ConfigSyntaxKind
    children: tuple["GreenElement", ...]

    @property
    def full_len(self) -> TextSize:
        total = 0
        for child in self.children:
            total += child.full_len.value
        return TextSize(total)

    def child_nodes(self) -> Iterator["GreenNode"]:
        for child in self.children:
            if isinstance(child, GreenNode):
                yield child

    def child_tokens(self) -> Iterator[GreenToken]:
        for child in self.children:
            if isinstance(child, GreenToken):
                yield child

    def first_child_node(self, kind: ConfigSyntaxKind) -> "GreenNode | None":
        for child in self.child_nodes():
            if child.kind == kind:
                return child
        return None

    def descendant_tokens(self) -> Iterator[GreenToken]:
        for child in self.children:
            if isinstance(child, GreenToken):
                yield child
            else:
                yield from child.descendant_tokens()


type GreenElement = GreenNode | GreenToken


class TreeBuilder:
    """Stack-based builder producing immutable green nodes."""

    def __init__(self) -> None:
        self._stack: list[tuple[ConfigSyntaxKind, list[GreenElement]]] = []
        self._roots: list[GreenElement] = []

    def start_node(self, kind: ConfigSyntaxKind) -> None:
        self._stack.append((kind, []))

    def token_with_trivia(
        self,
        kind: ConfigSyntaxKind,
        text: str,
        leading: tuple[TriviaPiece, ...],
        trailing: tuple[TriviaPiece, ...],
    ) -> None:
        token = GreenToken(
            kind=kind,
            text=text,
            leading_trivia=leading,
            trailing_trivia=trailing,
        )
        self._push_element(token)

    def finish_node(self) -> None:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        node = GreenNode(kind=kind, children=tuple(children))
        self._push_element(node)

    def finish(self) -> GreenNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        return GreenNode(
            kind=ConfigSyntaxKind.ROOT,
            children=tuple(self._roots),
        )

    def _push_element(self, element: GreenElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)
