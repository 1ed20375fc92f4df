"""Parse-once carrier for config documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from armacfg.parser.options import ParserOptions
from armacfg.parser.tree_sink import ParsedGreenTree

if TYPE_CHECKING:
    from armacfg.ast import AstDocument, AstItemsView
    from armacfg.cst import GreenNode
    from armacfg.diagnostics import Diagnostic, ParseError


@dataclass(slots=True)
class ConfigParseResult:
    """Outcome of one parse: either a green tree or the error that stopped it."""

    source_text: str
    options: ParserOptions
    parsed: ParsedGreenTree | None
    error: ParseError | None
    _document: AstDocument | None = field(default=None, init=False, repr=False)
    _root_view: AstItemsView | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if (self.parsed is None) == (self.error is None):
            raise ValueError("Exactly one of parsed and error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.error is not None:
            return [self.error.diagnostic]
        return list(self.parsed.diagnostics) if self.parsed is not None else []

    @property
    def has_errors(self) -> bool:
        return any(diagnostic.is_error for diagnostic in self.diagnostics)

    def green_root(self) -> GreenNode:
        if self.error is not None:
            raise self.error
        if self.parsed is None:
            raise ValueError("Exactly one of parsed and error must be set")
        return self.parsed.root

    def document(self) -> AstDocument:
        if self._document is None:
            from armacfg.ast import lower_tree

            self._document = lower_tree(self.green_root())
        return self._document

    def root_view(self) -> AstItemsView:
        if self._root_view is None:
            from armacfg.ast import AstItemsView

            self._root_view = AstItemsView.of(self.document())
        return self._root_view
