"""Exceptions raised when a document cannot be parsed."""

from __future__ import annotations

from armacfg.diagnostics.diagnostic import Diagnostic


class ParseError(Exception):
    """A fatal parse failure.

    Attributes:
        diagnostic: the underlying diagnostic (code, message, range).
        offset: character offset of the failure point.
        line: 1-based line of the failure point.
        column: 1-based column of the failure point.
        expected: descriptions of what the attempted alternatives accept here.
        found: description of the input actually found.
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        offset: int,
        line: int,
        column: int,
        expected: tuple[str, ...] = (),
        found: str = "",
    ) -> None:
        super().__init__(f"Line {line}, column {column}: {diagnostic.message}")
        self.diagnostic = diagnostic
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found

    @property
    def code(self) -> str:
        return self.diagnostic.code


class ConfigSyntaxError(ParseError):
    """The input matches no grammar alternative at some position."""


class UnexpectedEofError(ConfigSyntaxError):
    """Input ended while a class body, array, string or block comment was open."""
