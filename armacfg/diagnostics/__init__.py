"""Diagnostics."""

from armacfg.diagnostics.codes import (
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_CLASS_BODY_ITEM,
    PARSER_EXPECTED_ITEM,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_TOLERATED_EMPTY_CLASS_BODY,
    PARSER_TOLERATED_EMPTY_STATEMENT,
    PARSER_TOLERATED_TRAILING_COMMA,
    PARSER_UNEXPECTED_EOF,
    DiagnosticSpec,
    Severity,
)
from armacfg.diagnostics.diagnostic import Diagnostic
from armacfg.diagnostics.errors import ConfigSyntaxError, ParseError, UnexpectedEofError

__all__ = [
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_CLASS_BODY_ITEM",
    "PARSER_EXPECTED_ITEM",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_EXPECTED_VALUE",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_TOLERATED_EMPTY_CLASS_BODY",
    "PARSER_TOLERATED_EMPTY_STATEMENT",
    "PARSER_TOLERATED_TRAILING_COMMA",
    "PARSER_UNEXPECTED_EOF",
    "ConfigSyntaxError",
    "Diagnostic",
    "DiagnosticSpec",
    "ParseError",
    "Severity",
    "UnexpectedEofError",
]
