"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint='Close the string with a double quote. Write `""` for a literal quote inside it.',
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`. Block comments do not nest.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_ITEM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_ITEM",
    message="Expected an item",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_CLASS_BODY_ITEM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_CLASS_BODY_ITEM",
    message="Class body must contain at least one item",
    hint="Use a forward declaration (`class Name;`) for a class without a body.",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    severity="error",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_EOF",
    message="Unexpected end of input",
    hint="A class body or array is missing its closing `}`.",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Maximum nesting depth exceeded",
    hint="Raise `ParserOptions.max_nesting_depth` if the input is trusted.",
    severity="error",
    category="parser",
)

PARSER_TOLERATED_EMPTY_CLASS_BODY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TOLERATED_EMPTY_CLASS_BODY",
    message="Empty class body tolerated in permissive mode",
    severity="warning",
    category="parser",
)

PARSER_TOLERATED_TRAILING_COMMA: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TOLERATED_TRAILING_COMMA",
    message="Trailing comma in array tolerated in permissive mode",
    severity="warning",
    category="parser",
)

PARSER_TOLERATED_EMPTY_STATEMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TOLERATED_EMPTY_STATEMENT",
    message="Empty statement tolerated in permissive mode",
    severity="warning",
    category="parser",
)
