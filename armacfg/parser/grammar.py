"""Config grammar routines that emit CST events.

Item alternatives are tried in a fixed priority order: property, array
(assign or append), bodied class, extending class, forward-declared class,
class deletion, bare identifier. Instead of backtracking, each routine peeks
at the tokens that tell the alternatives apart, so the first alternative that
can match is the one taken and a failure is reported where every viable
alternative stops.
"""

from armacfg.diagnostics.codes import (
    PARSER_EXPECTED_CLASS_BODY_ITEM,
    PARSER_EXPECTED_ITEM,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_TOLERATED_EMPTY_CLASS_BODY,
    PARSER_TOLERATED_EMPTY_STATEMENT,
    PARSER_TOLERATED_TRAILING_COMMA,
)
from armacfg.lexer import TokenKind
from armacfg.parser.marker import CompletedMarker
from armacfg.parser.parser import Parser, ParserProgress
from armacfg.syntax import ConfigSyntaxKind

CLASS_KEYWORD = "class"
DELETE_KEYWORD = "delete"

_KEYWORD_SEPARATORS = frozenset(" \t\r\n")

_BOOLEAN_KEYWORDS: dict[str, ConfigSyntaxKind] = {
    "true": ConfigSyntaxKind.TRUE_KW,
    "false": ConfigSyntaxKind.FALSE_KW,
}

_LITERAL_TOKENS = frozenset({TokenKind.STRING, TokenKind.INT, TokenKind.FLOAT})

_DOCUMENT_END = frozenset({TokenKind.EOF})
_CLASS_BODY_END = frozenset({TokenKind.RBRACE, TokenKind.EOF})

_EXPECTED_VALUE = ("boolean", "number", "string")
_EXPECTED_ELEMENT = ("'{'", *_EXPECTED_VALUE)
_EXPECTED_AFTER_NAME = ("'='", "'[]'", "';'")
_EXPECTED_AFTER_CLASS_NAME = ("':'", "'{'", "';'")
_EXPECTED_ARRAY_OPERATOR = ("'='", "'+='")


def parse_document(parser: Parser) -> CompletedMarker:
    parser.check_lexer_diagnostic()
    root = parser.start()
    parse_item_list(parser, stop_at=_DOCUMENT_END)
    return root.complete(parser, ConfigSyntaxKind.DOCUMENT)


def parse_item_list(
    parser: Parser,
    stop_at: frozenset[TokenKind],
    *,
    require_item: bool = False,
) -> CompletedMarker:
    marker = parser.start()
    progress = ParserProgress()
    item_count = 0

    while not parser.at_set(stop_at):
        progress.assert_progressing(parser)
        if parser.at(TokenKind.SEMICOLON) and parser.options.allow_empty_statements:
            parser.warn(PARSER_TOLERATED_EMPTY_STATEMENT)
            parser.bump()
            continue
        parse_item(parser)
        item_count += 1

    if require_item and item_count == 0:
        if parser.options.allow_empty_class_body:
            parser.warn(PARSER_TOLERATED_EMPTY_CLASS_BODY)
        else:
            parser.error(PARSER_EXPECTED_CLASS_BODY_ITEM, expected=("identifier",))

    return marker.complete(parser, ConfigSyntaxKind.ITEM_LIST)


def parse_item(parser: Parser) -> CompletedMarker:
    if not _at_name(parser, 0):
        parser.error(PARSER_EXPECTED_ITEM, expected=("identifier",))

    next_kind = parser.nth(1)
    if next_kind == TokenKind.EQUAL:
        return parse_property(parser)
    if next_kind == TokenKind.LBRACKET:
        return parse_array_property(parser)
    if _at_keyword(parser, CLASS_KEYWORD):
        return parse_class(parser)
    if _at_keyword(parser, DELETE_KEYWORD):
        return parse_class_delete(parser)
    if next_kind == TokenKind.SEMICOLON:
        return parse_bare_identifier(parser)

    parser.bump_as(ConfigSyntaxKind.IDENTIFIER)
    parser.error(PARSER_EXPECTED_TOKEN, expected=_EXPECTED_AFTER_NAME)


def parse_property(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    parser.bump_as(ConfigSyntaxKind.IDENTIFIER)
    parser.expect(TokenKind.EQUAL, PARSER_EXPECTED_TOKEN, "'='")
    parse_literal(parser, expected=_EXPECTED_VALUE)
    _expect_semicolon(parser)
    return marker.complete(parser, ConfigSyntaxKind.PROPERTY)


def parse_array_property(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    parser.bump_as(ConfigSyntaxKind.IDENTIFIER)

    # `[]` is a single literal in the grammar: no trivia between the brackets.
    parser.expect(TokenKind.LBRACKET, PARSER_EXPECTED_TOKEN, "'[]'")
    if not parser.at(TokenKind.RBRACKET) or parser.has_preceding_trivia:
        parser.error(PARSER_EXPECTED_TOKEN, expected=("']'",))
    parser.bump()

    if not parser.at(TokenKind.EQUAL) and not parser.at(TokenKind.PLUS_EQUAL):
        parser.error(PARSER_EXPECTED_TOKEN, expected=_EXPECTED_ARRAY_OPERATOR)
    parser.bump()

    parse_array(parser)
    _expect_semicolon(parser)
    return marker.complete(parser, ConfigSyntaxKind.ARRAY_PROPERTY)


def parse_array(parser: Parser) -> CompletedMarker:
    with parser.nested():
        marker = parser.start()
        parser.expect(TokenKind.LBRACE, PARSER_EXPECTED_TOKEN, "'{'")

        if parser.eat(TokenKind.RBRACE):
            return marker.complete(parser, ConfigSyntaxKind.ARRAY)

        while True:
            parse_array_element(parser)
            if not parser.at(TokenKind.COMMA):
                break
            comma_range = parser.current_range
            parser.bump()
            if parser.at(TokenKind.RBRACE) and parser.options.allow_trailing_comma:
                parser.warn(PARSER_TOLERATED_TRAILING_COMMA, comma_range)
                break

        if not parser.eat(TokenKind.RBRACE):
            parser.error(PARSER_EXPECTED_TOKEN, expected=("','", "'}'"))
        return marker.complete(parser, ConfigSyntaxKind.ARRAY)


def parse_array_element(parser: Parser) -> CompletedMarker:
    if parser.at(TokenKind.LBRACE):
        return parse_array(parser)
    return parse_literal(parser, expected=_EXPECTED_ELEMENT)


def parse_literal(parser: Parser, *, expected: tuple[str, ...]) -> CompletedMarker:
    if parser.at_set(_LITERAL_TOKENS):
        kind = ConfigSyntaxKind.from_token_kind(parser.current)
    elif parser.at(TokenKind.IDENTIFIER) and parser.current_text in _BOOLEAN_KEYWORDS:
        kind = _BOOLEAN_KEYWORDS[parser.current_text]
    else:
        parser.error(PARSER_EXPECTED_VALUE, expected=expected)

    marker = parser.start()
    parser.bump_as(kind)
    return marker.complete(parser, ConfigSyntaxKind.LITERAL)


def parse_class(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    parser.bump_as(ConfigSyntaxKind.CLASS_KW)
    parser.bump_as(ConfigSyntaxKind.IDENTIFIER)

    if parser.at(TokenKind.COLON):
        parser.bump()
        _expect_name(parser)
        parse_class_body(parser)
        parser.eat(TokenKind.SEMICOLON)
        return marker.complete(parser, ConfigSyntaxKind.CLASS_EXTENDS)

    if parser.at(TokenKind.LBRACE):
        parse_class_body(parser)
        parser.eat(TokenKind.SEMICOLON)
        return marker.complete(parser, ConfigSyntaxKind.CLASS)

    if parser.at(TokenKind.SEMICOLON):
        parser.bump()
        return marker.complete(parser, ConfigSyntaxKind.CLASS_FORWARD_DECL)

    parser.error(PARSER_EXPECTED_TOKEN, expected=_EXPECTED_AFTER_CLASS_NAME)


def parse_class_body(parser: Parser) -> None:
    with parser.nested():
        parser.expect(TokenKind.LBRACE, PARSER_EXPECTED_TOKEN, "'{'")
        parse_item_list(parser, stop_at=_CLASS_BODY_END, require_item=True)
        parser.expect(TokenKind.RBRACE, PARSER_EXPECTED_TOKEN, "'}'")


def parse_class_delete(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    parser.bump_as(ConfigSyntaxKind.DELETE_KW)
    parser.bump_as(ConfigSyntaxKind.IDENTIFIER)
    _expect_semicolon(parser)
    return marker.complete(parser, ConfigSyntaxKind.CLASS_DELETE)


def parse_bare_identifier(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    parser.bump_as(ConfigSyntaxKind.IDENTIFIER)
    parser.bump()
    return marker.complete(parser, ConfigSyntaxKind.BARE_IDENTIFIER)


def _expect_semicolon(parser: Parser) -> None:
    parser.expect(TokenKind.SEMICOLON, PARSER_EXPECTED_TOKEN, "';'")


def _expect_name(parser: Parser) -> None:
    if not _at_name(parser, 0):
        parser.error(PARSER_EXPECTED_TOKEN, expected=("identifier",))
    parser.bump_as(ConfigSyntaxKind.IDENTIFIER)


def _at_name(parser: Parser, n: int) -> bool:
    """Identifiers are `[A-Za-z0-9_]+`, so unsigned integers qualify too."""
    kind = parser.nth(n)
    if kind == TokenKind.IDENTIFIER:
        return True
    return kind == TokenKind.INT and not parser.nth_text(n).startswith("-")


def _at_keyword(parser: Parser, keyword: str) -> bool:
    """`class ` / `delete `: the keyword, whitespace, then a name."""
    if parser.current != TokenKind.IDENTIFIER or parser.current_text != keyword:
        return False
    end = parser.current_range.end.value
    text = parser.source.text
    return end < len(text) and text[end] in _KEYWORD_SEPARATORS and _at_name(parser, 1)
