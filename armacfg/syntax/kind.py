"""Unified syntax kinds for parser and CST."""

from enum import IntEnum

from armacfg.lexer import TokenKind


class ConfigSyntaxKind(IntEnum):
    """Language syntax vocabulary (tokens + nodes)."""

    TOMBSTONE = 0
    EOF = 1

    # Trivia tokens
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # Lexical tokens
    IDENTIFIER = 20
    STRING = 21
    INT = 22
    FLOAT = 23

    EQUAL = 30
    PLUS_EQUAL = 31
    PLUS = 32
    MINUS = 33

    COLON = 40
    SEMICOLON = 41
    COMMA = 42

    LBRACE = 60
    RBRACE = 61
    LBRACKET = 62
    RBRACKET = 63

    UNKNOWN = 70

    # Contextual keywords, remapped from IDENTIFIER by the parser
    CLASS_KW = 80
    DELETE_KW = 81
    TRUE_KW = 82
    FALSE_KW = 83

    # Node kinds
    ROOT = 1000
    DOCUMENT = 1001
    ITEM_LIST = 1002
    PROPERTY = 1003
    ARRAY_PROPERTY = 1004
    ARRAY = 1005
    LITERAL = 1006
    CLASS = 1007
    CLASS_EXTENDS = 1008
    CLASS_FORWARD_DECL = 1009
    CLASS_DELETE = 1010
    BARE_IDENTIFIER = 1011

    @property
    def is_trivia(self) -> bool:
        return self in (
            ConfigSyntaxKind.WHITESPACE,
            ConfigSyntaxKind.NEWLINE,
            ConfigSyntaxKind.COMMENT,
        )

    @property
    def is_token(self) -> bool:
        return self != ConfigSyntaxKind.TOMBSTONE and self.value < ConfigSyntaxKind.ROOT.value

    @property
    def is_node(self) -> bool:
        return self.value >= ConfigSyntaxKind.ROOT.value

    @staticmethod
    def from_token_kind(kind: TokenKind) -> "ConfigSyntaxKind":
        # Token kinds share their numeric values with the syntax vocabulary.
        try:
            return ConfigSyntaxKind(kind.value)
        except ValueError:
            raise ValueError(f"Unsupported TokenKind mapping: {kind!r}") from None
