import pytest

from armacfg.lexer import Lexer, Token, TokenFlags, TokenKind, token_text
from tests._debug import debug_dump_tokens
from tests._shared_cases import ALL_CASES, ConfigCase, case_id


def lex(text: str) -> list[Token]:
    return Lexer(text).lex()


def significant(text: str) -> list[tuple[TokenKind, str]]:
    return [(tok.kind, token_text(text, tok)) for tok in lex(text) if not tok.kind.is_trivia]


def test_property_tokens() -> None:
    src = 'name = "value";'
    tokens = lex(src)
    debug_dump_tokens("property_tokens", src, tokens)

    assert significant(src) == [
        (TokenKind.IDENTIFIER, "name"),
        (TokenKind.EQUAL, "="),
        (TokenKind.STRING, '"value"'),
        (TokenKind.SEMICOLON, ";"),
        (TokenKind.EOF, ""),
    ]


def test_array_append_tokens() -> None:
    assert [kind for kind, _ in significant("a[] += {1,2};")] == [
        TokenKind.IDENTIFIER,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.PLUS_EQUAL,
        TokenKind.LBRACE,
        TokenKind.INT,
        TokenKind.COMMA,
        TokenKind.INT,
        TokenKind.RBRACE,
        TokenKind.SEMICOLON,
        TokenKind.EOF,
    ]


def test_numbers() -> None:
    assert significant("1 -2 3.5 -4. 007 0.") == [
        (TokenKind.INT, "1"),
        (TokenKind.INT, "-2"),
        (TokenKind.FLOAT, "3.5"),
        (TokenKind.FLOAT, "-4."),
        (TokenKind.INT, "007"),
        (TokenKind.FLOAT, "0."),
        (TokenKind.EOF, ""),
    ]


def test_bare_minus_is_not_a_number() -> None:
    assert significant("- 1")[0] == (TokenKind.MINUS, "-")


def test_words_mixing_digits_and_letters_are_identifiers() -> None:
    assert significant("12abc a_1 1e5 trueish") == [
        (TokenKind.IDENTIFIER, "12abc"),
        (TokenKind.IDENTIFIER, "a_1"),
        (TokenKind.IDENTIFIER, "1e5"),
        (TokenKind.IDENTIFIER, "trueish"),
        (TokenKind.EOF, ""),
    ]


def test_string_with_doubled_quotes_is_one_token() -> None:
    src = '"he said ""hi"""'
    tokens = lex(src)
    assert tokens[0].kind == TokenKind.STRING
    assert token_text(src, tokens[0]) == src
    assert tokens[0].flags & TokenFlags.HAS_ESCAPE
    assert tokens[1].kind == TokenKind.EOF


def test_string_keeps_newlines_and_comment_markers() -> None:
    src = '"a // b\n/* c */"'
    tokens = lex(src)
    assert [tok.kind for tok in tokens] == [TokenKind.STRING, TokenKind.EOF]


def test_unterminated_string_is_flagged() -> None:
    lexer = Lexer('"abc')
    tokens = lexer.lex()
    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].is_unterminated()
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_STRING"]


def test_unterminated_block_comment_is_flagged() -> None:
    lexer = Lexer("/* open")
    tokens = lexer.lex()
    assert tokens[0].kind == TokenKind.COMMENT
    assert tokens[0].is_unterminated()
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_BLOCK_COMMENT"]


def test_comments_are_trivia() -> None:
    src = "// line\n/* block */ x"
    kinds = [tok.kind for tok in lex(src)]
    assert kinds == [
        TokenKind.COMMENT,
        TokenKind.NEWLINE,
        TokenKind.COMMENT,
        TokenKind.WHITESPACE,
        TokenKind.IDENTIFIER,
        TokenKind.EOF,
    ]


def test_line_comment_does_not_consume_newline() -> None:
    src = "// c\r\nx"
    tokens = lex(src)
    assert token_text(src, tokens[0]) == "// c"
    assert tokens[1].kind == TokenKind.NEWLINE
    assert token_text(src, tokens[1]) == "\r\n"


def test_unknown_characters() -> None:
    assert significant("\\ ? #")[:3] == [
        (TokenKind.UNKNOWN, "\\"),
        (TokenKind.UNKNOWN, "?"),
        (TokenKind.UNKNOWN, "#"),
    ]


@pytest.mark.parametrize("case", ALL_CASES, ids=case_id)
def test_tokens_cover_source_exactly(case: ConfigCase) -> None:
    tokens = lex(case.source)
    debug_dump_tokens(case.name, case.source, tokens)

    assert tokens[-1].kind == TokenKind.EOF
    assert "".join(token_text(case.source, tok) for tok in tokens) == case.source
    position = 0
    for tok in tokens:
        assert tok.range.start.value == position
        position = tok.range.end.value
    assert position == len(case.source)
