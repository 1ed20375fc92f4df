import pytest

from armacfg import ConfigSyntaxError, ParseError, UnexpectedEofError, parse
from armacfg.parser import ParseMode, ParserOptions
from tests._debug import debug_dump_diagnostics
from tests._shared_cases import INVALID_CASES, ConfigCase, case_id


def _parse_error(source: str, options: ParserOptions | None = None) -> ParseError:
    with pytest.raises(ParseError) as excinfo:
        parse(source, options)
    debug_dump_diagnostics("parse_error", [excinfo.value.diagnostic], source)
    return excinfo.value


def test_missing_value() -> None:
    error = _parse_error("x = ;")

    assert type(error) is ConfigSyntaxError
    assert error.code == "PARSER_EXPECTED_VALUE"
    assert error.offset == 4
    assert (error.line, error.column) == (1, 5)
    assert error.expected == ("boolean", "number", "string")
    assert error.found == "';'"
    assert str(error) == "Line 1, column 5: Expected a value: expected boolean, number or string, found ';'"


def test_missing_statement_delimiter() -> None:
    error = _parse_error("x = 1")

    assert type(error) is ConfigSyntaxError
    assert error.code == "PARSER_EXPECTED_TOKEN"
    assert error.offset == 5
    assert error.expected == ("';'",)
    assert error.found == "end of input"


def test_empty_class_body_is_rejected() -> None:
    error = _parse_error("class Foo {};")

    assert type(error) is ConfigSyntaxError
    assert error.code == "PARSER_EXPECTED_CLASS_BODY_ITEM"
    assert error.offset == 11
    assert error.diagnostic.hint is not None


def test_trailing_comma_is_rejected() -> None:
    error = _parse_error("a[] = {1,2,};")

    assert type(error) is ConfigSyntaxError
    assert error.code == "PARSER_EXPECTED_VALUE"
    assert error.offset == 11
    assert error.expected == ("'{'", "boolean", "number", "string")


def test_unclosed_class_body_is_unexpected_eof() -> None:
    error = _parse_error("class Foo { x = 1;")

    assert isinstance(error, UnexpectedEofError)
    assert error.code == "PARSER_UNEXPECTED_EOF"
    assert error.offset == 18
    assert error.expected == ("'}'",)
    assert error.found == "end of input"


def test_class_body_cut_before_first_item_is_unexpected_eof() -> None:
    error = _parse_error("class A {")

    assert isinstance(error, UnexpectedEofError)
    assert error.offset == 9


def test_unclosed_array_is_unexpected_eof() -> None:
    error = _parse_error("a[] = {1, 2")

    assert isinstance(error, UnexpectedEofError)
    assert error.offset == 11
    assert error.expected == ("','", "'}'")


def test_unterminated_string_is_unexpected_eof() -> None:
    error = _parse_error('s = "abc;\n')

    assert isinstance(error, UnexpectedEofError)
    assert error.code == "LEXER_UNTERMINATED_STRING"
    assert error.offset == 10
    assert (error.line, error.column) == (2, 1)
    assert error.expected == ("'\"'",)


def test_unterminated_block_comment_is_unexpected_eof() -> None:
    error = _parse_error("x = 1; /* open")

    assert isinstance(error, UnexpectedEofError)
    assert error.code == "LEXER_UNTERMINATED_BLOCK_COMMENT"
    assert error.offset == 14
    assert error.expected == ("'*/'",)


def test_unexpected_eof_is_also_a_syntax_error() -> None:
    error = _parse_error("class Foo { x = 1;")
    assert isinstance(error, ConfigSyntaxError)
    assert isinstance(error, ParseError)


def test_earlier_structural_error_wins_over_later_lexer_error() -> None:
    error = _parse_error('x = ; s = "abc')
    assert error.code == "PARSER_EXPECTED_VALUE"
    assert error.offset == 4


def test_position_on_later_line() -> None:
    error = _parse_error("class A {\n  x = ;\n};")
    assert error.offset == 16
    assert (error.line, error.column) == (2, 7)


def test_class_continuation_expectations() -> None:
    error = _parse_error("class A = 1;")
    assert error.expected == ("':'", "'{'", "';'")
    assert error.found == "'='"


def test_name_continuation_expectations() -> None:
    error = _parse_error("foo bar;")
    assert error.offset == 4
    assert error.expected == ("'='", "'[]'", "';'")


def test_array_brackets_must_be_adjacent() -> None:
    error = _parse_error("a[ ] = {};")
    assert error.offset == 3
    assert error.expected == ("']'",)


def test_non_name_item_start() -> None:
    error = _parse_error('"x" = 1;')
    assert error.code == "PARSER_EXPECTED_ITEM"
    assert error.offset == 0

    error = _parse_error("x = 1; }")
    assert error.code == "PARSER_EXPECTED_ITEM"
    assert error.offset == 7


def test_negative_number_is_not_a_name() -> None:
    error = _parse_error("-1 = 2;")
    assert error.code == "PARSER_EXPECTED_ITEM"


def test_backslash_newline_is_not_a_continuation() -> None:
    error = _parse_error("x = 1 \\\n;")
    assert error.offset == 6
    assert error.expected == ("';'",)


def test_array_nesting_limit() -> None:
    error = _parse_error("a[] = {{{1}}};", ParserOptions(max_nesting_depth=2))

    assert type(error) is ConfigSyntaxError
    assert error.code == "PARSER_NESTING_TOO_DEEP"
    assert error.offset == 8


def test_class_nesting_limit() -> None:
    error = _parse_error("class A { class B { x = 1; }; };", ParserOptions(max_nesting_depth=1))

    assert error.code == "PARSER_NESTING_TOO_DEEP"
    assert error.offset == 18


def test_default_nesting_limit() -> None:
    src = "a[] = " + "{" * 129 + "}" * 129 + ";"
    error = _parse_error(src)
    assert error.code == "PARSER_NESTING_TOO_DEEP"

    parse("a[] = " + "{" * 128 + "}" * 128 + ";")


@pytest.mark.parametrize("case", INVALID_CASES, ids=case_id)
def test_invalid_cases_fail_strict(case: ConfigCase) -> None:
    with pytest.raises(ParseError) as excinfo:
        parse(case.source)
    error = excinfo.value

    assert 0 <= error.offset <= len(case.source)
    assert error.line >= 1
    assert error.column >= 1
    assert error.diagnostic.severity == "error"


def test_permissive_mode_still_rejects_real_errors() -> None:
    with pytest.raises(ConfigSyntaxError):
        parse("x = ;", mode=ParseMode.PERMISSIVE)
