import sys, pathlib
sys.path.insert(0, str(pathlib.Path(__file__).parent.parent))

import pytest

from errors import ErrorCategory, ErrorKind
from lexer import tokenize
from postfix import parse


def rpn(expr):
    return [t.value for t in parse(tokenize(expr))]


def test_precedence_ordering():
    result = parse(tokenize("3 + 4 * 2"))
    assert result.ok
    assert [t.value for t in result] == ["3", "4", "2", "*", "+"]


@pytest.mark.parametrize("expr,expected", [
    ("1 - 2 - 3", ["1", "2", "-", "3", "-"]),
    ("8 / 4 * 2", ["8", "4", "/", "2", "*"]),
    ("2 ^ 3 ^ 2", ["2", "3", "^", "2", "^"]),
    ("(4 + 5) / 2", ["4", "5", "+", "2", "/"]),
    ("-2 ^ 2", ["2", "~", "2", "^"]),
    ("2 * (3 + 4) % 5", ["2", "3", "4", "+", "*", "5", "%"]),
])
def test_postfix_order(expr, expected):
    assert rpn(expr) == expected


def test_unmatched_opening_parenthesis():
    result = parse(tokenize("(3 + 4"))
    assert not result
    assert len(result) == 0
    assert result.error.kind == ErrorKind.UNMATCHED_OPENING_PARENTHESIS
    assert result.error.category == ErrorCategory.SYNTAX
    assert result.error.position == 0


def test_unmatched_closing_parenthesis():
    result = parse(tokenize("3 + 4)"))
    assert not result
    assert result.postfix == ()
    assert result.error.kind == ErrorKind.UNMATCHED_CLOSING_PARENTHESIS
    assert result.error.position == 5


def test_invalid_token_fails():
    result = parse(tokenize("3 @ 4"))
    assert result.error.kind == ErrorKind.INVALID_CHARACTER
    assert result.error.category == ErrorCategory.LEXICAL
    assert "@" in result.error.message


def test_empty_input_is_explicit_failure():
    result = parse([])
    assert not result.ok
    assert result.error.kind == ErrorKind.EMPTY_EXPRESSION


def test_empty_parentheses_parse_to_empty_success():
    result = parse(tokenize("()"))
    assert result.ok
    assert len(result) == 0
