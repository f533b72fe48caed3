"""
End-to-end tests for small grammars built from the combinators.
"""
import dataclasses as dc
import re
from functools import reduce

import pytest

from multiparse import (
    ErrorKind,
    Parser,
    combine,
    forward_decl,
    many,
    maybe,
    one,
    option,
    parse,
    pure,
    skip,
    some,
)


@dc.dataclass(frozen=True)
class Token:
    type: str
    value: str
    start: tuple = dc.field(default=None, compare=False)
    end: tuple = dc.field(default=None, compare=False)


def tokenize(text):
    """
    Split a single line of arithmetic into tokens with their positions.
    """
    tokens = []
    for m in re.finditer(r"\s*(?:(\d+)|(\S))", text):
        if m.group(1) is not None:
            kind, value, col = "number", m.group(1), m.start(1)
        else:
            kind, value, col = "op", m.group(2), m.start(2)
        tokens.append(Token(kind, value, (1, col + 1), (1, col + len(value))))
    return tokens


def op(s):
    return one(Token("op", s))


def _fold(args):
    first, rest = args
    acc = first
    for o, v in rest:
        if o.value == "+":
            acc = acc + v
        elif o.value == "-":
            acc = acc - v
        elif o.value == "*":
            acc = acc * v
        else:
            acc = acc // v
    return acc


def arithmetic() -> Parser:
    number = some(lambda t: t.type == "number") >> (lambda t: int(t.value))
    expr = forward_decl().named("expr")
    primary = number | (skip(op("(")) + expr + skip(op(")")))
    term = primary + many((op("*") | op("/")) + primary) >> _fold
    expr.define(term + many((op("+") | op("-")) + term) >> _fold)
    return expr


def digits() -> Parser:
    return reduce(lambda acc, d: combine(one(d), acc), "876543210", one("9"))


def test_digit_grammar():
    """
    Test a choice of ten single-token alternatives.
    """
    digit = digits()
    assert parse(digit, "5").value == "5"
    assert parse(digit, "0").value == "0"
    assert parse(digit, "9").value == "9"
    assert parse(digit, "").kind is ErrorKind.NO_PARSE
    assert parse(digit, "55").kind is ErrorKind.INCOMPLETE_PARSE
    assert parse(digit, "a").kind is ErrorKind.NO_PARSE


def test_number_grammar():
    """
    Test a repetition of digits folded into an integer.
    """
    digit = digits()
    number = digit + many(digit) >> (lambda args: int(args[0] + "".join(args[1])))
    assert parse(number, "2024").value == 2024
    assert parse(number, "7").value == 7
    assert parse(number, "12a").kind is ErrorKind.INCOMPLETE_PARSE


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", 1),
        ("1 + 2", 3),
        ("1 + 2 * 3", 7),
        ("(1 + 2) * 3", 9),
        ("10 - 4 - 3", 3),
        ("2 * (3 + 4) / 7", 2),
        ("((42))", 42),
    ],
)
def test_arithmetic(text, expected):
    """
    Test a recursive expression grammar over token objects.
    """
    assert parse(arithmetic(), tokenize(text)).value == expected


def test_arithmetic_trailing_operator():
    """
    Test the error message for unconsumed tokens with positions.
    """
    res = parse(arithmetic(), tokenize("1 +"))
    assert res.kind is ErrorKind.INCOMPLETE_PARSE
    assert res.pos == 1
    assert res.message == "1,3-1,3: got unexpected token: '+', expected: end of input"


def test_arithmetic_empty_input():
    """
    Test the error message for empty input.
    """
    res = parse(arithmetic(), [])
    assert res.kind is ErrorKind.NO_PARSE
    assert res.message == "got unexpected end of input, expected: expr"


def test_arithmetic_unbalanced():
    """
    Test a missing closing parenthesis.
    """
    res = parse(arithmetic(), tokenize("(1 + 2"))
    assert res.kind is ErrorKind.NO_PARSE
    assert res.message == "no parse, expected: expr"


def test_non_string_token_message():
    """
    Test that non-string tokens are shown with str() in error messages.
    """
    res = parse(one(1), [1, 2])
    assert res.message == "got unexpected token: 2, expected: end of input"


def test_list_grammar():
    """
    Test a bracketed, comma-separated list with an optional trailing comma.
    """
    item = some(str.isalpha)
    items = item + many(skip(one(",")) + item) >> (lambda args: [args[0]] + args[1])
    lst = (
        skip(one("["))
        + option(items, pure([]))
        + skip(maybe(one(",")))
        + skip(one("]"))
    )
    assert parse(lst, "[a,b,c]").value == ["a", "b", "c"]
    assert parse(lst, "[a,b,]").value == ["a", "b"]
    assert parse(lst, "[]").value == []
    assert parse(lst, "[a,,b]").kind is ErrorKind.NO_PARSE


def test_ambiguous_grammar_prefers_first_alternative():
    """
    Test that the first alternative of combine wins when both match all tokens.
    """
    a = one("a")
    pair = (a + a) >> (lambda _: "pair")
    twice = (a >> (lambda _: "one")) + (a >> (lambda _: "one")) >> (lambda _: "twice")
    assert parse(combine(pair, twice), "aa").value == "pair"
    assert parse(combine(twice, pair), "aa").value == "twice"
