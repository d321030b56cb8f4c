import pytest

from owo.printer import to_string, lambda_lines
from owo.reader.parser import parse
from owo.types.lambda_fn import Lambda
from owo.types.symbol import Symbol
from owo.types.void import Void


@pytest.mark.parametrize(
    "value,expected",
    [
        (3, "3"),
        (-3, "-3"),
        (True, "true"),
        (False, "false"),
        (Symbol("o_O"), "o_O"),
        (Void, "Void"),
        ([], "()"),
        ([1, [2, [3]], Symbol("x")], "(1 (2 (3)) x)"),
        ([True, Void], "(true Void)"),
    ]
)
def test_to_string(value, expected):
    assert to_string(value) == expected


def test_lambda_rendering():
    fn = Lambda(["a", "b"], [Symbol("+"), Symbol("a"), Symbol("b")])
    assert to_string(fn) == "Lambda(a b) + a b"
    assert str(fn) == "Lambda(a b) + a b"
    assert to_string(Lambda([], [1])) == "Lambda() 1"


def test_lambda_rendering_of_parsed_body():
    program = parse("(lambda (n) (if (o_O n 1) 1 (* n (fact (- n 1)))))")
    fn = Lambda(["n"], program[2])
    assert to_string(fn) == "Lambda(n) if (o_O n 1) 1 (* n (fact (- n 1)))"


def test_lambda_lines():
    fn = Lambda(["a", "b"], [Symbol("+"), Symbol("a"), Symbol("b")])
    assert lambda_lines(fn) == ["Lambda(", "a ", "b ", ")", " +", " a", " b"]


def test_rendered_program_reparses():
    source = "((define r 10) (* r (- r 1)))"
    assert to_string(parse(source)) == source
    assert parse(to_string(parse(source))) == parse(source)
