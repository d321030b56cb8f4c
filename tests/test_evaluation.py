import pytest

from owo.errors import OwoUndefinedSymbol
from owo.evaluation.evaluator import evaluate
from owo.types.environment import Environment
from owo.types.lambda_fn import Lambda
from owo.types.symbol import Symbol
from owo.types.void import Void


def test_self_evaluating_values(env):
    assert evaluate(1, env) == 1
    assert evaluate(-7, env) == -7
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False
    assert evaluate(Void, env) is Void


def test_bare_lambda_evaluates_to_void(env):
    fn = Lambda(["a"], [Symbol("+"), Symbol("a"), 1])
    assert evaluate(fn, env) is Void


def test_symbol_lookup(env):
    env.set("x", 42)
    assert evaluate(Symbol("x"), env) == 42


def test_undefined_symbol(env):
    with pytest.raises(OwoUndefinedSymbol, match="Undefined symbol: undefined_name"):
        evaluate(Symbol("undefined_name"), env)


def test_empty_list_evaluates_to_empty_list(env):
    assert evaluate([], env) == []


def test_non_symbol_head_evaluates_every_element(env):
    env.set("x", 3)
    assert evaluate([1, Symbol("x"), [Symbol("+"), 1, 1]], env) == [1, 3, 2]


def test_sequence_drops_void_results(run):
    assert run("((define x 1) (define y 2) (+ x y))") == [3]
    assert run("((define z 1))") == []


def test_sequence_keeps_every_non_void_result(run):
    assert run("((+ 1 1) (define a 5) (* a 2) (owo a 5))") == [2, 10, True]


def test_definitions_persist_in_environment(env, run):
    assert run("(define r 10)") is Void
    assert evaluate(Symbol("r"), env) == 10


def test_child_environment_scoping(env, run):
    run("(define r 10)")
    child = Environment.extend(env)
    assert evaluate(Symbol("r"), child) == 10

    evaluate([Symbol("define"), Symbol("r"), 20], child)
    assert evaluate(Symbol("r"), child) == 20
    assert evaluate(Symbol("r"), env) == 10


def test_first_error_aborts_sequence(env, run):
    with pytest.raises(OwoUndefinedSymbol):
        run("((define a 1) (+ a missing) (define b 2))")
    assert env.get("a") == 1
    assert env.get("b") is None
