import pytest

from owo.errors import (
    OwoInvalidArgumentCount,
    OwoUndefinedFunction,
    OwoInvalidFunction,
    OwoUndefinedSymbol,
    OwoRecursionError,
)


def test_factorial(run):
    program = """
        (
            (define fact (lambda (n) (if (o_O n 1) 1 (* n (fact (- n 1))))))
            (fact 5)
        )
    """
    assert run(program) == [120]


def test_area_of_a_circle(run):
    program = """(
                    (define r 10)
                    (define pi 314)
                    (* pi (* r r))
                  )"""
    assert run(program) == [314 * 10 * 10]


def test_call_across_programs(run):
    run("(define add (lambda (a b) (+ a b)))")
    assert run("(add 2 3)") == 5


def test_arguments_are_evaluated_in_caller_env(run):
    run("(define x 4)")
    run("(define double (lambda (n) (* n 2)))")
    assert run("(double (+ x 1))") == 10


def test_fibonacci(run):
    run("(define fib (lambda (n) (if (o_O n 2) n (+ (fib (- n 1)) (fib (- n 2))))))")
    assert run("(fib 10)") == 55


def test_missing_argument_is_reported(run):
    run("(define add (lambda (a b) (+ a b)))")
    with pytest.raises(OwoInvalidArgumentCount):
        run("(add 2)")


def test_extra_arguments_are_ignored_and_not_evaluated(run):
    run("(define one (lambda (a) (+ a 0)))")
    assert run("(one 1 undefined_name)") == 1


def test_undefined_function(run):
    with pytest.raises(OwoUndefinedFunction, match="Undefined function: nope"):
        run("(nope 1 2)")


def test_calling_non_lambda(run):
    run("(define x 5)")
    with pytest.raises(OwoInvalidFunction, match="Invalid function: x"):
        run("(x 1)")


def test_call_frame_is_discarded(env, run):
    run("(define inc (lambda (n) (+ n 1)))")
    assert run("(inc 1)") == 2
    assert env.get("n") is None


def test_define_inside_body_is_local_to_call(env, run):
    run("(define f (lambda (n) ((define tmp n) (+ tmp 1))))")
    # The body is a sequence, so the call yields a list
    assert run("(f 4)") == [5]
    assert env.get("tmp") is None


def test_free_variables_resolve_at_call_site(run):
    program = """(
        (define get-y (lambda () (+ y 0)))
        (define call-with-y (lambda (y) (get-y)))
        (call-with-y 7)
    )"""
    assert run(program) == [7]


def test_free_variable_unbound_at_call_site(run):
    run("(define get-y (lambda () (+ y 0)))")
    with pytest.raises(OwoUndefinedSymbol):
        run("(get-y)")


def test_parameter_shadows_global(env, run):
    run("(define n 100)")
    run("(define id (lambda (n) (+ n 0)))")
    assert run("(id 3)") == 3
    assert env.get("n") == 100


def test_unbounded_recursion_is_reported(env, run):
    run("(define loop (lambda (n) (loop n)))")
    with pytest.raises(OwoRecursionError):
        run("(loop 1)")
    # the environment is still usable afterwards
    assert run("(+ 1 2)") == 3
