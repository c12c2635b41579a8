import pytest

from minilisp.errors import MiniLispArityError, MiniLispRecursionError


@pytest.fixture
def interp(interp):
    # host-provided helpers for writing terminating recursion
    interp.register_primitive("-", lambda ctx, args: args[0] - args[1])
    interp.register_primitive("=", lambda ctx, args: args[0] == args[1])
    return interp


def test_lexical_not_dynamic_scope(interp):
    program = """
    (def y 1)
    (def f (fn () y))
    (def g (fn (y) (f)))
    (g 100)
    """
    assert interp.eval(program) == 1


def test_captured_environment_is_a_reference(interp):
    # the global frame is captured by reference, so a later redefinition
    # of the free variable is visible when the closure runs
    assert interp.eval("(def y 1) (def f (fn () y)) (def y 2) (f)") == 2


def test_each_call_gets_its_own_frame(interp):
    interp.eval("(def make (fn (x) (fn () x)))")
    interp.eval("(def a (make 1)) (def b (make 2))")
    assert interp.eval("(a)") == 1
    assert interp.eval("(b)") == 2


def test_closures_share_mutable_frame(interp):
    interp.eval("""
    (def counter (fn ()
      (def n 0)
      (fn () (set! n (+ n 1)) n)))
    (def c1 (counter))
    (def c2 (counter))
    """)
    assert interp.eval("(c1) (c1) (c1)") == 3
    assert interp.eval("(c2)") == 1


def test_global_counter(interp):
    assert interp.eval("(def n 0) (def inc (fn () (set! n (+ n 1)))) (inc) (inc) n") == 2


def test_recursion_terminates_through_if(interp):
    program = """
    (def sum (fn (n)
      (if (= n 0)
          0
          (+ n (sum (- n 1))))))
    (sum 10)
    """
    assert interp.eval(program) == 55


def test_higher_order_functions(interp):
    program = """
    (def twice (fn (f x) (f (f x))))
    (def add3 (fn (x) (+ x 3)))
    (twice add3 1)
    """
    assert interp.eval(program) == 7


@pytest.mark.parametrize("code", ["((fn (a b) a) 1)", "((fn (a) a) 1 2)", "((fn () 1) 1)"])
def test_arity_mismatch_is_reported(interp, code):
    with pytest.raises(MiniLispArityError):
        interp.eval(code)


def test_empty_body_returns_nil(interp):
    assert interp.eval("((fn ()))") is None


def test_unbounded_recursion_is_a_typed_error(interp):
    with pytest.raises(MiniLispRecursionError):
        interp.eval("(def forever (fn () (forever))) (forever)")
    # the interpreter is still usable afterwards
    assert interp.eval("(+ 1 2)") == 3
