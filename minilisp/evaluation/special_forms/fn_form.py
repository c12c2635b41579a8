from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.closure import Closure
from minilisp.types.cons import to_list
from minilisp.types.environment import Environment
from minilisp.types.values import as_symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params) body...) takes zero or more body forms, evaluated in order
    # at call time. Nothing is evaluated here; the closure captures `env`.
    if not tail:
        raise MiniLispArityError("fn requires at least a parameter list")

    params = [as_symbol(p) for p in to_list(tail[0])]
    return Closure(params, list(tail[1:]), env)
