from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment
from minilisp.types.values import as_symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the innermost frame: the globals at top level, the call frame
    inside a function body. Returns the bound value.
    """
    if len(tail) != 2:
        raise MiniLispArityError("def requires exactly 2 arguments")

    name, val_expr = tail
    name = as_symbol(name)
    value = evaluate_fn(val_expr, env, ctx)
    env.define(name, value)
    return value
