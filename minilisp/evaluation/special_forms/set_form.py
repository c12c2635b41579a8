from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment
from minilisp.types.values import as_symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise MiniLispArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    var_sym = as_symbol(var_sym)
    value = evaluate_fn(val_expr, env, ctx)
    env.set(var_sym, value, strict=ctx.settings.strict_set)

    return value
