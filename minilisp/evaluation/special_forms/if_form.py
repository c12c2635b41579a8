from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MiniLispArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env, ctx)
    # Only the false singleton is falsy: 0, "" and () are all true
    if cond is not False:
        return evaluate_fn(tail[1], env, ctx)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env, ctx)
    else:
        return None
