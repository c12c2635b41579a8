from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    ctx,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(quote x) returns x unevaluated."""
    if len(tail) != 1:
        raise MiniLispArityError("quote requires exactly 1 argument")
    return tail[0]
