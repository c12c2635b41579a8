"""Core evaluator for the minilisp interpreter.

A plain recursive tree walker: special forms are recognized by the identity of
the head symbol, every other list is an application. There is no tail-call
elimination, so recursion depth is bounded by the host stack; `evaluate`
turns exhaustion of that stack into MiniLispRecursionError.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispRecursionError
from minilisp.evaluation.apply import apply
from minilisp.types.cons import Cons, to_list
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment, ctx) -> LispValue:
    """Evaluate `expr` in `env`, reporting stack exhaustion as a typed error."""
    try:
        return evaluate0(expr, env, ctx)
    except RecursionError:
        raise MiniLispRecursionError("maximum evaluation depth exceeded") from None


def evaluate0(expr: SExpression, env: Environment, ctx) -> LispValue:
    if isinstance(expr, Symbol):
        return env.lookup(expr)

    # Atoms return as-is
    if not isinstance(expr, Cons):
        return expr

    head = expr.car
    tail = to_list(expr.cdr)
    if isinstance(head, Symbol):
        form = ctx.special_forms.get(head)
        if form is not None:
            logger.debug("special form %s", head)
            return form(tail, env, ctx, evaluate0)

    fn = evaluate0(head, env, ctx)
    args = [evaluate0(arg, env, ctx) for arg in tail]
    return apply(fn, args, ctx, evaluate0)
