"""Application engine for minilisp.

Arguments arrive already evaluated, left to right. Primitives get the runtime
context and the argument list; closures get a fresh frame over their captured
environment. Applying anything else is an error.
"""

from __future__ import annotations

import logging

from minilisp import LispValue, EvaluatorFn
from minilisp.errors import MiniLispNotCallable
from minilisp.printer import to_string
from minilisp.types.closure import Closure
from minilisp.types.primitive import Primitive

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[LispValue], ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate the body forms in sequence; the last value is the result."""
    env = fn.bind_arguments(args)
    result = None
    for form in fn.body:
        result = evaluate_fn(form, env, ctx)
    return result


def apply(fn: LispValue, args: list[LispValue], ctx, evaluate_fn: EvaluatorFn) -> LispValue:
    if isinstance(fn, Primitive):
        logger.debug("apply %s to %d argument(s)", fn.name, len(args))
        return fn(ctx, args)
    elif isinstance(fn, Closure):
        return apply_closure(fn, args, ctx, evaluate_fn)
    else:
        raise MiniLispNotCallable(f"Cannot apply non-function {to_string(fn)}")
