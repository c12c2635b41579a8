# Core type aliases for the minilisp data model.
# Numbers, booleans and strings are plain Python int/bool/str. Lists are chains
# of Cons cells terminated by None, which is also the empty list. Symbols,
# primitives and closures have their own classes under minilisp.types.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any`; the tag of a value is recovered with types.tag_of.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
