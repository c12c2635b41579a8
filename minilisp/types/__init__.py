from minilisp.types.symbol import Symbol, SymbolTable
from minilisp.types.cons import Cons, from_iterable, to_list, reverse, length
from minilisp.types.environment import Environment
from minilisp.types.primitive import Primitive
from minilisp.types.closure import Closure
from minilisp.types.values import (
    Tag,
    tag_of,
    make_number,
    as_number,
    as_boolean,
    as_string,
    as_symbol,
    as_cons,
    as_primitive,
    as_closure,
    INT_MIN,
    INT_MAX,
)

__all__ = [
    "Symbol",
    "SymbolTable",
    "Cons",
    "from_iterable",
    "to_list",
    "reverse",
    "length",
    "Environment",
    "Primitive",
    "Closure",
    "Tag",
    "tag_of",
    "make_number",
    "as_number",
    "as_boolean",
    "as_string",
    "as_symbol",
    "as_cons",
    "as_primitive",
    "as_closure",
    "INT_MIN",
    "INT_MAX",
]
