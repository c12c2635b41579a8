"""Tags and checked accessors for minilisp values.

Every runtime value has exactly one Tag. Numbers, booleans and strings are
native Python objects; the remaining variants are classes in this package.
Accessors return the payload or raise MiniLispTypeError on a tag mismatch.
"""

from __future__ import annotations

from enum import Enum

from minilisp import LispValue
from minilisp.errors import MiniLispTypeError
from minilisp.types.closure import Closure
from minilisp.types.cons import Cons
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


class Tag(Enum):
    NIL = "nil"
    CONS = "cons"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    SYMBOL = "symbol"
    PRIMITIVE = "primitive"
    CLOSURE = "closure"


_CLASS_TAGS = {
    Cons: Tag.CONS,
    Symbol: Tag.SYMBOL,
    Primitive: Tag.PRIMITIVE,
    Closure: Tag.CLOSURE,
    str: Tag.STRING,
    bool: Tag.BOOLEAN,
    int: Tag.NUMBER,
}


def tag_of(value: LispValue) -> Tag:
    if value is None:
        return Tag.NIL
    # exact type first: bool is a subclass of int
    tag = _CLASS_TAGS.get(type(value))
    if tag is None:
        raise MiniLispTypeError(f"not a minilisp value: {value!r}")
    return tag


def make_number(n: int) -> int:
    """Wrap `n` into signed 64-bit two's complement."""
    n &= (1 << INT_BITS) - 1
    return n - (1 << INT_BITS) if n > INT_MAX else n


def _expect(value: LispValue, tag: Tag) -> LispValue:
    actual = tag_of(value)
    if actual is not tag:
        raise MiniLispTypeError(f"expected {tag.value}, got {actual.value}")
    return value


def as_number(value: LispValue) -> int:
    return _expect(value, Tag.NUMBER)


def as_boolean(value: LispValue) -> bool:
    return _expect(value, Tag.BOOLEAN)


def as_string(value: LispValue) -> str:
    return _expect(value, Tag.STRING)


def as_symbol(value: LispValue) -> Symbol:
    return _expect(value, Tag.SYMBOL)


def as_cons(value: LispValue) -> Cons:
    return _expect(value, Tag.CONS)


def as_primitive(value: LispValue) -> Primitive:
    return _expect(value, Tag.PRIMITIVE)


def as_closure(value: LispValue) -> Closure:
    return _expect(value, Tag.CLOSURE)
