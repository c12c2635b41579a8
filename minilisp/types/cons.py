"""Cons cells and the list helpers built on them.

A list is a right-nested chain of Cons cells whose last cdr is None; None on
its own is the empty list.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from minilisp import LispValue
from minilisp.errors import MiniLispTypeError


class Cons:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue = None):
        self.car = car
        self.cdr = cdr

    def __iter__(self) -> Iterator[LispValue]:
        """Iterate over the cars of a proper list; an improper tail is an error."""
        cell = self
        while isinstance(cell, Cons):
            yield cell.car
            cell = cell.cdr
        if cell is not None:
            raise MiniLispTypeError(f"improper list ends in {cell!r}")

    def __repr__(self) -> str:
        return f"Cons({self.car!r}, {self.cdr!r})"


def from_iterable(items: Iterable[LispValue]) -> Cons | None:
    result = None
    for item in reversed(list(items)):
        result = Cons(item, result)
    return result


def to_list(value: Cons | None) -> list[LispValue]:
    if value is None:
        return []
    if not isinstance(value, Cons):
        raise MiniLispTypeError(f"expected a list, got {value!r}")
    return list(value)


def reverse(value: Cons | None) -> Cons | None:
    result = None
    while value is not None:
        result = Cons(value.car, result)
        value = value.cdr
    return result


def length(value: Cons | None) -> int:
    n = 0
    while isinstance(value, Cons):
        n += 1
        value = value.cdr
    return n
