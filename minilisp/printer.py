"""Textual printer for minilisp values."""

from __future__ import annotations

from io import StringIO

from minilisp import LispValue
from minilisp.types.closure import Closure
from minilisp.types.cons import Cons
from minilisp.types.primitive import Primitive
from minilisp.types.symbol import Symbol


def _write(value: LispValue, buffer: StringIO) -> None:
    if value is None:
        buffer.write("nil")
    elif value is True:
        buffer.write("true")
    elif value is False:
        buffer.write("false")
    elif isinstance(value, str):
        buffer.write(f'"{value}"')
    elif isinstance(value, Cons):
        buffer.write("(")
        cell = value
        while True:
            _write(cell.car, buffer)
            cell = cell.cdr
            if cell is None:
                break
            if not isinstance(cell, Cons):
                buffer.write(" . ")
                _write(cell, buffer)
                break
            buffer.write(" ")
        buffer.write(")")
    elif isinstance(value, Primitive):
        buffer.write(repr(value))
    elif isinstance(value, (Symbol, Closure, int)):
        buffer.write(str(value))
    else:
        buffer.write(repr(value))


def to_string(value: LispValue) -> str:
    """Render `value` as text. Not cycle-safe."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()
