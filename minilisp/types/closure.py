"""User-defined function values."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol


class Closure:
    """A first-class function with formal parameters, body, and captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: list[SExpression], env: Environment):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<fn:(")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind_arguments(self, args: list[LispValue]) -> Environment:
        """
        Return a fresh frame over the captured environment binding each
        parameter, in order, to the matching argument.
        """
        if len(args) != len(self.params):
            raise MiniLispArityError(
                f"{self} expects {len(self.params)} argument(s), got {len(args)}"
            )
        return self.env.extend_many(self.params, args)
