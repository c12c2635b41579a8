from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from minilisp import LispValue

if TYPE_CHECKING:
    from minilisp.runtime_context import RuntimeContext

PrimitiveFn = Callable[["RuntimeContext", list[LispValue]], LispValue]


class Primitive:
    """A host function exposed to evaluated code.

    The function is called as fn(ctx, args) with the already-evaluated
    arguments, so a primitive can never see unevaluated forms.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, ctx: RuntimeContext, args: list[LispValue]) -> LispValue:
        return self.fn(ctx, args)

    def __repr__(self) -> str:
        return f"<prim:{self.name}>"
