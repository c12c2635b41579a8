"""Runtime environment for minilisp.

An Environment is one frame of Symbol -> value bindings with an `outer` link.
The root frame holds the globals and is extended in place; every closure call
gets a fresh frame in front of the closure's captured chain, so frames are
shared structurally by every closure that captured them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from minilisp import LispValue
from minilisp.errors import MiniLispArityError, MiniLispTypeError, MiniLispUnboundSymbol
from minilisp.types.symbol import Symbol


class Environment:
    """Chain of binding frames, innermost first."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    @property
    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    @property
    def depth(self) -> int:
        n, env = 0, self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def extend(self, name: Symbol, value: LispValue) -> Environment:
        """Return a new frame binding `name` in front of this chain.

        The receiver is left untouched.
        """
        return self.extend_many([name], [value])

    def extend_many(self, names: Iterable[Symbol], values: Iterable[LispValue]) -> Environment:
        names, values = list(names), list(values)
        if len(names) != len(values):
            raise MiniLispArityError(f"Cannot bind {len(names)} name(s) to {len(values)} value(s)")
        env = Environment(outer=self)
        for name, value in zip(names, values):
            env.define(name, value)
        return env

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding.

        Raises MiniLispTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MiniLispTypeError(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value

    def define_global(self, name: Symbol, value: LispValue) -> None:
        self.root.define(name, value)

    def lookup_binding(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        env = self.lookup_binding(name)
        if env is None:
            raise MiniLispUnboundSymbol(f"unbound symbol {name}")
        return env.vars[name]

    def set(self, name: Symbol, value: LispValue, strict: bool = False) -> None:
        """Rewrite the nearest existing binding for `name`.

        An unbound name becomes a new global binding, unless `strict` is set,
        in which case MiniLispUnboundSymbol is raised.
        """
        env = self.lookup_binding(name)
        if env is not None:
            env.vars[name] = value
        elif strict:
            raise MiniLispUnboundSymbol(f"Cannot set! unbound symbol {name}")
        else:
            self.define_global(name, value)

    def __contains__(self, name: Symbol) -> bool:
        return self.lookup_binding(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
