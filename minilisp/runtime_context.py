"""Explicit interpreter state.

Everything one interpreter instance needs lives on a RuntimeContext: its
symbol table, the global environment, the input port stack feeding its reader,
the special-form table keyed by its own keyword symbols, and its settings.
Contexts share nothing, so independent interpreters can coexist in one
process.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from minilisp import SExpression, LispValue
from minilisp.builtin.env_builtin import register
from minilisp.config import Settings
from minilisp.evaluation.evaluator import evaluate
from minilisp.evaluation.special_forms import build_special_forms
from minilisp.reader.parser import Reader, EndOfInput
from minilisp.reader.ports import InputStack, Port
from minilisp.types.environment import Environment
from minilisp.types.primitive import Primitive, PrimitiveFn
from minilisp.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)


class RuntimeContext:
    def __init__(self, settings: Optional[Settings] = None, ports: Optional[InputStack] = None):
        self.settings: Settings = settings if settings is not None else Settings.from_env()
        self.symbols: SymbolTable = SymbolTable()
        self.globals: Environment = Environment()
        self.ports: InputStack = ports if ports is not None else InputStack()
        self.reader: Reader = Reader(self.ports, self.symbols)
        self.special_forms = build_special_forms(self.symbols)
        register(self)

    def intern(self, name: str) -> Symbol:
        return self.symbols.intern(name)

    # --- extension surface ---
    def define_constant(self, name: str, value: LispValue) -> LispValue:
        """Bind `name` to an already-constructed value in the globals."""
        self.globals.define_global(self.intern(name), value)
        return value

    def register_primitive(self, name: str, fn: PrimitiveFn) -> Primitive:
        """Bind `name` to a host function called as fn(ctx, evaluated_args)."""
        prim = Primitive(name, fn)
        self.define_constant(name, prim)
        logger.debug("registered primitive %s", name)
        return prim

    def primitive(self, name: str) -> Callable[[PrimitiveFn], PrimitiveFn]:
        """Decorator form of register_primitive."""
        def decorator(fn: PrimitiveFn) -> PrimitiveFn:
            self.register_primitive(name, fn)
            return fn
        return decorator

    # --- read/eval boundary ---
    def push_input(self, port: Port) -> None:
        self.ports.push(port)

    def read(self) -> SExpression | EndOfInput:
        return self.reader.read()

    def evaluate(self, expr: SExpression, env: Optional[Environment] = None) -> LispValue:
        return evaluate(expr, self.globals if env is None else env, self)

    @contextmanager
    def reading_from(self, *ports: Port) -> Iterator[Reader]:
        """Temporarily read from a private stack holding `ports`.

        Files pushed by `load` while inside the block land on that stack and
        are closed with it.
        """
        saved = self.ports
        self.ports = self.reader.ports = InputStack(*ports)
        try:
            yield self.reader
        finally:
            self.ports.close()
            self.ports = self.reader.ports = saved
