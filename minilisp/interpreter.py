from __future__ import annotations

from pathlib import Path
from typing import Optional

from minilisp import LispValue
from minilisp.config import Settings
from minilisp.errors import MiniLispLoadError
from minilisp.printer import to_string
from minilisp.reader.parser import EOF
from minilisp.reader.ports import FilePort, Port, StringPort
from minilisp.runtime_context import RuntimeContext
from minilisp.types.environment import Environment
from minilisp.types.primitive import Primitive, PrimitiveFn


class Interpreter:
    """
    Embedding facade: reads and evaluates minilisp code against one
    RuntimeContext, so definitions persist across calls.
    """

    def __init__(self, settings: Optional[Settings] = None, prelude: Optional[str] = None):
        self.ctx = RuntimeContext(settings)
        if prelude:
            self.eval(prelude, name="<prelude>")

    @property
    def env(self) -> Environment:
        return self.ctx.globals

    def register_primitive(self, name: str, fn: PrimitiveFn) -> Primitive:
        return self.ctx.register_primitive(name, fn)

    def define_constant(self, name: str, value: LispValue) -> LispValue:
        return self.ctx.define_constant(name, value)

    def eval_port(self, port: Port) -> list[LispValue]:
        """Evaluate every form readable from `port`, including loaded files."""
        results: list[LispValue] = []
        with self.ctx.reading_from(port) as reader:
            while (expr := reader.read()) is not EOF:
                results.append(self.ctx.evaluate(expr))
        return results

    def eval_all(self, code: str, name: str = "<string>") -> list[LispValue]:
        return self.eval_port(StringPort(code, name))

    def eval(self, code: str, name: str = "<string>") -> LispValue:
        """Evaluate `code` and return the value of its last form (nil if none)."""
        results = self.eval_all(code, name)
        return results[-1] if results else None

    def eval_file(self, path: Path | str) -> LispValue:
        try:
            port = FilePort.open(path)
        except OSError as ex:
            raise MiniLispLoadError(f"Cannot open {str(path)!r}: {ex}") from ex
        results = self.eval_port(port)
        return results[-1] if results else None

    def eval_to_string(self, code: str) -> str:
        return to_string(self.eval(code))
