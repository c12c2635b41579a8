"""Built-in bindings for the minilisp global environment.

`register` is the one initialization step run for every RuntimeContext: it
binds the two boolean singletons and the primitives below. Hosts add their
own primitives afterwards through RuntimeContext.register_primitive.
"""
from __future__ import annotations

import logging
from pathlib import Path

from minilisp import LispValue
from minilisp.errors import MiniLispArityError, MiniLispLoadError
from minilisp.reader.ports import FilePort
from minilisp.types.values import as_number, as_string, make_number

logger = logging.getLogger(__name__)


def _expect_args(name: str, args: list[LispValue], count: int) -> None:
    if len(args) != count:
        raise MiniLispArityError(f"{name} requires exactly {count} argument(s), got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(ctx, args: list[LispValue]) -> int:
    """Return the 64-bit wrapping sum of exactly two numbers."""
    _expect_args("+", args, 2)
    return make_number(as_number(args[0]) + as_number(args[1]))


# -------------------------------
# Loading
# -------------------------------
def resolve_load_path(ctx, filename: str) -> Path:
    """Find `filename` as given, then under each directory of the load path."""
    path = Path(filename)
    if path.is_file():
        return path
    if not path.is_absolute():
        for root in ctx.settings.load_path:
            candidate = Path(root) / path
            if candidate.is_file():
                return candidate
    raise MiniLispLoadError(f"Cannot find file {filename!r} to load")


def load(ctx, args: list[LispValue]) -> None:
    """Push the named file on the input stack.

    Reading resumes from the file's contents before returning to whatever was
    being read when `load` was evaluated.
    """
    _expect_args("load", args, 1)
    path = resolve_load_path(ctx, as_string(args[0]))
    try:
        port = FilePort.open(path)
    except OSError as ex:
        raise MiniLispLoadError(f"Cannot open {str(path)!r}: {ex}") from ex
    logger.info("loading %s", path)
    ctx.ports.push(port)
    return None


def register(ctx) -> None:
    ctx.define_constant("true", True)
    ctx.define_constant("false", False)
    ctx.register_primitive("+", add)
    ctx.register_primitive("load", load)
