"""Host read-eval-print loop and command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO, Optional, Sequence

from minilisp import __version__
from minilisp.config import Settings
from minilisp.errors import MiniLispError
from minilisp.printer import to_string
from minilisp.reader.parser import EOF
from minilisp.reader.ports import FilePort
from minilisp.runtime_context import RuntimeContext

logger = logging.getLogger(__name__)


def run(ctx: RuntimeContext, stdout: IO[str], stderr: IO[str]) -> int:
    """Read and evaluate forms until every input port is exhausted.

    Each result is printed on its own line; errors are reported and the loop
    carries on with the next form.
    """
    while True:
        try:
            expr = ctx.read()
            if expr is EOF:
                return 0
            value = ctx.evaluate(expr)
        except MiniLispError as ex:
            print(f"Error: {ex}", file=stderr)
            continue
        print(to_string(value), file=stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minilisp", description="minilisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to evaluate in order")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="read standard input after the files")
    parser.add_argument("--strict-set", action="store_true", default=None,
                        help="make set! on an unbound name an error")
    parser.add_argument("--log-level", default=None, help="logging level (default: $MINILISP_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env(strict_set=args.strict_set, log_level=args.log_level)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("starting with %s", settings)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    ctx = RuntimeContext(settings)
    if not args.files or args.interactive:
        ctx.push_input(FilePort(stdin, name="<stdin>", owned=False))
    # push in reverse so the first file is read first
    for filename in reversed(args.files):
        try:
            ctx.push_input(FilePort.open(filename))
        except OSError as ex:
            print(f"Error: cannot open {filename}: {ex.strerror}", file=stderr)
            ctx.ports.close()
            return 1
    return run(ctx, stdout, stderr)
