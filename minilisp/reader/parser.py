"""
  Lisp Reader

- Character-level, one value per call, pulling from an InputStack of ports
- One character of lookahead (peek = read + unread)
- Emits minilisp values:

    - integers  -> int      ([+-]?[0-9]+, strtol base detection: 010 is octal)
    - strings   -> str      ("..." with no escape processing)
    - symbols   -> Symbol   (interned through the context's SymbolTable)
    - lists     -> Cons chain terminated by None
    - 'x        -> (quote x)

- `[ ] { }` are delimiters with no production; meeting one (or a stray `)`)
  where a value should start is a syntax error. The reader discards the rest
  of that line and then raises, so the next read resumes on the next line.
  Inside a list it first discards until the enclosing top-level form is
  closed, so no fragment of a broken form is read as a form of its own.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from minilisp import SExpression
from minilisp.errors import MiniLispEOFError, MiniLispSyntaxError
from minilisp.reader.ports import EOF_CHAR, InputStack, Port, StringPort
from minilisp.types.cons import Cons, reverse
from minilisp.types.symbol import SymbolTable
from minilisp.types.values import INT_MAX, INT_MIN

logger = logging.getLogger(__name__)

DELIMITERS = frozenset("()[]{}'\"")
WHITESPACE = frozenset(" \t\n\r\v\f")
DIGITS = frozenset("0123456789")

_OCTAL_PREFIX = re.compile(r"[0-7]*")


class EndOfInput:
    """Returned by Reader.read once every port is exhausted."""

    __slots__ = ()

    def __repr__(self):
        return "#<eof>"

    def __bool__(self):
        return False


EOF = EndOfInput()


def parse_integer(token: str) -> int:
    """Convert a `[+-]?[0-9]+` token the way strtol(token, NULL, 0) does.

    A leading zero selects octal over the longest [0-7] prefix; the result
    saturates at the signed 64-bit bounds.
    """
    sign = -1 if token[0] == "-" else 1
    digits = token[1:] if token[0] in "+-" else token
    if len(digits) > 1 and digits[0] == "0":
        value = int(_OCTAL_PREFIX.match(digits).group(), 8)
    else:
        value = int(digits, 10)
    return max(INT_MIN, min(INT_MAX, sign * value))


class Reader:
    def __init__(self, ports: InputStack, symbols: SymbolTable):
        self.ports = ports
        self.symbols = symbols
        self.quote = symbols.intern("quote")
        self._token: list[str] = []
        # lists open around the value being read
        self._depth = 0

    @classmethod
    def from_string(cls, text: str, symbols: SymbolTable, name: str = "<string>") -> Reader:
        return cls(InputStack(StringPort(text, name)), symbols)

    # --- character helpers ---
    def _peek(self) -> str:
        return self.ports.peek()

    def _take(self) -> None:
        self._token.append(self.ports.read())

    def _clear(self) -> str:
        token = "".join(self._token)
        self._token.clear()
        return token

    def _skip_whitespace(self) -> None:
        while self._peek() in WHITESPACE:
            self.ports.read()

    def _eof_error(self, what: str) -> MiniLispEOFError:
        self._token.clear()
        source, line, column = self.ports.position()
        return MiniLispEOFError(f"unexpected end of input in {what}", source, line, column)

    def _syntax_error(self, ch: str) -> MiniLispSyntaxError:
        source, line, column = self.ports.position()
        err = MiniLispSyntaxError(f"unexpected {ch!r}", source, line, column + 1)
        logger.warning("syntax error: %s", err)
        self._resync(self.ports.top)
        self._token.clear()
        return err

    def _resync(self, port: Port) -> None:
        """Discard input from `port` up to the next newline outside any open list.

        `self._depth` lists are open at the point of the error; their closing
        parens are consumed here so the rest of a broken form never reaches
        the caller as separate forms. Stops at the end of `port`.
        """
        depth = self._depth
        in_string = False
        port.read()  # the offending character
        while True:
            ch = port.read()
            if ch == EOF_CHAR:
                return
            if in_string:
                in_string = ch != '"'
            elif ch == '"':
                in_string = True
            elif ch == "(":
                depth += 1
            elif ch == ")":
                depth = max(depth - 1, 0)
            elif ch == "\n" and depth == 0:
                return

    # --- productions ---
    def read(self) -> SExpression | EndOfInput:
        """Read one value, or return EOF when no input remains anywhere."""
        if self._depth == 0:
            self._token.clear()
        self._skip_whitespace()
        ch = self._peek()
        if ch == EOF_CHAR:
            return EOF
        if ch in DIGITS or ch == "-" or ch == "+":
            return self._read_number()
        if ch == '"':
            return self._read_string()
        if ch == "'":
            return self._read_quote()
        if ch == "(":
            return self._read_list()
        if ch not in DELIMITERS:
            return self._read_symbol()
        raise self._syntax_error(ch)

    def read_all(self) -> Iterator[SExpression]:
        while (value := self.read()) is not EOF:
            yield value

    def _read_nested(self, what: str) -> SExpression:
        value = self.read()
        if value is EOF:
            raise self._eof_error(what)
        return value

    def _read_number(self) -> SExpression:
        if self._peek() in ("+", "-"):
            self._take()
        if self._peek() not in DIGITS:
            # a lone sign, or a sign followed by symbol characters
            return self._read_symbol()
        while self._peek() in DIGITS:
            self._take()
        return parse_integer(self._clear())

    def _read_string(self) -> str:
        self.ports.read()  # opening quote
        while True:
            ch = self.ports.read()
            if ch == EOF_CHAR:
                raise self._eof_error("string")
            if ch == '"':
                return self._clear()
            self._token.append(ch)

    def _read_quote(self) -> Cons:
        self.ports.read()
        return Cons(self.quote, Cons(self._read_nested("quote"), None))

    def _read_list(self) -> Cons | None:
        self.ports.read()  # (
        items = None
        self._depth += 1
        try:
            while True:
                self._skip_whitespace()
                ch = self._peek()
                if ch == EOF_CHAR:
                    raise self._eof_error("list")
                if ch == ")":
                    self.ports.read()
                    return reverse(items)
                items = Cons(self._read_nested("list"), items)
        finally:
            self._depth -= 1

    def _read_symbol(self) -> SExpression:
        while True:
            ch = self._peek()
            if ch == EOF_CHAR or ch in DELIMITERS or ch in WHITESPACE:
                break
            self._take()
        return self.symbols.intern(self._clear())
