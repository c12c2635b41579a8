"""Character sources for the reader.

A Port yields one character at a time and supports one-character pushback.
Ports are chained on an InputStack: reading always pulls from the top port,
and an exhausted port is closed and popped so reading resumes from the port
beneath it. This is what gives `load` textual-inclusion semantics.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional

from minilisp.errors import MiniLispSyntaxError

logger = logging.getLogger(__name__)

# End-of-input marker for character reads
EOF_CHAR = ""


class Port:
    """Base character source tracking line/column for diagnostics."""

    def __init__(self, name: str):
        self.name = name
        self.line = 1
        self.column = 0
        self._pushback: list[str] = []
        self._prev_column = 0

    def _next(self) -> str:
        raise NotImplementedError

    def read(self) -> str:
        if self._pushback:
            ch = self._pushback.pop()
        else:
            ch = self._next()
        if ch == "\n":
            self.line += 1
            self._prev_column, self.column = self.column, 0
        elif ch:
            self.column += 1
        return ch

    def unread(self, ch: str) -> None:
        if not ch:
            return
        self._pushback.append(ch)
        if ch == "\n":
            self.line -= 1
            self.column = self._prev_column
        else:
            self.column -= 1

    def peek(self) -> str:
        ch = self.read()
        self.unread(ch)
        return ch

    def close(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} {self.line}:{self.column}>"


class StringPort(Port):
    """In-memory cursor over a string; never blocks."""

    def __init__(self, text: str, name: str = "<string>"):
        super().__init__(name)
        self.text = text
        self.pos = 0

    def _next(self) -> str:
        if self.pos >= len(self.text):
            return EOF_CHAR
        ch = self.text[self.pos]
        self.pos += 1
        return ch


class FilePort(Port):
    """Character source over a text stream."""

    def __init__(self, stream: IO[str], name: Optional[str] = None, owned: bool = True):
        super().__init__(name or getattr(stream, "name", "<file>"))
        self.stream = stream
        # stdin and other borrowed streams are left open on exhaustion
        self.owned = owned

    @classmethod
    def open(cls, path: Path | str) -> FilePort:
        return cls(open(path, "r", encoding="utf-8"), name=str(path))

    def _next(self) -> str:
        try:
            return self.stream.read(1)
        except UnicodeDecodeError as ex:
            raise MiniLispSyntaxError(
                f"cannot decode input: {ex.reason}", self.name, self.line, self.column + 1
            ) from ex

    def close(self) -> None:
        if self.owned and not self.stream.closed:
            self.stream.close()


class InputStack:
    """Stack of ports with automatic fallthrough on exhaustion."""

    def __init__(self, *ports: Port):
        # top of stack is the last element
        self.ports: list[Port] = list(reversed(ports))

    @property
    def top(self) -> Optional[Port]:
        return self.ports[-1] if self.ports else None

    def push(self, port: Port) -> None:
        self.ports.append(port)

    def pop(self) -> Port:
        port = self.ports.pop()
        port.close()
        return port

    def read(self) -> str:
        while self.ports:
            try:
                ch = self.ports[-1].read()
            except MiniLispSyntaxError as ex:
                # an undecodable source cannot be resumed
                logger.warning("dropping input %s: %s", self.ports[-1].name, ex)
                self.pop()
                raise
            if ch:
                return ch
            self.pop()
        return EOF_CHAR

    def unread(self, ch: str) -> None:
        if ch and self.ports:
            self.ports[-1].unread(ch)

    def peek(self) -> str:
        ch = self.read()
        self.unread(ch)
        return ch

    def position(self) -> tuple[str, int, int]:
        port = self.top
        if port is None:
            return "<eof>", 0, 0
        return port.name, port.line, port.column

    def close(self) -> None:
        while self.ports:
            self.pop()

    def __len__(self) -> int:
        return len(self.ports)
