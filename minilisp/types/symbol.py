from __future__ import annotations

from typing import Iterator


class Symbol:
    """An interned name.

    Symbols are compared and hashed by identity, so two symbols are equal only
    when they came out of the same SymbolTable for the same text. Build them
    with SymbolTable.intern, never directly.
    """
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Append-only registry mapping text to its unique Symbol."""

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = Symbol(name)
            self._symbols[name] = sym
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())
