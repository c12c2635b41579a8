from __future__ import annotations

"""
Lightweight indexer for minilisp files without evaluating code.

We scan for (def name ...) forms and build an index of definitions, and run
the real Reader over the text to collect its syntax errors as diagnostics.
The scanner is tolerant: partial/incomplete buffers never raise.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple
import re

from minilisp.errors import MiniLispEOFError, MiniLispSyntaxError
from minilisp.reader.parser import Reader
from minilisp.types.symbol import SymbolTable

# Tokens of the reader grammar; an unterminated string runs to end of text
TOKEN_REGEX = re.compile(r"\"[^\"]*\"?|[()\[\]{}']|[^\s()\[\]{}'\"]+")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class ReadError:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    errors: List[ReadError] = field(default_factory=list)
    paren_balance: int = 0


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        yield m.group(0), m.start()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def collect_read_errors(text: str, name: str = "<buffer>") -> List[ReadError]:
    """Run the Reader over `text` and return its errors with 0-based positions."""
    errors: List[ReadError] = []
    reader = Reader.from_string(text, SymbolTable(), name)
    while True:
        try:
            for _ in reader.read_all():
                pass
            break
        except MiniLispEOFError as ex:
            errors.append(ReadError(ex.message, max(ex.line - 1, 0), max(ex.column - 1, 0)))
            break
        except MiniLispSyntaxError as ex:
            errors.append(ReadError(ex.message, max(ex.line - 1, 0), max(ex.column - 1, 0)))
    return errors


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))

    for i, (tok, start) in enumerate(tokens):
        if tok == '(':
            idx.paren_balance += 1
            # (def name value): name must be a plain symbol token
            if i + 2 < len(tokens) and tokens[i + 1][0] == "def":
                name, name_start = tokens[i + 2]
                if name in "()[]{}'" or name.startswith('"'):
                    continue
                is_fn = i + 4 < len(tokens) and tokens[i + 3][0] == '(' and tokens[i + 4][0] == "fn"
                line, col = _position_from_offset(text, name_start)
                idx.symbols[name] = SymbolDef(name=name, kind='function' if is_fn else 'var', line=line, col=col)
        elif tok == ')':
            idx.paren_balance -= 1

    idx.errors = collect_read_errors(text)
    return idx


# Signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "quote": "(quote x)",
    "if": "(if cond then [else])",
    "def": "(def name value)",
    "set!": "(set! name value)",
    "fn": "(fn (params ...) body ...)",
    "+": "(+ a b)",
    "load": "(load \"path\")",
    "true": "true",
    "false": "false",
}
