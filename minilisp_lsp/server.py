from __future__ import annotations

"""
A minimal pygls-based Language Server for minilisp.

Features:
- Text synchronization and document store
- Diagnostics: reader syntax errors, unmatched parens
- Hover: special forms, builtins and locally defined symbols
- Completion: special forms, builtins, locals
- Document Symbols: from indexer

Note: We avoid evaluating the buffer. We build a static index per document.
"""

from typing import Dict, Optional, List
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from minilisp import __version__
from minilisp_lsp.indexer import build_index, BUILTIN_SIGNATURES, DocumentIndex


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class MiniLispLanguageServer(LanguageServer):
    CMD_NAME = "minilisp-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, __version__)
        self.documents: Dict[str, DocumentState] = {}


ls = MiniLispLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    ls.publish_diagnostics(uri, build_diagnostics(idx))


# --- Diagnostics ---
def _mk_range(line: int, col: int) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + 1))


def build_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = [
        Diagnostic(
            range=_mk_range(err.line, err.col),
            message=err.message,
            severity=DiagnosticSeverity.Error,
            source=MiniLispLanguageServer.CMD_NAME,
        )
        for err in idx.errors
    ]
    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=_mk_range(0, 0),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=MiniLispLanguageServer.CMD_NAME,
            )
        )
    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = extract_word_at(state.text, params.position.line, params.position.character)
    contents = describe(word, state.index) if word else None
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def describe(word: str, idx: DocumentIndex) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    sdef = idx.symbols.get(word)
    if sdef is not None:
        return f"{word}: {sdef.kind} (defined at {sdef.line + 1}:{sdef.col + 1})"
    return None


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    items: List[CompletionItem] = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    if state:
        for name, sdef in state.index.symbols.items():
            kind = CompletionItemKind.Function if sdef.kind == 'function' else CompletionItemKind.Variable
            items.append(CompletionItem(label=name, kind=kind))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = Range(
            start=Position(line=sdef.line, character=sdef.col),
            end=Position(line=sdef.line, character=sdef.col + len(name)),
        )
        symbols.append(
            DocumentSymbol(
                name=name,
                kind=SymbolKind.Function if sdef.kind == 'function' else SymbolKind.Variable,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
_WORD_BREAKS = " \t\r\n()[]{}'\""


def extract_word_at(text: str, line: int, character: int) -> Optional[str]:
    lines = text.splitlines(True)
    if line >= len(lines):
        return None
    line_text = lines[line]
    start = min(character, len(line_text))
    while start > 0 and line_text[start - 1] not in _WORD_BREAKS:
        start -= 1
    end = start
    while end < len(line_text) and line_text[end] not in _WORD_BREAKS:
        end += 1
    word = line_text[start:end]
    return word or None


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
