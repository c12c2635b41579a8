import pytest

from minilisp_lsp.indexer import BUILTIN_SIGNATURES, build_index, collect_read_errors


def test_index_definitions():
    idx = build_index("(def x 1)\n(def f (fn (a) a))\n")
    assert set(idx.symbols) == {"x", "f"}
    assert (idx.symbols["x"].kind, idx.symbols["x"].line, idx.symbols["x"].col) == ("var", 0, 5)
    assert (idx.symbols["f"].kind, idx.symbols["f"].line, idx.symbols["f"].col) == ("function", 1, 5)
    assert idx.errors == []
    assert idx.paren_balance == 0


def test_index_ignores_non_symbol_names():
    idx = build_index('(def "x" 1)\n(def (y) 2)\n')
    assert idx.symbols == {}


def test_syntax_errors_become_read_errors():
    idx = build_index("(def x ]\n(def y 2)\n")
    assert len(idx.errors) == 1
    err = idx.errors[0]
    assert (err.line, err.col) == (0, 7)
    assert "unexpected" in err.message
    assert "y" in idx.symbols


def test_unterminated_form():
    idx = build_index("(def x (fn (a)")
    assert idx.paren_balance == 2
    assert len(idx.errors) == 1
    assert "end of input" in idx.errors[0].message


@pytest.mark.parametrize("text", ["", "   ", "(", ")", '"', "'", "]]]", "(def"])
def test_indexer_never_raises(text):
    build_index(text)


def test_collect_read_errors_counts_each_bad_line():
    errors = collect_read_errors("]\n}\n(ok)\n)\n")
    assert [e.line for e in errors] == [0, 1, 3]


def test_signatures_cover_language():
    for name in ("quote", "if", "def", "set!", "fn", "+", "load"):
        assert name in BUILTIN_SIGNATURES
