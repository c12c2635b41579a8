from minilisp.types.symbol import Symbol, SymbolTable


def test_intern_returns_identical_symbol(symbols):
    a = symbols.intern("foo")
    b = symbols.intern("foo")
    assert a is b
    assert a.name == "foo"


def test_intern_distinct_names(symbols):
    assert symbols.intern("foo") is not symbols.intern("bar")
    assert len(symbols) == 2


def test_intern_is_order_independent(symbols):
    names = ["c", "a", "b", "a", "c"]
    first = {n: symbols.intern(n) for n in names}
    for n in reversed(names):
        assert symbols.intern(n) is first[n]


def test_symbols_compare_by_identity():
    # Same text, different tables: not the same symbol
    assert SymbolTable().intern("x") != SymbolTable().intern("x")
    assert Symbol("x") != Symbol("x")


def test_contains_and_iter(symbols):
    s = symbols.intern("quote")
    assert "quote" in symbols
    assert "if" not in symbols
    assert list(symbols) == [s]


def test_context_interns_special_forms(ctx):
    for name in ("quote", "if", "def", "set!", "fn", "true", "false", "+", "load"):
        assert name in ctx.symbols
    assert set(ctx.special_forms) == {ctx.intern(n) for n in ("quote", "if", "def", "set!", "fn")}
