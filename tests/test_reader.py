import pytest
from hypothesis import given, strategies as st

from minilisp.errors import MiniLispEOFError, MiniLispSyntaxError
from minilisp.reader.parser import EOF, Reader, parse_integer
from minilisp.reader.ports import FilePort, InputStack, StringPort
from minilisp.types.cons import Cons, to_list
from minilisp.types.symbol import Symbol, SymbolTable
from minilisp.types.values import INT_MAX, INT_MIN


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-5", -5),
        ("+7", 7),
        ("0", 0),
        ("-0", 0),
        ("010", 8),       # strtol base detection: leading zero is octal
        ("-017", -15),
        ("09", 0),        # longest octal prefix is "0"
        ("99999999999999999999", INT_MAX),
        ("-99999999999999999999", INT_MIN),
        ("  \t\n 42 ", 42),
    ]
)
def test_read_numbers(read, source, expected):
    assert read(source) == expected


@pytest.mark.parametrize("source", ["foo", "-", "+", "-foo", "+-3", "set!", "a.b", "<=>"])
def test_read_symbols(read, symbols, source):
    value = read(source)
    assert isinstance(value, Symbol)
    assert value is symbols.intern(source)


@pytest.mark.parametrize(
    "source, expected",
    [
        ('""', ""),
        ('"hello"', "hello"),
        ('"a (b) \'c\' [d]"', "a (b) 'c' [d]"),
        ('"two\nlines"', "two\nlines"),
        ('"back\\slash"', "back\\slash"),  # no escape processing
    ]
)
def test_read_strings(read, source, expected):
    assert read(source) == expected


def test_read_quote_shorthand(read, symbols):
    value = read("'foo")
    assert isinstance(value, Cons)
    assert to_list(value) == [symbols.intern("quote"), symbols.intern("foo")]


def test_read_lists(read, symbols):
    a, b = symbols.intern("a"), symbols.intern("b")
    assert read("()") is None
    assert to_list(read("(1 2 3)")) == [1, 2, 3]
    nested = read("((a) b \"s\" (1 (2)))")
    first, second, third, fourth = to_list(nested)
    assert to_list(first) == [a]
    assert second is b
    assert third == "s"
    assert fourth.car == 1
    assert to_list(fourth.cdr.car) == [2]


def test_read_list_without_spaces(read, symbols):
    value = read("(a'b\"c\"(d))")
    items = to_list(value)
    assert items[0] is symbols.intern("a")
    assert to_list(items[1]) == [symbols.intern("quote"), symbols.intern("b")]
    assert items[2] == "c"
    assert to_list(items[3]) == [symbols.intern("d")]


def test_number_ends_at_first_non_digit(symbols):
    reader = Reader.from_string("12abc", symbols)
    assert reader.read() == 12
    assert reader.read() is symbols.intern("abc")
    assert reader.read() is EOF


def test_symbol_stops_at_delimiters(symbols):
    reader = Reader.from_string("foo(bar)", symbols)
    assert reader.read() is symbols.intern("foo")
    assert to_list(reader.read()) == [symbols.intern("bar")]


def test_eof_is_a_result_not_an_exit(symbols):
    reader = Reader.from_string("  \n ", symbols)
    assert reader.read() is EOF
    assert reader.read() is EOF


def test_read_all(symbols):
    reader = Reader.from_string("1 two \"3\"", symbols)
    assert list(reader.read_all()) == [1, symbols.intern("two"), "3"]


@pytest.mark.parametrize("source", ["(1 2", '"open', "'", "(a (b)", "(\"x"])
def test_unexpected_eof(read, source):
    with pytest.raises(MiniLispEOFError):
        read(source)


@pytest.mark.parametrize("source", [")", "]", "[", "{", "}"])
def test_unexpected_delimiter(read, source):
    with pytest.raises(MiniLispSyntaxError):
        read(source)


def test_syntax_error_resynchronizes_on_next_line(symbols):
    reader = Reader.from_string("(def x 1)\n(oops ] x)\n42\n'y\n", symbols, name="demo.lisp")
    assert to_list(reader.read())[2] == 1
    with pytest.raises(MiniLispSyntaxError) as info:
        reader.read()
    assert info.value.source == "demo.lisp"
    assert info.value.line == 2
    assert info.value.column == 7
    assert reader.read() == 42
    assert to_list(reader.read())[1] is symbols.intern("y")
    assert reader.read() is EOF


def test_syntax_error_discards_rest_of_enclosing_form(symbols):
    reader = Reader.from_string("(def x (+ 1 ]\n  (+ 40 2)))\n7\n", symbols)
    with pytest.raises(MiniLispSyntaxError) as info:
        reader.read()
    assert (info.value.line, info.value.column) == (1, 13)
    assert reader.read() == 7
    assert reader.read() is EOF


def test_syntax_error_resync_ignores_parens_in_strings(symbols):
    reader = Reader.from_string('(a ] ")(" b)\n1\n', symbols)
    with pytest.raises(MiniLispSyntaxError):
        reader.read()
    assert reader.read() == 1


def test_reader_recovers_after_error_inside_nested_list(symbols):
    reader = Reader.from_string("((x }))\n(y)\n", symbols)
    with pytest.raises(MiniLispSyntaxError):
        reader.read()
    assert reader._depth == 0
    assert to_list(reader.read()) == [symbols.intern("y")]


def test_undecodable_file_is_dropped(tmp_path, symbols):
    bad = tmp_path / "bad.lisp"
    bad.write_bytes(b'(def s "\xff\xfe")\n')
    reader = Reader(InputStack(FilePort.open(bad), StringPort("after")), symbols)
    with pytest.raises(MiniLispSyntaxError) as info:
        reader.read()
    assert info.value.source == str(bad)
    assert "decode" in info.value.message
    assert reader.read() is symbols.intern("after")
    assert reader.read() is EOF


def test_syntax_error_on_last_line_without_newline(symbols):
    reader = Reader.from_string("1 } 2", symbols)
    assert reader.read() == 1
    with pytest.raises(MiniLispSyntaxError):
        reader.read()
    assert reader.read() is EOF


def test_reading_continues_into_pushed_port(symbols):
    reader = Reader.from_string("x y", symbols)
    assert reader.read() is symbols.intern("x")
    reader.ports.push(StringPort("(1 2)"))
    assert to_list(reader.read()) == [1, 2]
    assert reader.read() is symbols.intern("y")


@pytest.mark.parametrize(
    "token, expected",
    [("5", 5), ("-5", -5), ("+05", 5), ("0777", 511), ("0", 0), ("00", 0)],
)
def test_parse_integer(token, expected):
    assert parse_integer(token) == expected


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_printed_integers_read_back(n):
    assert Reader.from_string(str(n), SymbolTable()).read() == n


symbol_strat = st.text(
    st.characters(categories=("Ll", "Lu"), include_characters="-_!?*<>="),
    min_size=1,
    max_size=10,
).filter(lambda s: s[0] not in "-")


@given(symbol_strat)
def test_symbols_read_back_interned(name):
    table = SymbolTable()
    assert Reader.from_string(name, table).read() is table.intern(name)


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=20))
def test_lists_keep_element_order(items):
    source = "(" + " ".join(map(str, items)) + ")"
    assert to_list(Reader.from_string(source, SymbolTable()).read()) == items
