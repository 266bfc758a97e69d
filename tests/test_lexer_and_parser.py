import pytest
from hypothesis import given, strategies as st

from lambic.errors import ParseError
from lambic.reader.parser import lex, read, read_all, TokenStream
from lambic.types.expression import Atom, to_source


def _kinds(source):
    return [(t.kind, t.text) for t in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ("(+ 1 -2.5)", [("lparen", "("), ("symbol", "+"), ("symbol", "1"), ("symbol", "-2.5"), ("rparen", ")")]),
        ("let*", [("symbol", "let*")]),
        ("#t #f", [("symbol", "#t"), ("symbol", "#f")]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("a;trailing\nb", [("symbol", "a"), ("symbol", "b")]),
        ("#| block |# x", [("symbol", "x")]),
        ("#| outer #| inner |# still |# y", [("symbol", "y")]),
        ("((", [("lparen", "("), ("lparen", "(")]),
    ]
)
def test_lexer_basic(source, expected):
    assert _kinds(source) == expected


def test_lexer_positions():
    tokens = list(lex("  (foo\n bar)"))
    assert [t.position for t in tokens] == [2, 3, 8, 11]


@pytest.mark.parametrize(
    "source",
    [
        "",             # empty string
        "    ",         # spaces only
        "; comment",    # comment only
        "#| multi-line \n comment |#",  # multiline comment
    ]
)
def test_lexer_edge_cases_no_tokens(source):
    assert list(lex(source)) == []


def test_lexer_unterminated_block_comment():
    with pytest.raises(ParseError) as info:
        list(lex("a #| never closed"))
    assert info.value.position == 2
    assert info.value.incomplete


@pytest.mark.parametrize(
    "source, expected",
    [
        ("x", Atom("x")),
        ("123", Atom("123")),
        ("-45", Atom("-45")),
        ("3.14", Atom("3.14")),
        ("#t", Atom("#t")),
        ("()", ()),
        ("(a b c)", (Atom("a"), Atom("b"), Atom("c"))),
        ("((a b) (c d))", ((Atom("a"), Atom("b")), (Atom("c"), Atom("d")))),
        ("(define (f x) (* x x))",
         (Atom("define"), (Atom("f"), Atom("x")), (Atom("*"), Atom("x"), Atom("x")))),
    ]
)
def test_parser(source, expected):
    assert read(source) == expected


def test_parser_yields_immutable_tuples():
    expr = read("(a (b c))")
    assert isinstance(expr, tuple)
    assert isinstance(expr[1], tuple)
    with pytest.raises(AttributeError):
        expr[0].text = "z"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("λ", Atom("λ")),
        ("(日本語 résumé)", (Atom("日本語"), Atom("résumé"))),
        ("(🎉 👩‍💻)", (Atom("🎉"), Atom("👩‍💻"))),
        ("(привет мир)", (Atom("привет"), Atom("мир"))),
    ]
)
def test_parser_unicode_atoms(source, expected):
    assert read(source) == expected


def test_token_stream_parse_all():
    stream = TokenStream(lex("a (b) c"))
    assert list(stream.parse_all()) == [Atom("a"), (Atom("b"),), Atom("c")]


def test_token_stream_returns_none_at_end():
    stream = TokenStream(lex("x"))
    assert stream.parse_expr() == Atom("x")
    assert stream.parse_expr() is None


def test_read_all():
    assert read_all("") == []
    assert read_all("1 ; one\n(2) 3") == [Atom("1"), (Atom("2"),), Atom("3")]


@pytest.mark.parametrize(
    "source, position, incomplete",
    [
        ("", 0, False),
        ("   ; nothing here", 0, False),
        ("(a", 0, True),
        ("(a (b c)", 0, True),
        ("  (a (b", 5, True),
        (")", 0, False),
        ("(a))", 3, False),
        ("a b", 2, False),
    ]
)
def test_read_errors(source, position, incomplete):
    with pytest.raises(ParseError) as info:
        read(source)
    assert info.value.position == position
    assert info.value.incomplete is incomplete


def test_read_all_unmatched_close():
    with pytest.raises(ParseError):
        read_all("(a) b)")


def test_to_source():
    assert to_source(Atom("x")) == "x"
    assert to_source(()) == "()"
    assert to_source((Atom("+"), Atom("1"), (Atom("f"),))) == "(+ 1 (f))"


def test_to_source_rejects_non_expressions():
    with pytest.raises(TypeError):
        to_source([Atom("x")])


def test_reparse_ignores_whitespace_and_comments():
    source = """
        (define (f x)   ; square
           (* x
              x))
    """
    expr = read(source)
    assert to_source(expr) == "(define (f x) (* x x))"
    assert read(to_source(expr)) == expr


# -------------------------------
# Strategies
# -------------------------------
atom_strat = st.text(
    st.characters(blacklist_categories=("Cs", "Cc", "Zs", "Zl", "Zp"),
                  blacklist_characters="();#"),
    min_size=1, max_size=8,
).map(Atom)

expr_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=4).map(tuple),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(expr_strat)
def test_read_is_left_inverse_of_to_source(expr):
    assert read(to_source(expr)) == expr


@given(expr_strat)
def test_reparse_is_stable(expr):
    once = read(to_source(expr))
    twice = read(to_source(once))
    assert once == twice


def test_deep_nesting_is_read():
    depth = 5000
    expr = read("(" * depth + "x" + ")" * depth)
    for _ in range(depth):
        assert isinstance(expr, tuple) and len(expr) == 1
        expr = expr[0]
    assert expr == Atom("x")


def test_deep_unmatched_open_reports_innermost():
    with pytest.raises(ParseError) as info:
        read("(" * 5000)
    assert info.value.position == 4999
    assert info.value.incomplete
