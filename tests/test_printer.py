import pytest

from lambic.builtins import standard_environment
from lambic.printer import to_string
from lambic.types import NIL, Symbol, UNASSIGNED


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, "#t"),
        (False, "#f"),
        (42, "42"),
        (-3, "-3"),
        (2.5, "2.5"),
        (4.0, "4.0"),
        (NIL, "nil"),
        (Symbol("hello"), "hello"),
        (UNASSIGNED, "#<unassigned>"),
    ]
)
def test_to_string_scalars(value, expected):
    assert to_string(value) == expected


def test_to_string_procedures(run):
    assert to_string(run("(lambda (x y) x)")) == "#<lambda (x y)>"
    assert to_string(run("(lambda () 1)")) == "#<lambda ()>"
    run("(define (square x) (* x x))")
    assert to_string(run("square")) == "#<lambda square (x)>"
    run("(define cube (lambda (x) (* x x x)))")
    assert to_string(run("cube")) == "#<lambda cube (x)>"
    assert to_string(run("+")) == "#<builtin +>"


def test_alias_keeps_original_name(run):
    run("(define (square x) (* x x))")
    run("(define sq square)")
    assert to_string(run("sq")) == "#<lambda square (x)>"


def test_letrec_names_its_lambdas(run):
    assert to_string(run("(letrec ((loop (lambda (n) n))) loop)")) == "#<lambda loop (n)>"


def test_to_string_foreign_value():
    assert to_string(standard_environment).startswith("#<python ")
