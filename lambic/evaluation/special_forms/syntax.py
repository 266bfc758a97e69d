"""Shape checks shared by the special forms.

These helpers turn raw expression tuples into symbols, parameter lists and
binding lists, raising InvalidBindingForm / MalformedForm when the shape is
wrong. They never evaluate anything.
"""

from __future__ import annotations

from lambic import SExpression
from lambic.errors import InvalidBindingForm, MalformedForm
from lambic.evaluation.literals import NOT_LITERAL, parse_literal
from lambic.types.expression import Atom, to_source
from lambic.types.symbol import Symbol

BEGIN = Atom("begin")


def describe(expr: SExpression) -> str:
    try:
        return to_source(expr)
    except TypeError:
        return repr(expr)


def as_symbol(expr: SExpression, what: str) -> Symbol:
    """Return `expr` as a Symbol, or raise InvalidBindingForm."""
    if isinstance(expr, Atom) and parse_literal(expr.text) is NOT_LITERAL:
        return Symbol(expr.text)
    raise InvalidBindingForm(f"{what} must be a symbol, got {describe(expr)}")


def parse_formals(expr: SExpression, form_name: str) -> tuple[Symbol, ...]:
    """Parse a parameter list such as (a b c) into distinct Symbols."""
    if not isinstance(expr, tuple):
        raise InvalidBindingForm(
            f"{form_name}: parameter list must be a list, got {describe(expr)}"
        )
    formals = tuple(as_symbol(p, f"{form_name} parameter") for p in expr)
    if len(set(formals)) != len(formals):
        raise InvalidBindingForm(
            f"{form_name}: duplicate parameter in {describe(expr)}"
        )
    return formals


def parse_bindings(
    expr: SExpression, form_name: str, allow_duplicates: bool = False
) -> list[tuple[Symbol, SExpression]]:
    """Parse ((name value-expr) ...) into (Symbol, expression) pairs."""
    if not isinstance(expr, tuple):
        raise InvalidBindingForm(
            f"{form_name}: binding list must be a list, got {describe(expr)}"
        )
    bindings = []
    for binding in expr:
        if not isinstance(binding, tuple) or len(binding) != 2:
            raise InvalidBindingForm(
                f"{form_name}: each binding must be (name value), got {describe(binding)}"
            )
        name = as_symbol(binding[0], f"{form_name} binding name")
        bindings.append((name, binding[1]))
    if not allow_duplicates:
        names = [name for name, _ in bindings]
        if len(set(names)) != len(names):
            raise InvalidBindingForm(f"{form_name}: duplicate binding name in {describe(expr)}")
    return bindings


def body_of(forms: list[SExpression], form_name: str) -> SExpression:
    """Collapse one or more body forms into one expression (implicit begin)."""
    if not forms:
        raise MalformedForm(f"{form_name} requires at least one body expression")
    if len(forms) == 1:
        return forms[0]
    return (BEGIN, *forms)
