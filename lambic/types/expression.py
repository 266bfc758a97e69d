"""Immutable expression tree produced by the reader.

An expression is either an Atom, holding the source text of a symbol or a
numeric/boolean literal, or a tuple of expressions. Tuples keep the tree
immutable, so a lambda body can be shared by every call that evaluates it.
"""

from __future__ import annotations

from typing import Union


class Atom:
    """A leaf token: symbol, numeric literal or boolean literal, as text."""

    __slots__ = ("text",)

    def __init__(self, text: str):
        if not text:
            raise ValueError("Atom text must be non-empty")
        object.__setattr__(self, "text", text)

    def __setattr__(self, key, value):
        raise AttributeError("Atom is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.text == other.text

    def __hash__(self) -> int:
        return hash(("Atom", self.text))

    def __repr__(self):
        return f"Atom({self.text!r})"

    def __str__(self):
        return self.text


Expression = Union[Atom, tuple]


def to_source(expr: Expression) -> str:
    """Render an expression back to source text the reader accepts."""
    if isinstance(expr, Atom):
        return expr.text
    if isinstance(expr, tuple):
        return "(" + " ".join(to_source(e) for e in expr) + ")"
    raise TypeError(f"Not an expression: {expr!r}")
