"""Symbols: the names bound in environment frames.

A Symbol is created from an atom's text when the evaluator looks a name up
or binds it. Names are interned, so two Symbols spelled the same compare
and hash like the shared string. A Symbol never equals the plain string or
the Atom it was made from.
"""
from __future__ import annotations

import sys


class Symbol:
    """An interned, immutable variable name."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        object.__setattr__(self, "name", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


# Unit result of define, and of an if with no else branch. The root
# frame binds it to itself so source can write `nil`.
NIL = Symbol("nil")
