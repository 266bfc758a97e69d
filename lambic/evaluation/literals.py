"""Interpretation of literal atoms.

Numbers are Python ints or floats, treated as one numeric kind. Booleans use
the #t / #f spellings. Everything else is a symbol.
"""

from __future__ import annotations

import re

from lambic import LispValue

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")

BOOLEAN_LITERALS = {
    "#t": True,
    "#true": True,
    "#f": False,
    "#false": False,
}

NOT_LITERAL = object()


def parse_literal(text: str) -> LispValue:
    """Return the value of a numeric or boolean literal, or NOT_LITERAL."""
    if text in BOOLEAN_LITERALS:
        return BOOLEAN_LITERALS[text]
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return NOT_LITERAL


def is_number(value: LispValue) -> bool:
    """True for ints and floats; bool is excluded even though it subclasses int."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
