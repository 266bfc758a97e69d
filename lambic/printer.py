"""Rendering of runtime values as Lisp text."""

from __future__ import annotations

from lambic import LispValue
from lambic.types.environment import UNASSIGNED
from lambic.types.procedure import Builtin, Lambda
from lambic.types.symbol import Symbol


def to_string(value: LispValue) -> str:
    if value is True:
        return "#t"
    if value is False:
        return "#f"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, Lambda):
        params = " ".join(str(f) for f in value.formals)
        if value.name:
            return f"#<lambda {value.name} ({params})>"
        return f"#<lambda ({params})>"
    if isinstance(value, Builtin):
        return f"#<builtin {value.name}>"
    if value is UNASSIGNED:
        return repr(value)
    return f"#<python {value!r}>"
