from lambic.types.symbol import Symbol, NIL
from lambic.types.expression import Atom, Expression, to_source
from lambic.types.environment import Environment, UNASSIGNED
from lambic.types.procedure import Lambda, Builtin

__all__ = [
    "Symbol",
    "NIL",
    "Atom",
    "Expression",
    "to_source",
    "Environment",
    "UNASSIGNED",
    "Lambda",
    "Builtin",
]
