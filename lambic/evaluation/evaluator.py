"""Core evaluator for the Lambic interpreter.

Direct recursive evaluation: each sub-expression is evaluated by a nested
call, so Lisp recursion depth is host recursion depth. There is no
trampoline and no tail-call elimination.
"""

from __future__ import annotations

from lambic import SExpression, LispValue
from lambic.errors import LambicTypeError, MalformedForm
from lambic.evaluation.apply import apply
from lambic.evaluation.literals import NOT_LITERAL, parse_literal
from lambic.evaluation.special_forms import SPECIAL_FORMS
from lambic.types.environment import Environment
from lambic.types.expression import Atom
from lambic.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case Atom(text=text):
            # Literals never touch the environment
            value = parse_literal(text)
            if value is not NOT_LITERAL:
                return value
            return env.lookup(Symbol(text))

        case ():
            raise MalformedForm("Cannot evaluate an empty application ()")

        case (Atom(text=keyword), *tail) if Symbol(keyword) in SPECIAL_FORMS:
            return SPECIAL_FORMS[Symbol(keyword)](tail, env, evaluate)

        case (head, *tail):
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail]
            return apply(fn, args, env, evaluate)

    raise LambicTypeError(f"Cannot evaluate {expr!r}: not an expression")
