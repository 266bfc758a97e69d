"""Application engine for Lambic.

This module centralizes procedure application for the interpreter: user
lambdas get a fresh frame chained to their closure environment, built-ins
are called directly with the caller's environment and the argument values.
"""

from lambic import LispValue, EvaluatorFn
from lambic.errors import LambicTypeError
from lambic.printer import to_string
from lambic.types.environment import Environment
from lambic.types.procedure import Builtin, Lambda


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value.

    Forks the lambda's captured environment, binds the formals positionally
    (raising ArityError on a count mismatch) and evaluates the body there.
    This is the only call-entry point; recursion is ordinary re-entry.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Builtin; anything else is a type error."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif isinstance(head, Builtin):
        return head(env, args)
    else:
        raise LambicTypeError(f"Cannot apply non-procedure {to_string(head)}")
