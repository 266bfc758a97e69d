"""Built-in procedures for the Lambic root environment.

This module defines arithmetic, comparison and predicate primitives and the
registration helpers that install them. Every primitive receives
(env, args) with already-evaluated arguments.
"""
from __future__ import annotations

import functools
import operator
from typing import Callable

from lambic import LispValue
from lambic.errors import ArityError, DivisionByZero, LambicTypeError, NumericOverflow
from lambic.evaluation.literals import is_number
from lambic.printer import to_string
from lambic.types.environment import Environment
from lambic.types.procedure import Builtin, Lambda
from lambic.types.symbol import NIL, Symbol


# -------------------------------
# Argument checks
# -------------------------------
def _check_arity(name: str, args: list[LispValue], minimum: int, maximum: int | None = None) -> None:
    n = len(args)
    if maximum is not None and minimum == maximum and n != minimum:
        raise ArityError(f"{name} requires exactly {minimum} argument{'s' if minimum != 1 else ''}, got {n}")
    if n < minimum:
        raise ArityError(f"{name} requires at least {minimum} argument{'s' if minimum != 1 else ''}, got {n}")
    if maximum is not None and n > maximum:
        raise ArityError(f"{name} accepts at most {maximum} arguments, got {n}")


def _check_numbers(name: str, args: list[LispValue]) -> None:
    for arg in args:
        if not is_number(arg):
            raise LambicTypeError(f"All arguments to {name} must be numbers, got {to_string(arg)}")


def _check_integers(name: str, args: list[LispValue]) -> None:
    for arg in args:
        if not isinstance(arg, int) or isinstance(arg, bool):
            raise LambicTypeError(f"All arguments to {name} must be integers, got {to_string(arg)}")


def _overflow_checked(name: str):
    """Report ints too large for float arithmetic as NumericOverflow."""
    def decorator(fn):
        @functools.wraps(fn)
        def primitive(env: Environment, args: list[LispValue]) -> LispValue:
            try:
                return fn(env, args)
            except OverflowError as ex:
                raise NumericOverflow(f"{name}: {ex}") from ex
        return primitive
    return decorator


# -------------------------------
# Arithmetic
# -------------------------------
@_overflow_checked("+")
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments; (+) is 0."""
    _check_numbers("+", args)
    return sum(args)


@_overflow_checked("-")
def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _check_arity("-", args, 1)
    _check_numbers("-", args)
    if len(args) == 1:
        return -args[0]
    return functools.reduce(operator.sub, args)


@_overflow_checked("*")
def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the product of all arguments; (*) is 1."""
    _check_numbers("*", args)
    return functools.reduce(operator.mul, args, 1)


@_overflow_checked("/")
def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide the first argument by each of the rest; reciprocal for one arg.

    Exact integer quotients stay ints, so (/ 12 3) is 4 at any magnitude.
    """
    _check_arity("/", args, 1)
    _check_numbers("/", args)
    if len(args) == 1:
        args = [1, *args]
    result = args[0]
    for x in args[1:]:
        if x == 0:
            raise DivisionByZero("Division by zero")
        if isinstance(result, int) and isinstance(x, int) and result % x == 0:
            result = result // x
        else:
            result = result / x
    return result


def _integer_division(name: str, fn: Callable[[int, int], int]) -> Callable[[Environment, list[LispValue]], int]:
    def primitive(env: Environment, args: list[LispValue]) -> int:
        _check_arity(name, args, 2, 2)
        _check_integers(name, args)
        if args[1] == 0:
            raise DivisionByZero(f"{name}: division by zero")
        return fn(args[0], args[1])
    return primitive


def _truncating_quotient(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


quotient = _integer_division("quotient", _truncating_quotient)
remainder = _integer_division("remainder", lambda a, b: a - b * _truncating_quotient(a, b))
modulo = _integer_division("modulo", operator.mod)


def abs_(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("abs", args, 1, 1)
    _check_numbers("abs", args)
    return abs(args[0])


def min_(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("min", args, 1)
    _check_numbers("min", args)
    return min(args)


def max_(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("max", args, 1)
    _check_numbers("max", args)
    return max(args)


# -------------------------------
# Comparison
# -------------------------------
def _comparison(name: str, op: Callable[[LispValue, LispValue], bool]) -> Callable[[Environment, list[LispValue]], bool]:
    def primitive(env: Environment, args: list[LispValue]) -> bool:
        _check_arity(name, args, 2, 2)
        _check_numbers(name, args)
        return op(args[0], args[1])
    primitive.__doc__ = f"({name} a b) on two numbers."
    return primitive


num_eq = _comparison("=", operator.eq)
lt = _comparison("<", operator.lt)
gt = _comparison(">", operator.gt)
lte = _comparison("<=", operator.le)
gte = _comparison(">=", operator.ge)


# -------------------------------
# Predicates
# -------------------------------
def logical_not(env: Environment, args: list[LispValue]) -> bool:
    """#t if the single argument is #f, else #f."""
    _check_arity("not", args, 1, 1)
    return args[0] is False


def is_eq(env: Environment, args: list[LispValue]) -> bool:
    """Same kind and same value; procedures compare by identity."""
    _check_arity("eq?", args, 2, 2)
    a, b = args
    if isinstance(a, (Lambda, Builtin)) or isinstance(b, (Lambda, Builtin)):
        return a is b
    if isinstance(a, bool) or isinstance(b, bool):
        return a is b
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def _predicate(name: str, test: Callable[[LispValue], bool]) -> Callable[[Environment, list[LispValue]], bool]:
    def primitive(env: Environment, args: list[LispValue]) -> bool:
        _check_arity(name, args, 1, 1)
        return test(args[0])
    return primitive


is_number_p = _predicate("number?", is_number)
is_boolean_p = _predicate("boolean?", lambda v: isinstance(v, bool))
is_symbol_p = _predicate("symbol?", lambda v: isinstance(v, Symbol))
is_procedure_p = _predicate("procedure?", lambda v: isinstance(v, (Lambda, Builtin)))


def is_zero(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("zero?", args, 1, 1)
    _check_numbers("zero?", args)
    return args[0] == 0


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": num_eq,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "quotient": quotient,
    "remainder": remainder,
    "modulo": modulo,
    "abs": abs_,
    "min": min_,
    "max": max_,
    "not": logical_not,
    "eq?": is_eq,
    "number?": is_number_p,
    "boolean?": is_boolean_p,
    "symbol?": is_symbol_p,
    "procedure?": is_procedure_p,
    "zero?": is_zero,
}


def register(env: Environment) -> None:
    """Install every built-in into `env` (normally a root frame)."""
    env.update({Symbol(name): Builtin(name, fn) for name, fn in BUILTINS.items()})
    env.define(NIL, NIL)


def standard_environment() -> Environment:
    """Return a fresh root frame with all built-ins installed."""
    env = Environment()
    register(env)
    return env
