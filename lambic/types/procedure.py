"""Procedure values: user closures and built-in primitives."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from lambic import SExpression, LispValue
from lambic.errors import ArityError
from lambic.types.environment import Environment
from lambic.types.expression import to_source
from lambic.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: tuple[Symbol, ...],
        body: SExpression,
        env: Environment,
        name: str | None = None,
    ):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: SExpression = body
        # Held by reference: later defines into env are visible to the body
        self.env: Environment = env
        self.name = name

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(lambda (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Lambda({self.name or 'anonymous'}, formals={list(map(str, self.formals))})"

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment, chained to the closure env, for the body.
        """
        if len(args) != len(self.formals):
            raise ArityError(
                f"{self.name or 'lambda'} expects {len(self.formals)} "
                f"argument{'s' if len(self.formals) != 1 else ''}, got {len(args)}"
            )
        new_env = self.env.fork()
        for formal, arg in zip(self.formals, args):
            new_env.bind(formal, arg)
        return new_env


class Builtin:
    """A primitive procedure implemented in Python as fn(env, args)."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[Environment, list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, env: Environment, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __repr__(self) -> str:
        return f"Builtin({self.name!r})"
