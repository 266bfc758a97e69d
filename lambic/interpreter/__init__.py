from __future__ import annotations

import logging
import sys
from typing import Callable

from lambic import SExpression, LispValue
from lambic.builtins import standard_environment
from lambic.config import get_recursion_limit
from lambic.errors import LambicError, RecursionDepthExceeded
from lambic.evaluation.evaluator import evaluate as evaluate_expression
from lambic.reader.parser import lex, TokenStream
from lambic.types.environment import Environment
from lambic.types.procedure import Builtin
from lambic.types.symbol import NIL, Symbol

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment | None = None) -> LispValue:
    """Evaluate one expression against `env`, or a fresh standard environment.

    Host stack exhaustion is reported as RecursionDepthExceeded; the
    environment is left as it was at the point of failure.
    """
    if env is None:
        env = standard_environment()
    try:
        return evaluate_expression(expr, env)
    except RecursionError as ex:
        raise RecursionDepthExceeded(
            f"Maximum recursion depth exceeded (limit {sys.getrecursionlimit()})"
        ) from ex


def _apply_recursion_limit() -> None:
    limit = get_recursion_limit()
    if limit is not None and limit > sys.getrecursionlimit():
        logger.debug("Raising host recursion limit to %d", limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Orchestrates reading and evaluating Lambic code.
    Maintains a root Environment across calls, so definitions persist.
    """

    def __init__(self, prelude: str | None = None, env: Environment | None = None):
        _apply_recursion_limit()
        if env is None:
            env = standard_environment()
        self.env: Environment = env

        if prelude:
            self.eval_prelude(prelude)

    def define(self, name: str, value: LispValue | Callable) -> None:
        """Extend the root frame; plain Python callables become built-ins."""
        if callable(value) and not isinstance(value, Builtin):
            value = Builtin(name, value)
        self.env.define(Symbol(name), value)

    def eval_prelude(self, code: str) -> None:
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            self.eval_expr(expr)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value."""
        stream = TokenStream(lex(code))
        result: LispValue = NIL
        while (expr := stream.parse_expr()) is not None:
            result = self.eval_expr(expr)
        return result

    def eval_expr(self, expr: SExpression) -> LispValue:
        """Evaluate one already-read expression in the root environment."""
        logger.debug("Evaluating %r", expr)
        try:
            return evaluate(expr, self.env)
        except LambicError as ex:
            logger.debug("Evaluation failed: %s: %s", type(ex).__name__, ex)
            raise


def run(code: str) -> LispValue:
    """Evaluate `code` in a fresh interpreter and return the last value."""
    return Interpreter().eval(code)
