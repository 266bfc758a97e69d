# Core type aliases for Lambic's data model.
# Source code is represented by Atom leaves and tuples of sub-expressions
# (see lambic.types.expression). Runtime values are plain Python numbers and
# bools, Symbols, and the procedure types in lambic.types.procedure.
#
# Naming guidance:
# - SExpression: Use in reader/evaluator code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias: an Atom or a tuple of forms
SExpression = Any

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"

from lambic.interpreter import Interpreter, evaluate, run  # noqa: E402
