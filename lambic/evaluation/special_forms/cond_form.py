from lambic import EvaluatorFn
from lambic import SExpression, LispValue
from lambic.errors import MalformedForm
from lambic.evaluation.special_forms.if_form import is_true
from lambic.evaluation.special_forms.syntax import describe
from lambic.types.environment import Environment
from lambic.types.expression import Atom
from lambic.types.symbol import NIL

ELSE = Atom("else")


def cond_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate a (cond (test expr...) ... (else expr...)).

    For each clause in order:
    - Evaluate test; if it is not #f, evaluate the clause body sequentially
      and return the last value. If the clause has only the test, return the
      test's value.
    - An else clause must come last and is taken without a test.
    If no clause matches, return nil.
    """
    for idx, clause in enumerate(tail):
        if not isinstance(clause, tuple) or len(clause) == 0:
            raise MalformedForm(f"cond clause must be a non-empty list, got {describe(clause)}")
        test, *body = clause

        if test == ELSE:
            if idx != len(tail) - 1:
                raise MalformedForm("cond: else clause must be last")
            if not body:
                raise MalformedForm("cond: else clause requires a body")
        else:
            test_val = evaluate_fn(test, env)
            if not is_true(test_val):
                continue
            if not body:
                return test_val

        result: LispValue = NIL
        for expr in body:
            result = evaluate_fn(expr, env)
        return result

    return NIL
