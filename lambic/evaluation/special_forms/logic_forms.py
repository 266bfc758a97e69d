from lambic import EvaluatorFn
from lambic import SExpression, LispValue
from lambic.evaluation.special_forms.if_form import is_true
from lambic.types.environment import Environment


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately. If all operands are true, returns the value
    of the last operand. With zero operands, returns #t.
    """
    result: LispValue = True
    for expr in tail:
        result = evaluate_fn(expr, env)
        if not is_true(result):
            return False
    return result


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If there is none, returns #f.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if is_true(val):
            return val
    return False
