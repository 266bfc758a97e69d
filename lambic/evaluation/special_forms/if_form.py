from lambic import EvaluatorFn
from lambic import SExpression, LispValue
from lambic.errors import MalformedForm
from lambic.types.environment import Environment
from lambic.types.symbol import NIL


def is_true(value: LispValue) -> bool:
    # Only #f is false; 0, nil and procedures are all true
    return value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise MalformedForm("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    if is_true(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return NIL
