from lambic import EvaluatorFn
from lambic import SExpression, LispValue
from lambic.errors import MalformedForm
from lambic.evaluation.special_forms.syntax import body_of, parse_formals
from lambic.types.environment import Environment
from lambic.types.procedure import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...) with one or more body forms; several forms
    # are an implicit begin. The closure captures env itself, not a copy.
    if not tail:
        raise MalformedForm("lambda requires a parameter list and a body")

    formals = parse_formals(tail[0], "lambda")
    body = body_of(tail[1:], "lambda")
    return Lambda(formals, body, env)
