"""Special forms: let, let* and letrec.

All three allocate exactly one new frame chained to the evaluation-site
environment and bind only into that frame, so an outer binding of the same
name is shadowed, never modified. They differ in where the value
expressions are evaluated:

- let:    every value in the outer environment (parallel binding)
- let*:   each value in the new frame, after the bindings before it
- letrec: each value in the new frame, with every name already declared
"""

from lambic import EvaluatorFn
from lambic import SExpression, LispValue
from lambic.errors import MalformedForm
from lambic.evaluation.special_forms.syntax import body_of, parse_bindings
from lambic.types.environment import Environment, UNASSIGNED
from lambic.types.procedure import Lambda


def _split(tail: list[SExpression], form_name: str) -> tuple[SExpression, SExpression]:
    if not tail:
        raise MalformedForm(f"{form_name} requires a binding list and a body")
    return tail[0], body_of(tail[1:], form_name)


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    spec, body = _split(tail, "let")
    bindings = parse_bindings(spec, "let")
    values = [evaluate_fn(expr, env) for _, expr in bindings]
    frame = env.fork()
    for (name, _), value in zip(bindings, values):
        frame.bind(name, value)
    return evaluate_fn(body, frame)


def let_star_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    spec, body = _split(tail, "let*")
    frame = env.fork()
    for name, expr in parse_bindings(spec, "let*", allow_duplicates=True):
        frame.bind(name, evaluate_fn(expr, frame))
    return evaluate_fn(body, frame)


def letrec_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    spec, body = _split(tail, "letrec")
    bindings = parse_bindings(spec, "letrec")
    frame = env.fork()
    for name, _ in bindings:
        frame.bind(name, UNASSIGNED)
    for name, expr in bindings:
        value = evaluate_fn(expr, frame)
        if isinstance(value, Lambda) and value.name is None and value.env is frame:
            value.name = str(name)
        frame.bind(name, value)
    return evaluate_fn(body, frame)
