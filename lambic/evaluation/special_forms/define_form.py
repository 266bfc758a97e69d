from lambic import EvaluatorFn
from lambic import SExpression, LispValue
from lambic.errors import InvalidBindingForm
from lambic.evaluation.special_forms.syntax import as_symbol, body_of, describe, parse_formals
from lambic.types.environment import Environment
from lambic.types.procedure import Lambda
from lambic.types.symbol import NIL
from lambic.types.expression import Atom

LAMBDA = Atom("lambda")


def _is_lambda_expression(expr: SExpression) -> bool:
    return isinstance(expr, tuple) and len(expr) > 0 and expr[0] == LAMBDA


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    (define (name params...) body...)  ; sugar for (define name (lambda (params...) body...))

    The binding goes into the current frame only: an existing slot there is
    overwritten, otherwise a new one shadows any outer binding.
    """
    if not tail:
        raise InvalidBindingForm("define requires a name and a value")

    target = tail[0]
    if isinstance(target, tuple):
        if not target:
            raise InvalidBindingForm("define: procedure header () has no name")
        name = as_symbol(target[0], "define procedure name")
        formals = parse_formals(target[1:], "define")
        body = body_of(tail[1:], f"define {name}")
        value = Lambda(formals, body, env, name=str(name))
    else:
        if len(tail) != 2:
            raise InvalidBindingForm(
                f"define requires exactly a name and one value, got {describe((*tail,))}"
            )
        name = as_symbol(target, "define name")
        value = evaluate_fn(tail[1], env)
        if isinstance(value, Lambda) and _is_lambda_expression(tail[1]):
            # Freshly built by this define, so nothing else can see it yet
            value.name = str(name)

    env.define(name, value)
    return NIL
