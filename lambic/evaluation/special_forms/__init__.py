"""Registry of special forms for the Lambic evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application, so
these keywords keep their meaning in head position even if a variable of the
same name is defined.
"""

from lambic.types.symbol import Symbol
from lambic.evaluation.special_forms.begin_form import begin_form
from lambic.evaluation.special_forms.cond_form import cond_form
from lambic.evaluation.special_forms.define_form import define_form
from lambic.evaluation.special_forms.if_form import if_form
from lambic.evaluation.special_forms.lambda_form import lambda_form
from lambic.evaluation.special_forms.let_forms import let_form, let_star_form, letrec_form
from lambic.evaluation.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("begin"): begin_form,
    Symbol("let"): let_form,
    Symbol("let*"): let_star_form,
    Symbol("letrec"): letrec_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("cond"): cond_form,
}
