"""Registry of special forms for the Lisper evaluator.

Maps the reserved head Symbols to a shape test and a handler. The evaluator
consults this table before ordinary procedure application, and only when
the form's tail passes the shape test; a form of any other shape is applied
like a call to the head symbol. Each handler receives the form's tail
(unevaluated), the current EvalState and the evaluator function.
"""

from typing import Callable, NamedTuple

from lisper import LispValue, SExpression
from lisper.types.symbol import Symbol
from lisper.evaluation.special_forms.quote_form import quote_form, quote_shape
from lisper.evaluation.special_forms.let_form import let_form, let_shape
from lisper.evaluation.special_forms.cond_form import cond_form, cond_shape
from lisper.evaluation.special_forms.if_form import if_form, if_shape
from lisper.evaluation.special_forms.set_form import set_form, set_shape
from lisper.evaluation.special_forms.define_form import define_form, define_shape
from lisper.evaluation.special_forms.lambda_form import lambda_form, lambda_shape


class SpecialForm(NamedTuple):
    matches: Callable[[list[SExpression]], bool]
    handler: Callable[..., LispValue]


SPECIAL_FORMS = {
    Symbol("quote"): SpecialForm(quote_shape, quote_form),
    Symbol("let"): SpecialForm(let_shape, let_form),
    Symbol("cond"): SpecialForm(cond_shape, cond_form),
    Symbol("if"): SpecialForm(if_shape, if_form),
    Symbol("set!"): SpecialForm(set_shape, set_form),
    Symbol("define"): SpecialForm(define_shape, define_form),
    Symbol("lambda"): SpecialForm(lambda_shape, lambda_form),
}
