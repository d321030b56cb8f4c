"""Registry of special forms for the owo evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table after the binary operators and before
ordinary function application.
"""

from owo.types.symbol import Symbol
from owo.evaluation.special_forms.define_form import define_form
from owo.evaluation.special_forms.if_form import if_form
from owo.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
}
