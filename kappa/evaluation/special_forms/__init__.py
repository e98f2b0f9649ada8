"""Registry of special forms for the Kappa evaluator.

Maps Symbols to handlers that implement non-standard evaluation rules. Every
handler has the signature `(operands, env, k, evaluate_fn) -> TailCall`. The
evaluator consults this table before treating a list as an application.
"""

from kappa.types.symbol import Symbol
from kappa.evaluation.special_forms.progn_form import progn_form
from kappa.evaluation.special_forms.lambda_form import lambda_form
from kappa.evaluation.special_forms.define_form import define_form
from kappa.evaluation.special_forms.if_form import if_form
from kappa.evaluation.special_forms.primitive_forms import cons_form, add_form
from kappa.evaluation.special_forms.call_cc_form import call_cc_form

BEGIN = Symbol("begin")
LAMBDA = Symbol("lambda")

SPECIAL_FORMS = {
    BEGIN: progn_form,
    LAMBDA: lambda_form,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
    Symbol("cons"): cons_form,
    Symbol("+"): add_form,
    Symbol("call/cc"): call_cc_form,
    Symbol("call-with-current-continuation"): call_cc_form,
}
