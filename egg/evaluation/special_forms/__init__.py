"""Registry of special forms for the Egg evaluator.

Maps operator names to handler functions that receive their argument
expressions unevaluated. The evaluator consults this table before ordinary
function application. The table is built once at import and is read-only.
"""

from types import MappingProxyType

from egg.evaluation.special_forms.if_form import if_form
from egg.evaluation.special_forms.while_form import while_form
from egg.evaluation.special_forms.do_form import do_form
from egg.evaluation.special_forms.define_form import define_form
from egg.evaluation.special_forms.set_form import set_form
from egg.evaluation.special_forms.fun_form import fun_form

SPECIAL_FORMS = MappingProxyType({
    "if": if_form,
    "while": while_form,
    "do": do_form,
    "define": define_form,
    "set": set_form,
    "fun": fun_form,
})
