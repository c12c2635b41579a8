"""Registry of special forms for the minilisp evaluator.

Maps keyword names to handler functions that implement non-standard
evaluation rules. Each RuntimeContext interns these names in its own symbol
table; the evaluator consults the resulting table, keyed by symbol identity,
before ordinary function application.
"""

from minilisp.types.symbol import Symbol, SymbolTable
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.if_form import if_form
from minilisp.evaluation.special_forms.define_form import define_form
from minilisp.evaluation.special_forms.set_form import set_form
from minilisp.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "def": define_form,
    "set!": set_form,
    "fn": fn_form,
}


def build_special_forms(symbols: SymbolTable) -> dict[Symbol, object]:
    return {symbols.intern(name): handler for name, handler in SPECIAL_FORMS.items()}
