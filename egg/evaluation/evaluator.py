"""Core tree-walking evaluator for the Egg interpreter."""

from __future__ import annotations

from egg import EggValue
from egg.types.environment import Environment
from egg.types.expression import Application, Expression, Literal, Word
from egg.evaluation.apply import apply, require_function
from egg.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: Expression, env: Environment) -> EggValue:
    """Evaluate `expr` in `env`.

    Applications whose operator is a Word naming a special form receive their
    raw argument expressions; everything else is applied strictly, arguments
    evaluated left to right.
    """
    match expr:
        case Literal(value=value):
            return value

        case Word(name=name):
            return env.lookup(name)

        case Application(operator=Word(name=name), args=args) if name in SPECIAL_FORMS:
            return SPECIAL_FORMS[name](args, env, evaluate)

        case Application(operator=operator, args=args):
            head = require_function(evaluate(operator, env))
            values = [evaluate(arg, env) for arg in args]
            return apply(head, values, evaluate)

    raise TypeError(f"Not an Egg expression: {expr!r}")
