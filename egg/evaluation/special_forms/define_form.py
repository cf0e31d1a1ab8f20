from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word


def define_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    define(name, value)
    Always binds in the innermost environment, shadowing rather than
    overwriting any outer binding of the same name.
    """
    if len(args) != 2 or not isinstance(args[0], Word):
        raise EggSyntaxError("Incorrect use of define")

    name, val_expr = args
    value = evaluate_fn(val_expr, env)
    env.define(name.name, value)
    return value
