from egg import EvaluatorFn
from egg import EggValue
from egg.types.environment import Environment
from egg.types.expression import Expression


def do_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    result: EggValue = False
    for arg in args:
        result = evaluate_fn(arg, env)
    return result
