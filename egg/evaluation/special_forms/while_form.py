from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression


def while_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    """
    while(cond, body)
    There is no undefined value in Egg, so the loop always yields false.
    """
    if len(args) != 2:
        raise EggSyntaxError("Wrong number of args to while")

    cond, body = args
    while evaluate_fn(cond, env) is not False:
        evaluate_fn(body, env)
    return False
