from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression


def if_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    if len(args) != 3:
        raise EggSyntaxError("Wrong number of args to if")

    cond = evaluate_fn(args[0], env)
    # Only the boolean false selects the else branch; 0 and "" are true
    if cond is not False:
        return evaluate_fn(args[1], env)
    return evaluate_fn(args[2], env)
