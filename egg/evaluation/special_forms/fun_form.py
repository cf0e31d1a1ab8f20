from egg import EvaluatorFn
from egg import EggValue
from egg.errors import EggSyntaxError
from egg.types.environment import Environment
from egg.types.expression import Expression, Word
from egg.types.function import Function


def fun_form(
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> EggValue:
    # fun(a, b, body): every argument but the last names a parameter.
    # The current env is captured by reference, not copied.
    if not args:
        raise EggSyntaxError("Functions need a body")

    *params, body = args
    for param in params:
        if not isinstance(param, Word):
            raise EggSyntaxError(f"Parameter names must be words, got {param}")

    return Function(tuple(p.name for p in params), body, env)
