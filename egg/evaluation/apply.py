"""Application engine for Egg.

Centralizes function-call semantics so the evaluator and the builtins that
take function arguments apply callables the same way:
- Arity is checked for user functions and fixed-arity builtins alike.
- User functions run their body in a fresh child of the captured
  environment, never the caller's.
"""

from egg import EggValue, EvaluatorFn
from egg.errors import EggArityError, EggTypeError
from egg.types.function import EggCallable, Function


def require_function(head: EggValue) -> EggCallable:
    if not isinstance(head, EggCallable):
        raise EggTypeError(f"Applying a non-function: {head!r}")
    return head


def check_arity(name: str, expected: int | None, args: list[EggValue]) -> None:
    if expected is not None and len(args) != expected:
        raise EggArityError(
            f"Wrong number of arguments to {name}: expected {expected}, got {len(args)}"
        )


def apply(head: EggValue, args: list[EggValue], evaluate_fn: EvaluatorFn) -> EggValue:
    """Apply an already-evaluated function value to already-evaluated arguments.

    Raises EggTypeError for non-function heads and EggArityError on an
    argument count mismatch.
    """
    fn = require_function(head)
    check_arity(fn.name, fn.arity, args)
    if isinstance(fn, Function):
        return evaluate_fn(fn.body, fn.extend_env(args))
    return fn(*args)
