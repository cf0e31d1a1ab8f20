# Core type aliases for Egg's data model.
# Syntax trees are built from the frozen node classes in egg.types.expression.
# Runtime values are plain Python objects (bool, int/float, str, list for
# arrays) plus the callable types in egg.types.function.
#
# Naming guidance:
# - Expression: use in reader/parser code and in special forms, which receive
#   unevaluated argument expressions.
# - EggValue:   use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
EggValue = Any

# Evaluator function type: passed to special forms so they can evaluate
# the argument expressions they choose to evaluate
EvaluatorFn = Callable[..., EggValue]
