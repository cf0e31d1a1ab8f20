from egg.types.expression import Expression, Literal, Word, Application
from egg.types.environment import Environment
from egg.types.function import Function, Builtin, EggCallable

__all__ = [
    "Expression",
    "Literal",
    "Word",
    "Application",
    "Environment",
    "Function",
    "Builtin",
    "EggCallable",
]
