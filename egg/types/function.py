"""Function values: user closures created by `fun` and host builtins."""

from __future__ import annotations

import inspect
from io import StringIO
from typing import Callable, Optional

from egg import EggValue
from egg.types.environment import Environment
from egg.types.expression import Expression


class Function:
    """A first-class Egg function with formal parameters, body, and closure env.

    The closure env is held by reference, so every call and every sibling
    closure created in the same scope sees later `define`s made there.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[str, ...], body: Expression, env: Environment):
        self.params: tuple[str, ...] = tuple(params)
        self.body: Expression = body
        self.env: Environment = env

    @property
    def name(self) -> str:
        return "fun"

    @property
    def arity(self) -> int:
        return len(self.params)

    def extend_env(self, args: list[EggValue]) -> Environment:
        """Bind argument values to the formals in a new child of the captured env."""
        call_env = Environment(outer=self.env)
        for param, value in zip(self.params, args):
            call_env.define(param, value)
        return call_env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("fun(")
            buffer.write(", ".join(self.params))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Builtin:
    """A host-provided primitive, applied through the same path as Function.

    `arity` is the exact argument count, or None when the primitive is variadic.
    """

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: Callable[..., EggValue], arity: Optional[int] = None):
        self.name = name
        self.fn = fn
        self.arity = arity

    @classmethod
    def wrap(cls, name: str, fn: Callable[..., EggValue]) -> Builtin:
        """Build a Builtin whose arity is read from the Python signature."""
        params = inspect.signature(fn).parameters.values()
        if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
            return cls(name, fn, None)
        return cls(name, fn, len(params))

    def __call__(self, *args: EggValue) -> EggValue:
        return self.fn(*args)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return str(self)


EggCallable = Function | Builtin
