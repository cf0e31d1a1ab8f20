"""Runtime environment for Egg.

The Environment stores bindings of variable names to evaluated Egg values and
supports nested scopes via an `outer` link. A fresh Environment is created for
every function call and every program run, always pointing at an existing
scope, so chains are acyclic and end at a single global environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from egg import EggValue
from egg.errors import EggReferenceError


class Environment:
    """Hierarchical mapping from names to Egg values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, EggValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: EggValue) -> None:
        """Bind `name` to `value` in this frame only, shadowing any outer binding."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> EggValue:
        """Look up the value bound to `name`, walking outward through parents.

        Raises EggReferenceError if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise EggReferenceError(f"Undefined variable: {name}")
        return env.vars[name]

    def set(self, name: str, value: EggValue) -> None:
        """Update the nearest existing binding for `name` in the chain.

        Raises EggReferenceError if the name is not bound anywhere.
        """
        env = self.find(name)
        if env is None:
            raise EggReferenceError(f"Setting undefined variable: {name}")
        env.vars[name] = value

    def update(self, mapping: dict[str, EggValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Full chain representation for debugging."""
        frames = []
        for env in self.chain():
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                frames.append(env_buf.getvalue())
        return f"<Environment chain: {' -> '.join(frames)}>"
