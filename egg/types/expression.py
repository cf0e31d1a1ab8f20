"""Syntax tree nodes produced by the Egg reader.

An Expression is one of three frozen node types. Trees are built once by the
parser and never mutated afterwards, so nodes compare and hash structurally.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    """A number or string taken verbatim from the source."""

    value: int | str

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return f'"{self.value}"'
        return str(self.value)


@dataclass(frozen=True)
class Word:
    """A variable reference (or a special form name in operator position)."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Application:
    """An operator applied to an ordered tuple of argument expressions."""

    operator: Expression
    args: tuple[Expression, ...] = ()

    def __str__(self) -> str:
        return f"{self.operator}({', '.join(str(a) for a in self.args)})"


Expression = Union[Literal, Word, Application]
