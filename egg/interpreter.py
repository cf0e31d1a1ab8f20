from __future__ import annotations

import logging
from typing import Optional

from egg import EggValue
from egg.builtins import register
from egg.evaluation.evaluator import evaluate
from egg.reader.parser import parse
from egg.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs Egg programs against one shared global environment.
    Each run gets its own top-level scope, so definitions made by one
    program are not visible to the next.
    """
    def __init__(self, global_env: Optional[Environment] = None):
        if global_env is None:
            global_env = register(Environment())
        self.global_env = global_env

    def run(self, *fragments: str) -> EggValue:
        """Join the fragments with newlines, parse once and evaluate."""
        source = "\n".join(fragments)
        expr = parse(source)
        logger.debug("Parsed program: %s", expr)
        result = evaluate(expr, Environment(outer=self.global_env))
        logger.debug("Program result: %r", result)
        return result


_default_interpreter: Optional[Interpreter] = None


def run(*fragments: str) -> EggValue:
    """Run a program with a process-wide default interpreter."""
    global _default_interpreter
    if _default_interpreter is None:
        _default_interpreter = Interpreter()
    return _default_interpreter.run(*fragments)
