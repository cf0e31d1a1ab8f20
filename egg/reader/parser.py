"""
  Egg Reader

- Recursive descent over the remaining source text: every step takes the
  unconsumed text and returns the node it built plus what is left.
- Emits the frozen nodes from egg.types.expression:

    - "text"        -> Literal("text")   (verbatim, no escapes)
    - 123           -> Literal(123)
    - name          -> Word("name")
    - f(a, b)       -> Application(Word("f"), (Word("a"), Word("b")))
    - f(1)(2)       -> Application(Application(Word("f"), (Literal(1),)), (Literal(2),))

- `#` starts a comment running to end of line; comments count as whitespace.
"""

from __future__ import annotations

import re

from egg.errors import EggSyntaxError
from egg.types.expression import Application, Expression, Literal, Word


SPACE_RE = re.compile(r"(?:\s|#[^\n]*)*")

ATOM_RE = re.compile(
    r'"(?P<string>[^"]*)"'  # double-quoted string, no escapes
    r"|(?P<number>[0-9]+)(?![0-9A-Za-z_])"  # ASCII digits not running into a word
    r'|(?P<word>[^\s(),"]+)'  # fallback: words
)


def skip_space(program: str) -> str:
    """Drop leading whitespace and any number of consecutive comments."""
    return program[SPACE_RE.match(program).end():]


def parse_expression(program: str) -> tuple[Expression, str]:
    """Parse one expression from the front of `program`.

    Returns the expression and the unconsumed text.
    """
    program = skip_space(program)
    match = ATOM_RE.match(program)
    if not match:
        raise EggSyntaxError(f"Unexpected syntax: {program[:20]!r}")

    if match.group("string") is not None:
        expr: Expression = Literal(match.group("string"))
    elif match.group("number") is not None:
        expr = Literal(int(match.group("number")))
    else:
        expr = Word(match.group("word"))

    return parse_application(expr, program[match.end():])


def parse_application(expr: Expression, program: str) -> tuple[Expression, str]:
    """Wrap `expr` in an Application for each argument list that follows it."""
    program = skip_space(program)
    if not program.startswith("("):
        return expr, program

    program = skip_space(program[1:])
    args: list[Expression] = []
    if program.startswith(")"):
        return parse_application(Application(expr, ()), program[1:])

    while True:
        arg, program = parse_expression(program)
        args.append(arg)
        program = skip_space(program)
        if program.startswith(","):
            program = program[1:]
        elif program.startswith(")"):
            program = program[1:]
            break
        else:
            raise EggSyntaxError("Expected ',' or ')'")

    return parse_application(Application(expr, tuple(args)), program)


def parse(program: str) -> Expression:
    """Parse a whole program, which must consist of exactly one expression."""
    expr, rest = parse_expression(program)
    if skip_space(rest):
        raise EggSyntaxError("Unexpected text after program")
    return expr
