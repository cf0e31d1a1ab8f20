"""Primitive registry: the values every Egg program can see in global scope."""

from __future__ import annotations
from typing import Any, Callable

from egg.errors import EggTypeError
from egg.printer import to_string
from egg.types import Builtin, Environment


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: Any, b: Any) -> bool:
    # Type-strict so that 1 == true is false, as bool subclasses int in Python
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if type(a) != type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, str):
        return a == b
    return False

def equals(a: Any, b: Any) -> bool:
    return is_equal(a, b)

def not_equals(a: Any, b: Any) -> bool:
    return not is_equal(a, b)

# -------------------------------
# Arithmetic
# -------------------------------
def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)

def _require_numbers(op: str, a: Any, b: Any) -> None:
    if not (_is_number(a) and _is_number(b)):
        raise EggTypeError(f"Arguments to {op} must be numbers, got {to_string(a)} and {to_string(b)}")

def add(a: Any, b: Any) -> Any:
    if isinstance(a, str) and isinstance(b, str):
        return a + b
    _require_numbers("+", a, b)
    return a + b

def sub(a: Any, b: Any) -> Any:
    _require_numbers("-", a, b)
    return a - b

def mul(a: Any, b: Any) -> Any:
    _require_numbers("*", a, b)
    return a * b

def div(a: Any, b: Any) -> Any:
    _require_numbers("/", a, b)
    if b == 0:
        raise EggTypeError("Division by zero")
    if isinstance(a, int) and isinstance(b, int) and a % b == 0:
        return a // b
    try:
        return a / b
    except OverflowError:
        raise EggTypeError("Result of / is too large for a float")

# -------------------------------
# Comparison
# -------------------------------
def _comparison(op: str, compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    def compare_values(a: Any, b: Any) -> bool:
        if isinstance(a, str) and isinstance(b, str):
            return compare(a, b)
        _require_numbers(op, a, b)
        return compare(a, b)
    return compare_values

less_than = _comparison("<", lambda a, b: a < b)
greater_than = _comparison(">", lambda a, b: a > b)
less_equal = _comparison("<=", lambda a, b: a <= b)
greater_equal = _comparison(">=", lambda a, b: a >= b)

# -------------------------------
# Output
# -------------------------------
def print_value(value: Any) -> Any:
    print(to_string(value))
    return value

# -------------------------------
# Arrays
# -------------------------------
def make_array(*values: Any) -> list[Any]:
    return list(values)

def _require_array(op: str, value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise EggTypeError(f"{op} expects an array, got {to_string(value)}")
    return value

def length(array: Any) -> int:
    return len(_require_array("length", array))

def element(array: Any, n: Any) -> Any:
    items = _require_array("element", array)
    if not _is_number(n) or int(n) != n:
        raise EggTypeError(f"Array index must be an integer, got {to_string(n)}")
    if not 0 <= n < len(items):
        raise EggTypeError(f"Array index {n} out of range for length {len(items)}")
    return items[int(n)]


BUILTINS: dict[str, Callable[..., Any]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "==": equals,
    "!=": not_equals,
    "<": less_than,
    ">": greater_than,
    "<=": less_equal,
    ">=": greater_equal,
    "print": print_value,
    "array": make_array,
    "length": length,
    "element": element,
}


def register(env: Environment) -> Environment:
    """Populate `env` with the boolean constants and every primitive."""
    env.define("true", True)
    env.define("false", False)
    env.update({name: Builtin.wrap(name, fn) for name, fn in BUILTINS.items()})
    return env
