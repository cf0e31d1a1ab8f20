# Printer for Egg runtime values.

from __future__ import annotations

from egg import EggValue


def to_string(value: EggValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return "[" + ", ".join(to_string(item) for item in value) + "]"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
    return str(value)
