"""The to_float() conversion method."""

from __future__ import annotations

import re
from typing import List

from glang.errors import BuiltinError
from glang.objects import BigInteger, Float, Integer, Object, String

_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan"
    r"|[0-9]+\.?[0-9]*(?:e[+-]?[0-9]+)?"
    r"|\.[0-9]+(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def to_float(args: List[Object]) -> Object:
    """Convert an integer, big integer or numeric string to a float."""
    if not args:
        raise BuiltinError("to_float() expects 1 argument, got 0")
    value = args[0]
    if isinstance(value, (Integer, BigInteger)):
        try:
            return Float(float(value.value))
        except OverflowError:
            raise BuiltinError(
                "to_float() cannot convert BigInteger to Float (overflow)"
            ) from None
    if isinstance(value, String):
        text = value.value.strip()
        if _FLOAT_PATTERN.fullmatch(text):
            return Float(float(text))
        raise BuiltinError(f"to_float() cannot convert '{value.value}' to float")
    raise BuiltinError(
        f"to_float() expects integer, bigInteger, or string, got {value.type_name()}"
    )