"""Builtins that work on integers."""

from __future__ import annotations

from typing import List

from glang.errors import BuiltinError
from glang.objects import Integer, Object

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U32_MASK = 0xFFFFFFFF


def _fits_i64(value: int) -> bool:
    return _I64_MIN <= value <= _I64_MAX


def pow_int(args: List[Object]) -> Object:
    """Raise an integer to a non-negative integer power, failing on overflow."""
    if not args:
        raise BuiltinError("pow() expects 2 arguments, got 1")
    base = args[0]
    exp = args[1] if len(args) > 1 else None
    if not (isinstance(base, Integer) and isinstance(exp, Integer)):
        raise BuiltinError(f"pow() expects integer, got {base.type_name()}")
    if exp.value < 0:
        raise BuiltinError("pow() does not support negative exponents")
    exponent = exp.value & _U32_MASK
    if abs(base.value) > 1 and exponent > 64:
        raise BuiltinError("pow() result overflow")
    result = base.value**exponent
    if not _fits_i64(result):
        raise BuiltinError("pow() result overflow")
    return Integer(result)


def abs_int(args: List[Object]) -> Object:
    """Return the absolute value of an integer."""
    if not args:
        raise BuiltinError("abs() expects 1 argument, got 0")
    value = args[0]
    if not isinstance(value, Integer):
        raise BuiltinError(f"abs() expects integer, got {value.type_name()}")
    result = abs(value.value)
    if not _fits_i64(result):
        raise BuiltinError("abs() result overflow")
    return Integer(result)


def _pick(name: str, args: List[Object], choose) -> Object:
    if not args:
        raise BuiltinError(f"{name}() expects 2 arguments, got 1")
    first = args[0]
    second = args[1] if len(args) > 1 else None
    if isinstance(first, Integer) and isinstance(second, Integer):
        return Integer(choose(first.value, second.value))
    raise BuiltinError(f"{name}() expects integer, got {first.type_name()}")


def min_int(args: List[Object]) -> Object:
    """Return the smaller of two integers."""
    return _pick("min", args, min)


def max_int(args: List[Object]) -> Object:
    """Return the larger of two integers."""
    return _pick("max", args, max)