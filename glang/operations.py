"""Arithmetic and comparison on runtime values."""

from __future__ import annotations

import math
import operator
from typing import Callable

from glang.converters import normalize_int, obj_to_float, to_bigint
from glang.errors import DivisionByZero, InvalidOperation, TypeMismatch
from glang.objects import Boolean, ErrorValue, Float, Object, String


def _raise_errors(left: Object, right: Object) -> None:
    for operand in (left, right):
        if isinstance(operand, ErrorValue):
            raise operand.error


def _mismatch(left: Object, right: Object) -> TypeMismatch:
    return TypeMismatch("number", f"{left.type_name()} and {right.type_name()}")


def _involves_float(left: Object, right: Object) -> bool:
    return isinstance(left, Float) or isinstance(right, Float)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _arith(
    left: Object,
    right: Object,
    float_op: Callable[[float, float], float],
    int_op: Callable[[int, int], int],
    guards_zero: bool,
) -> Object:
    _raise_errors(left, right)
    if _involves_float(left, right):
        a, b = obj_to_float(left), obj_to_float(right)
        if guards_zero and b == 0.0:
            raise DivisionByZero()
        return Float(float_op(a, b))
    a_int, b_int = to_bigint(left), to_bigint(right)
    if a_int is None or b_int is None:
        raise _mismatch(left, right)
    if guards_zero and b_int == 0:
        raise DivisionByZero()
    return normalize_int(int_op(a_int, b_int))


def _compare(
    left: Object, right: Object, compare: Callable[[object, object], bool]
) -> Boolean:
    _raise_errors(left, right)
    if _involves_float(left, right):
        return Boolean(compare(obj_to_float(left), obj_to_float(right)))
    a_int, b_int = to_bigint(left), to_bigint(right)
    if a_int is None or b_int is None:
        raise _mismatch(left, right)
    return Boolean(compare(a_int, b_int))


def object_add(left: Object, right: Object) -> Object:
    """Add numbers or concatenate strings."""
    _raise_errors(left, right)
    if _involves_float(left, right):
        return Float(obj_to_float(left) + obj_to_float(right))
    if isinstance(left, String) and isinstance(right, String):
        return String(left.value + right.value)
    a_int, b_int = to_bigint(left), to_bigint(right)
    if a_int is not None and b_int is not None:
        return normalize_int(a_int + b_int)
    raise InvalidOperation(f"cannot add {left.type_name()} and {right.type_name()}")


def object_subtract(left: Object, right: Object) -> Object:
    """Subtract two numbers."""
    return _arith(left, right, operator.sub, operator.sub, False)


def object_multiply(left: Object, right: Object) -> Object:
    """Multiply two numbers."""
    return _arith(left, right, operator.mul, operator.mul, False)


def object_divide(left: Object, right: Object) -> Object:
    """Divide two numbers; integer division truncates toward zero."""
    return _arith(left, right, operator.truediv, _trunc_div, True)


def object_modulo(left: Object, right: Object) -> Object:
    """Remainder of a division; the result takes the sign of the dividend."""
    return _arith(left, right, math.fmod, _trunc_mod, True)


def object_compare_gt(left: Object, right: Object) -> Boolean:
    return _compare(left, right, operator.gt)


def object_compare_gte(left: Object, right: Object) -> Boolean:
    return _compare(left, right, operator.ge)


def object_compare_lt(left: Object, right: Object) -> Boolean:
    return _compare(left, right, operator.lt)


def object_compare_lte(left: Object, right: Object) -> Boolean:
    return _compare(left, right, operator.le)