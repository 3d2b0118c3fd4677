"""Conversions from runtime values to plain Python values."""

from __future__ import annotations

from typing import Optional

from glang.errors import InvalidOperation, NotCallable, NotHashable, TypeMismatch
from glang.objects import (
    AsyncFunction,
    BigInteger,
    Boolean,
    Builtin,
    BuiltinStd,
    ErrorValue,
    Float,
    Function,
    Integer,
    Object,
    String,
)

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


def _raise_if_error(obj: Object) -> None:
    if isinstance(obj, ErrorValue):
        raise obj.error


def obj_to_bool(obj: Object) -> bool:
    """Return the truth value of a boolean; anything else is a type mismatch."""
    if isinstance(obj, Boolean):
        return obj.value
    _raise_if_error(obj)
    raise TypeMismatch("boolean", obj.type_name())


def obj_to_int(obj: Object) -> int:
    """Return an integer that fits in 64 bits."""
    if isinstance(obj, Integer):
        return obj.value
    if isinstance(obj, BigInteger):
        if I64_MIN <= obj.value <= I64_MAX:
            return obj.value
        raise InvalidOperation("Integer too large to convert to i64")
    _raise_if_error(obj)
    raise TypeMismatch("integer", obj.type_name())


def obj_to_float(obj: Object) -> float:
    """Return a numeric value as a float."""
    if isinstance(obj, Float):
        return obj.value
    if isinstance(obj, (Integer, BigInteger)):
        try:
            return float(obj.value)
        except OverflowError:
            raise InvalidOperation("BigInt too large for float") from None
    _raise_if_error(obj)
    raise TypeMismatch("numeric", obj.type_name())


def obj_to_func(obj: Object) -> Object:
    """Return the value itself if it can be called."""
    if isinstance(obj, (Function, AsyncFunction, Builtin, BuiltinStd)):
        return obj
    _raise_if_error(obj)
    raise NotCallable(obj.type_name())


def obj_to_hash(obj: Object) -> Object:
    """Return the value itself if it may be used as a hash key."""
    if isinstance(obj, (Integer, BigInteger, Boolean, String)):
        return obj
    _raise_if_error(obj)
    raise NotHashable(obj.type_name())


def to_bigint(obj: Object) -> Optional[int]:
    """The integer held by an integer value, or None for anything else."""
    if isinstance(obj, (Integer, BigInteger)):
        return obj.value
    return None


def normalize_int(value: int) -> Object:
    """Wrap an integer, choosing Integer when it fits in 64 bits."""
    if I64_MIN <= value <= I64_MAX:
        return Integer(value)
    return BigInteger(value)