"""Builtins that work on arrays."""

from __future__ import annotations

from typing import List

from glang.errors import BuiltinError
from glang.objects import Array, Object


def head(args: List[Object]) -> Object:
    """Return the first element of an array."""
    if not args:
        raise BuiltinError("head() expects 1 argument, got 0")
    target = args[0]
    if not isinstance(target, Array):
        raise BuiltinError(f"head() expects array, got {target.type_name()}")
    if not target.elements:
        raise BuiltinError("head() cannot get head of empty array")
    return target.elements[0]


def tail(args: List[Object]) -> Object:
    """Return an array of every element but the first."""
    if not args:
        raise BuiltinError("tail() expects 1 argument, got 0")
    target = args[0]
    if not isinstance(target, Array):
        raise BuiltinError(f"tail() expects array, got {target.type_name()}")
    if not target.elements:
        raise BuiltinError("tail() cannot get tail of empty array")
    return Array(target.elements[1:])


def cons(args: List[Object]) -> Object:
    """Return a new array with a value put in front of an array."""
    if len(args) < 2:
        raise BuiltinError("cons() expects 2 arguments, got 1")
    value, target = args[0], args[1]
    if not isinstance(target, Array):
        raise BuiltinError(
            f"cons() expects (value, array), got {value.type_name()} and {target.type_name()}"
        )
    return Array([value, *target.elements])


def push(args: List[Object]) -> Object:
    """Return a new array with a value added at the end."""
    if not args:
        raise BuiltinError("push() expects 2 arguments, got 1")
    target = args[0]
    if isinstance(target, Array) and len(args) >= 2:
        return Array([*target.elements, args[1]])
    raise BuiltinError(f"push() expects array, got {target.type_name()}")