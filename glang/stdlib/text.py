"""String functions of the standard library: join, reverse and repeat."""

from __future__ import annotations

from typing import List

from glang.errors import InvalidArguments, TypeMismatch, WrongNumberOfArguments
from glang.objects import Array, Integer, Object, String


def string_join(args: List[Object]) -> Object:
    """Join an array of strings with a separator."""
    if len(args) >= 2 and isinstance(args[0], Array) and isinstance(args[1], String):
        parts = []
        for item in args[0].elements:
            if not isinstance(item, String):
                raise TypeMismatch("string", item.type_name())
            parts.append(item.value)
        return String(args[1].value.join(parts))
    raise TypeMismatch("array, string", "invalid arguments")


def string_reverse(args: List[Object]) -> Object:
    """Reverse a string character by character."""
    if not args:
        raise WrongNumberOfArguments(1, 1, 0)
    value = args[0]
    if not isinstance(value, String):
        raise TypeMismatch("string", value.type_name())
    return String(value.value[::-1])


def string_repeat(args: List[Object]) -> Object:
    """Repeat a string a non-negative number of times."""
    if len(args) >= 2 and isinstance(args[0], String) and isinstance(args[1], Integer):
        count = args[1].value
        if count < 0:
            raise InvalidArguments("repeat count must be non-negative")
        return String(args[0].value * count)
    raise TypeMismatch("string, integer", "invalid arguments")