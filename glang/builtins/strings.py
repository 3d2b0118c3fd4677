"""Builtins that work on strings."""

from __future__ import annotations

from typing import List

from glang.errors import BuiltinError
from glang.objects import Array, Boolean, Object, String


def to_upper(args: List[Object]) -> Object:
    """Return the string in upper case."""
    if not args:
        raise BuiltinError("to_upper() expects 1 argument, got 0")
    value = args[0]
    if not isinstance(value, String):
        raise BuiltinError(f"to_upper() expects string, got {value.type_name()}")
    return String(value.value.upper())


def to_lower(args: List[Object]) -> Object:
    """Return the string in lower case."""
    if not args:
        raise BuiltinError("to_lower() expects 1 argument, got 0")
    value = args[0]
    if not isinstance(value, String):
        raise BuiltinError(f"to_lower() expects a string, got {value.type_name()}")
    return String(value.value.lower())


def _affix_test(name: str, args: List[Object], check) -> Object:
    if not args:
        raise BuiltinError(f"{name}() expects 2 arguments, got 1")
    value = args[0]
    affix = args[1] if len(args) > 1 else None
    if isinstance(value, String) and isinstance(affix, String):
        return Boolean(check(value.value, affix.value))
    raise BuiltinError(f"{name}() expects string, got {value.type_name()}")


def starts_with(args: List[Object]) -> Object:
    """Whether the string begins with a prefix."""
    return _affix_test("starts_with", args, str.startswith)


def ends_with(args: List[Object]) -> Object:
    """Whether the string ends with a suffix."""
    return _affix_test("ends_with", args, str.endswith)


def replace(args: List[Object]) -> Object:
    """Replace every occurrence of one substring with another."""
    if args:
        value = args[0]
        if not isinstance(value, String):
            raise BuiltinError(f"replace() expects string, got {value.type_name()}")
        if len(args) >= 3:
            old, new = args[1], args[2]
            if isinstance(old, String) and isinstance(new, String):
                return String(value.value.replace(old.value, new.value))
            raise BuiltinError(f"replace() expects string, got {value.type_name()}")
        if len(args) == 2:
            raise BuiltinError("replace() expects 3 arguments, got 3")
    raise BuiltinError("replace() expects 3 arguments, got 3")


def split(args: List[Object]) -> Object:
    """Split a string on a delimiter; an empty delimiter splits between characters."""
    if not args:
        raise BuiltinError("split() expects 2 arguments, got 1")
    value = args[0]
    delimiter = args[1] if len(args) > 1 else None
    if isinstance(value, String) and isinstance(delimiter, String):
        text = value.value
        if delimiter.value:
            parts = text.split(delimiter.value)
        else:
            parts = ["", *text, ""]
        return Array([String(part) for part in parts])
    raise BuiltinError(f"split() expects string, got {value.type_name()}")


def trim(args: List[Object]) -> Object:
    """Strip whitespace from both ends of a string."""
    if not args:
        raise BuiltinError("trim() expects 1 argument, got 0")
    value = args[0]
    if not isinstance(value, String):
        raise BuiltinError(f"trim() expects string, got {value.type_name()}")
    return String(value.value.strip())