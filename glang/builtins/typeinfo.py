"""The type() builtin."""

from __future__ import annotations

from typing import List

from glang.errors import BuiltinError
from glang.objects import Object, String


def type_of(args: List[Object]) -> Object:
    """Return the type name of the first argument."""
    if not args:
        raise BuiltinError("type() requires one argument")
    return String(args[0].type_name())