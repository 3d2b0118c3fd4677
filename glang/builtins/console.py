"""Builtins that write to standard output and read from standard input."""

from __future__ import annotations

import sys
from typing import List

from glang.errors import BuiltinError
from glang.objects import NullValue, Object, String


def print_values(args: List[Object]) -> Object:
    """Write the values one after another with no separator or newline."""
    print("".join(str(value) for value in args), end="")
    return NullValue()


def println_values(args: List[Object]) -> Object:
    """Write the values one after another, then a newline."""
    print("".join(str(value) for value in args))
    return NullValue()


def read_input(args: List[Object]) -> Object:
    """Show an optional prompt and read one line, without trailing whitespace."""
    if len(args) > 1:
        raise BuiltinError("input() takes at most 1 argument")
    prompt = args[0] if args else NullValue()
    if isinstance(prompt, String):
        print(prompt.value, end="", flush=True)
    elif not isinstance(prompt, NullValue):
        raise BuiltinError("Invalid argument to input()")
    return String(sys.stdin.readline().rstrip())