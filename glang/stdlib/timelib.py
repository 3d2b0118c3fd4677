"""Time functions of the standard library."""

from __future__ import annotations

import asyncio
import time
from typing import List

from glang.errors import TypeMismatch, WrongNumberOfArguments
from glang.objects import BigInteger, Future, Integer, NullValue, Object

_U64_MAX = 2**64 - 1


def now(args: List[Object]) -> Object:
    """Milliseconds since the Unix epoch."""
    return BigInteger(max(time.time_ns() // 1_000_000, 0))


async def sleep_async(args: List[Object]) -> Object:
    """Sleep for a number of milliseconds."""
    if not args:
        raise WrongNumberOfArguments(1, 1, 0)
    value = args[0]
    if isinstance(value, Integer):
        millis = value.value % (_U64_MAX + 1)
    elif isinstance(value, BigInteger):
        millis = value.value if 0 <= value.value <= _U64_MAX else _U64_MAX
    else:
        raise TypeMismatch("integer", value.type_name())
    await asyncio.sleep(millis / 1000)
    return NullValue()


def sleep(args: List[Object]) -> Object:
    """A future that sleeps for a number of milliseconds when awaited."""
    return Future(sleep_async(list(args)))