"""Builtins shared by strings, arrays and hashes."""

from __future__ import annotations

import math
import re
from typing import List, Optional, Tuple

from glang.converters import I64_MAX, I64_MIN, normalize_int
from glang.errors import BuiltinError
from glang.objects import (
    Array,
    Boolean,
    Float,
    Hash,
    Integer,
    NullValue,
    Object,
    String,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_HASH_KEY_TYPES = (Integer, Boolean, String)


def _second(args: List[Object]) -> Optional[Object]:
    return args[1] if len(args) > 1 else None


def _check_key(name: str, key: Object) -> None:
    if not isinstance(key, _HASH_KEY_TYPES):
        raise BuiltinError(
            f"{name}() key must be integer, boolean, or string, got {key.type_name()}"
        )


def to_string(args: List[Object]) -> Object:
    """Return the display text of a value."""
    if not args:
        raise BuiltinError(f"to_string() expects 1 argument, got {len(args)}")
    return String(str(args[0]))


def to_int(args: List[Object]) -> Object:
    """Parse a string as a 64-bit integer, or truncate a float toward zero."""
    if not args:
        raise BuiltinError("to_int() expects 1 argument, got 0")
    value = args[0]
    if isinstance(value, String):
        text = value.value.strip()
        if _INT_PATTERN.fullmatch(text):
            number = int(text)
            if I64_MIN <= number <= I64_MAX:
                return Integer(number)
        raise BuiltinError(f"to_int() cannot convert '{value.value}' to integer")
    if isinstance(value, Float):
        if math.isnan(value.value) or math.isinf(value.value):
            raise BuiltinError(f"to_int() cannot convert {value} to integer (overflow)")
        return normalize_int(math.trunc(value.value))
    raise BuiltinError(f"to_int() expects string or float, got {value.type_name()}")


def is_empty(args: List[Object]) -> Object:
    """Whether a string, array or hash has no elements."""
    if not args:
        raise BuiltinError("is_empty() expects 1 argument, got 0")
    value = args[0]
    if isinstance(value, String):
        return Boolean(not value.value)
    if isinstance(value, Array):
        return Boolean(not value.elements)
    if isinstance(value, Hash):
        return Boolean(not value.pairs)
    raise BuiltinError(
        f"is_empty() expects string, array, or hash, got {value.type_name()}"
    )


def length(args: List[Object]) -> Object:
    """Length of an array or hash, or the UTF-8 byte length of a string."""
    if not args:
        raise BuiltinError("len() expects 1 argument, got 0")
    value = args[0]
    if isinstance(value, String):
        return Integer(len(value.value.encode("utf-8")))
    if isinstance(value, Array):
        return Integer(len(value.elements))
    if isinstance(value, Hash):
        return Integer(len(value.pairs))
    raise BuiltinError(f"len() expects string, array, or hash, got {value.type_name()}")


def remove(args: List[Object]) -> Object:
    """Return a copy of a hash without a key, or of an array without an index."""
    if not args:
        raise BuiltinError("remove() expects 2 arguments, got 1")
    target, key = args[0], _second(args)
    if isinstance(target, Hash) and key is not None:
        _check_key("remove", key)
        pairs = dict(target.pairs)
        pairs.pop(key, None)
        return Hash(pairs)
    if isinstance(target, Array) and isinstance(key, Integer):
        index = key.value
        if not 0 <= index < len(target.elements):
            raise BuiltinError(
                f"remove() index {index} out of bounds "
                f"(array length: {len(target.elements)})"
            )
        return Array(target.elements[:index] + target.elements[index + 1 :])
    raise BuiltinError(f"remove() expects hash or array, got {target.type_name()}")


def _checked_index(index: int, size: int, kind: str) -> int:
    if index < 0:
        raise BuiltinError(f"get() index {index} is negative")
    if index >= size:
        raise BuiltinError(
            f"get() index {index} out of bounds ({kind} length: {size})"
        )
    return index


def get_item(args: List[Object]) -> Object:
    """Return a character, an array element, or a hash value (null if absent)."""
    if not args:
        raise BuiltinError("get() expects 2 arguments, got 1")
    target, key = args[0], _second(args)
    if isinstance(target, String) and isinstance(key, Integer):
        text = target.value
        return String(text[_checked_index(key.value, len(text), "string")])
    if isinstance(target, Array) and isinstance(key, Integer):
        items = target.elements
        return items[_checked_index(key.value, len(items), "array")]
    if isinstance(target, Hash) and key is not None:
        _check_key("get", key)
        return target.pairs.get(key, NullValue())
    raise BuiltinError(
        f"get() expects hash, array, or string, got {target.type_name()}"
    )


def contains(args: List[Object]) -> Object:
    """Whether a string holds a substring, or an array holds an equal element."""
    if not args:
        raise BuiltinError("contains() expects 2 arguments, got 1")
    target, item = args[0], _second(args)
    if isinstance(target, String) and isinstance(item, String):
        return Boolean(item.value in target.value)
    if isinstance(target, Array) and item is not None:
        return Boolean(any(element == item for element in target.elements))
    raise BuiltinError(
        f"contains() expects string or array, got {target.type_name()}"
    )


def _slice_bounds(size: int, start: int, end_obj: Optional[Object]) -> Tuple[int, int]:
    if start < 0:
        start += size
    if end_obj is None:
        end = size
    elif isinstance(end_obj, Integer):
        end = end_obj.value + size if end_obj.value < 0 else end_obj.value
    else:
        raise BuiltinError(f"slice() end must be integer, got {end_obj.type_name()}")
    if start < 0 or start > size or end > size or start > end:
        raise BuiltinError("slice() indices out of bounds")
    return start, end


def slice_items(args: List[Object]) -> Object:
    """Slice a string or array; negative bounds count from the end."""
    if not args:
        raise BuiltinError("slice() expects at least 2 arguments, got 1")
    target, start = args[0], _second(args)
    end_obj = args[2] if len(args) > 2 else None
    if isinstance(target, String) and isinstance(start, Integer):
        lo, hi = _slice_bounds(len(target.value), start.value, end_obj)
        return String(target.value[lo:hi])
    if isinstance(target, Array) and isinstance(start, Integer):
        lo, hi = _slice_bounds(len(target.elements), start.value, end_obj)
        return Array(target.elements[lo:hi])
    raise BuiltinError(f"slice() expects string or array, got {target.type_name()}")