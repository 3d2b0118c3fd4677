"""Builtins that work on hashes."""

from __future__ import annotations

from typing import List

from glang.errors import BuiltinError
from glang.objects import Array, Boolean, Hash, Integer, Object, String

_KEY_TYPES = (Integer, Boolean, String)


def _check_key(name: str, key: Object) -> None:
    if not isinstance(key, _KEY_TYPES):
        raise BuiltinError(
            f"{name}() key must be integer, boolean, or string, got {key.type_name()}"
        )


def set_key(args: List[Object]) -> Object:
    """Return a copy of the hash with one key set."""
    if not args:
        raise BuiltinError("set() expects 3 arguments, got 1")
    target = args[0]
    if isinstance(target, Hash) and len(args) >= 3:
        key, value = args[1], args[2]
        _check_key("set", key)
        pairs = dict(target.pairs)
        pairs[key] = value
        return Hash(pairs)
    raise BuiltinError(f"set() expects hash, got {target.type_name()}")


def has_key(args: List[Object]) -> Object:
    """Whether the hash holds a key."""
    if not args:
        raise BuiltinError("has() expects 2 arguments, got 1")
    target = args[0]
    if isinstance(target, Hash) and len(args) >= 2:
        key = args[1]
        _check_key("has", key)
        return Boolean(key in target.pairs)
    raise BuiltinError(f"has() expects hash, got {target.type_name()}")


def _require_hash(name: str, args: List[Object]) -> Hash:
    if not args:
        raise BuiltinError(f"{name}() expects 1 argument, got 0")
    target = args[0]
    if not isinstance(target, Hash):
        raise BuiltinError(f"{name}() expects hash, got {target.type_name()}")
    return target


def keys(args: List[Object]) -> Object:
    """Return the keys of a hash as an array."""
    return Array(list(_require_hash("keys", args).pairs))


def values(args: List[Object]) -> Object:
    """Return the values of a hash as an array."""
    return Array(list(_require_hash("values", args).pairs.values()))


def clear(args: List[Object]) -> Object:
    """Return an empty hash."""
    _require_hash("clear", args)
    return Hash({})