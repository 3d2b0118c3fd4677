"""Builtins that read and change struct fields."""

from __future__ import annotations

from typing import List

from glang.errors import BuiltinError
from glang.objects import Array, Object, String, Struct


def set_field(args: List[Object]) -> Object:
    """Return a copy of the struct with one field set."""
    if len(args) != 3:
        raise BuiltinError(f"set_field() expects 3 arguments, got {len(args)}")
    target, field_name, new_value = args
    if isinstance(target, Struct) and isinstance(field_name, String):
        fields = dict(target.fields)
        fields[field_name.value] = new_value
        return Struct(target.name, fields, dict(target.methods), [])
    raise BuiltinError(f"set_field() expects struct, got {target.type_name()}")


def get_field(args: List[Object]) -> Object:
    """Return the value of a named field."""
    if len(args) != 2:
        raise BuiltinError(f"get_field() expects 2 arguments, got {len(args)}")
    target, field_name = args
    if isinstance(target, Struct) and isinstance(field_name, String):
        try:
            return target.fields[field_name.value]
        except KeyError:
            raise BuiltinError(
                f"get_field() field '{field_name.value}' does not exist"
            ) from None
    raise BuiltinError(f"get_field() expects struct, got {target.type_name()}")


def struct_fields(args: List[Object]) -> Object:
    """Return the names of a struct's fields as an array of strings."""
    if not args:
        raise BuiltinError("fields() expects 1 argument, got 0")
    target = args[0]
    if isinstance(target, Struct):
        return Array([String(name) for name in target.fields])
    raise BuiltinError(f"fields() expects struct, got {target.type_name()}")


def struct_name(args: List[Object]) -> Object:
    """Return the name of a struct."""
    if not args:
        raise BuiltinError("name() expects 1 argument, got 0")
    target = args[0]
    if isinstance(target, Struct):
        return String(target.name)
    raise BuiltinError(f"name() expects struct, got {target.type_name()}")