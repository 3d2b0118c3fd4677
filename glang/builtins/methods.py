"""Dispatch of method calls such as ``value.len()`` on builtin types."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple, Type

from glang.builtins import arrays, floats, hashes, ints, shared, strings, struct_ops
from glang.errors import BuiltinError, InvalidArguments, InvalidOperation
from glang.objects import (
    Array,
    BigInteger,
    Boolean,
    ErrorValue,
    Float,
    Future,
    Hash,
    Integer,
    NullValue,
    Object,
    String,
    Struct,
)

_BuiltinFunc = Callable[[List[Object]], Object]
_Entry = Tuple[Tuple[Type[Object], ...], _BuiltinFunc]

_METHODS: Dict[str, List[_Entry]] = {
    # Conversions
    "to_string": [
        (
            (Integer, Float, BigInteger, Boolean, String, Array, Hash,
             NullValue, ErrorValue, Future),
            shared.to_string,
        )
    ],
    "to_int": [((String, Float), shared.to_int)],
    "to_float": [((Integer, BigInteger, String), floats.to_float)],
    # Shared
    "len": [((Array, String, Hash), shared.length)],
    "is_empty": [((String, Array, Hash), shared.is_empty)],
    "remove": [((Hash, Array), shared.remove)],
    "get": [
        ((Hash, Array, String), shared.get_item),
        ((Struct,), struct_ops.get_field),
    ],
    "contains": [((String, Array), shared.contains)],
    # Strings
    "to_upper": [((String,), strings.to_upper)],
    "to_lower": [((String,), strings.to_lower)],
    "starts_with": [((String,), strings.starts_with)],
    "ends_with": [((String,), strings.ends_with)],
    "replace": [((String,), strings.replace)],
    "split": [((String,), strings.split)],
    "trim": [((String,), strings.trim)],
    # Arrays
    "head": [((Array,), arrays.head)],
    "tail": [((Array,), arrays.tail)],
    "push": [((Array,), arrays.push)],
    "cons": [((Array,), arrays.cons)],
    # Integers
    "pow": [((Integer,), ints.pow_int)],
    "min": [((Integer,), ints.min_int)],
    "max": [((Integer,), ints.max_int)],
    "abs": [((Integer,), ints.abs_int)],
    # Hashes and structs
    "set": [((Hash,), hashes.set_key), ((Struct,), struct_ops.set_field)],
    "has": [((Hash,), hashes.has_key)],
    "keys": [((Hash,), hashes.keys)],
    "values": [((Hash,), hashes.values)],
    "clear": [((Hash,), hashes.clear)],
    "fields": [((Struct,), struct_ops.struct_fields)],
    "name": [((Struct,), struct_ops.struct_name)],
}


def call_method(obj: Object, method_name: str, args: List[Object]) -> Object:
    """Call a builtin method on a value, passing the value as the first argument.

    Raises InvalidOperation when the type has no such method and
    InvalidArguments when the method itself fails.
    """
    for types, func in _METHODS.get(method_name, ()):
        if isinstance(obj, types):
            try:
                return func([obj, *args])
            except BuiltinError as err:
                raise InvalidArguments(err.message) from err
    raise InvalidOperation(f"{obj.type_name()} has no method '{method_name}'")