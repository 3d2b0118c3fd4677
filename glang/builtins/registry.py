"""The table of builtin functions visible in every program."""

from __future__ import annotations

import sys
from typing import Callable, List, Tuple

from glang.builtins import arrays, console, hashes, ints, shared, strings, struct_ops
from glang.builtins.typeinfo import type_of
from glang.objects import Builtin, Object

UNLIMITED = sys.maxsize

BUILTIN_NAMES: Tuple[str, ...] = (
    "set_field",
    "get_field",
    "fields",
    "name",
    "print",
    "println",
    "input",
    "type",
    "is_empty",
    "split",
    "replace",
    "trim",
    "contains",
    "slice",
    "len",
    "head",
    "tail",
    "cons",
    "push",
    "pow",
    "abs",
    "min",
    "max",
    "keys",
    "values",
    "clear",
)

_BuiltinFunc = Callable[[List[Object]], Object]

# (min arguments, max arguments, implementation), in the order of BUILTIN_NAMES.
_SPECS: Tuple[Tuple[int, int, _BuiltinFunc], ...] = (
    (3, 3, struct_ops.set_field),
    (2, 2, struct_ops.get_field),
    (1, 1, struct_ops.struct_fields),
    (1, 1, struct_ops.struct_name),
    (1, UNLIMITED, console.print_values),
    (1, UNLIMITED, console.println_values),
    (0, 1, console.read_input),
    (1, 1, type_of),
    (1, 1, shared.is_empty),
    (1, 1, strings.split),
    (1, 1, strings.replace),
    (3, 3, strings.trim),
    (2, 2, shared.contains),
    (2, 3, shared.slice_items),
    (1, 1, shared.length),
    (1, 1, arrays.head),
    (1, 1, arrays.tail),
    (2, 2, arrays.cons),
    (2, 2, arrays.push),
    (2, 2, ints.pow_int),
    (1, 1, ints.abs_int),
    (2, 2, ints.min_int),
    (2, 2, ints.max_int),
    (1, 1, hashes.keys),
    (1, 1, hashes.values),
    (1, 1, hashes.clear),
)


def get_builtins() -> List[Tuple[str, Builtin]]:
    """Return every builtin as a (name, value) pair, in registration order."""
    return [
        (name, Builtin(name, min_params, max_params, func))
        for name, (min_params, max_params, func) in zip(BUILTIN_NAMES, _SPECS)
    ]