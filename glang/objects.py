"""Runtime values that every expression evaluates to."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Awaitable, Callable, ClassVar, Dict, List, Optional

from glang.errors import GlRuntimeError, InvalidOperation

_SHARED_HASH = hash("")

_variant = dataclass(frozen=True, repr=False)


def _format_float(value: float) -> str:
    """Render a float in plain decimal notation, dropping a zero fraction."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _debug_str(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def _debug_key(key: Any) -> str:
    return _debug_str(key) if isinstance(key, str) else repr(key)


def _debug_map(mapping: Dict[Any, Any]) -> str:
    return "{" + ", ".join(f"{_debug_key(k)}: {v!r}" for k, v in mapping.items()) + "}"


def _debug_list(items: List[Any]) -> str:
    return "[" + ", ".join(repr(item) for item in items) + "]"


class Object:
    """Base of all runtime values."""

    _type_label: ClassVar[str] = "object"

    def type_name(self) -> str:
        return self._type_label

    def is_returned(self) -> bool:
        return False

    def returned(self) -> "Object":
        return self


@_variant
class Integer(Object):
    value: int
    _type_label: ClassVar[str] = "integer"

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Integer({self.value})"


@_variant
class BigInteger(Object):
    value: int
    _type_label: ClassVar[str] = "bigInteger"

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"BigInteger({self.value})"


@_variant
class Float(Object):
    value: float
    _type_label: ClassVar[str] = "float"

    def __eq__(self, other: object) -> bool:
        if type(other) is not Float:
            return NotImplemented
        return self.value == other.value

    def __str__(self) -> str:
        return _format_float(self.value)

    def __repr__(self) -> str:
        return f"Float({_format_float(self.value)})"


@_variant
class Boolean(Object):
    value: bool
    _type_label: ClassVar[str] = "boolean"

    def __str__(self) -> str:
        return "true" if self.value else "false"

    def __repr__(self) -> str:
        return f"Boolean({self})"


@_variant
class String(Object):
    value: str
    _type_label: ClassVar[str] = "string"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f'String("{self.value}")'


@_variant
class Array(Object):
    elements: List[Object] = field(default_factory=list)
    _type_label: ClassVar[str] = "array"

    def __hash__(self) -> int:
        return _SHARED_HASH

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.elements) + "]"

    def __repr__(self) -> str:
        return f"Array({_debug_list(self.elements)})"


@_variant
class Hash(Object):
    pairs: Dict[Object, Object] = field(default_factory=dict)
    _type_label: ClassVar[str] = "hash"

    def __hash__(self) -> int:
        return _SHARED_HASH

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k} : {v}" for k, v in self.pairs.items()) + "}"

    def __repr__(self) -> str:
        return f"Hash({_debug_map(self.pairs)})"


@_variant
class NullValue(Object):
    _type_label: ClassVar[str] = "null"

    def __str__(self) -> str:
        return "null"

    def __repr__(self) -> str:
        return "Null"


@dataclass(frozen=True, repr=False, eq=False)
class _CodeObject(Object):
    params: List[Any]
    chunk: Any
    env: Any
    local_names: List[str] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.params == other.params
            and self.chunk is other.chunk
            and self.local_names == other.local_names
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, len(self.params), id(self.chunk), tuple(self.local_names)))


class Function(_CodeObject):
    """A user-defined function with its captured environment."""

    _type_label: ClassVar[str] = "function"

    def __str__(self) -> str:
        return "[function]"

    def __repr__(self) -> str:
        return f"Function(params:{_debug_list(self.params)})"


class AsyncFunction(_CodeObject):
    """A user-defined async function."""

    _type_label: ClassVar[str] = "async function"

    def __str__(self) -> str:
        return "[async function]"

    def __repr__(self) -> str:
        return f"AsyncFunction(params:{_debug_list(self.params)})"


class Method(_CodeObject):
    """A method bound to a struct instance; never equal to anything."""

    _type_label: ClassVar[str] = "method"

    def __eq__(self, other: object) -> bool:
        return False

    def __hash__(self) -> int:
        return _SHARED_HASH

    def __str__(self) -> str:
        return "[method]"

    def __repr__(self) -> str:
        return f"Method(params:{_debug_list(self.params)})"


@_variant
class _BuiltinBase(Object):
    name: str
    min_params: int
    max_params: int
    func: Callable[[List[Object]], Any] = field(compare=False)


class Builtin(_BuiltinBase):
    """A builtin function that raises BuiltinError on failure."""

    _type_label: ClassVar[str] = "builtin function"

    def __str__(self) -> str:
        return f"[built-in function: {self.name}]"

    def __repr__(self) -> str:
        return f'Builtin("{self.name}")'


class BuiltinStd(_BuiltinBase):
    """A standard-library function that raises runtime errors on failure."""

    _type_label: ClassVar[str] = "builtin function"

    def __str__(self) -> str:
        return f"[built-in function: {self.name}]"

    def __repr__(self) -> str:
        return f'BuiltinStd("{self.name}")'


class BuiltinStdAsync(_BuiltinBase):
    """A standard-library function whose result is a future."""

    _type_label: ClassVar[str] = "async builtin function"

    def __str__(self) -> str:
        return f"[async built-in function: {self.name}]"

    def __repr__(self) -> str:
        return f'BuiltinStdAsync("{self.name}")'


@_variant
class Struct(Object):
    """A struct value; like the runtime it models, never equal to anything."""

    name: str
    fields: Dict[str, Object] = field(default_factory=dict)
    methods: Dict[str, Object] = field(default_factory=dict)
    constants: List[Object] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        return False

    def __hash__(self) -> int:
        return _SHARED_HASH

    def type_name(self) -> str:
        return f"struct {self.name}"

    def __str__(self) -> str:
        body = ", ".join(f"{k}: {v}" for k, v in self.fields.items())
        return f"{self.name}{{ {body} }}"

    def __repr__(self) -> str:
        return (
            f"Struct(name:{self.name}, fields:{_debug_map(self.fields)}, "
            f"methods:{_debug_map(self.methods)})"
        )


@_variant
class Module(Object):
    name: str
    exports: Dict[str, Object] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Module:
            return NotImplemented
        return self.name == other.name and set(self.exports) == set(other.exports)

    def __hash__(self) -> int:
        return hash(("module", self.name))

    def type_name(self) -> str:
        return f"module {self.name}"

    def __str__(self) -> str:
        return f"[module: {self.name}]"

    def __repr__(self) -> str:
        keys = "[" + ", ".join(_debug_str(k) for k in self.exports) + "]"
        return f"Module(name:{self.name}, exports:{keys})"


@_variant
class ReturnValue(Object):
    value: Object
    _type_label: ClassVar[str] = "return value"

    def is_returned(self) -> bool:
        return True

    def returned(self) -> Object:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ReturnValue({self.value!r})"


@_variant
class ErrorValue(Object):
    error: GlRuntimeError
    _type_label: ClassVar[str] = "error"

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"Error({self.error!r})"


@_variant
class BreakSignal(Object):
    _type_label: ClassVar[str] = "break"

    def __str__(self) -> str:
        return "break"

    def __repr__(self) -> str:
        return "Break"


@_variant
class ContinueSignal(Object):
    _type_label: ClassVar[str] = "continue"

    def __str__(self) -> str:
        return "continue"

    def __repr__(self) -> str:
        return "Continue"


@_variant
class ThrownValue(Object):
    value: Object
    _type_label: ClassVar[str] = "thrown value"

    def __str__(self) -> str:
        return f"Thrown: {self.value}"

    def __repr__(self) -> str:
        return f"ThrownValue({self.value!r})"


class Future(Object):
    """An async computation that can be awaited exactly once."""

    _type_label: ClassVar[str] = "future"

    def __init__(self, awaitable: Awaitable[Object]) -> None:
        self._awaitable: Optional[Awaitable[Object]] = awaitable

    @property
    def pending(self) -> bool:
        return self._awaitable is not None

    async def resolve(self) -> Object:
        """Await the computation; a second call raises InvalidOperation."""
        if self._awaitable is None:
            raise InvalidOperation("future has already been awaited")
        awaitable, self._awaitable = self._awaitable, None
        return await awaitable

    def __eq__(self, other: object) -> bool:
        return False

    def __hash__(self) -> int:
        return _SHARED_HASH

    def __str__(self) -> str:
        return "[future]"

    def __repr__(self) -> str:
        return "Future(_)"