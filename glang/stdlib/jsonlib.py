"""JSON serialization of runtime values."""

from __future__ import annotations

import json
import math
from typing import Any, List

from glang.converters import I64_MAX, I64_MIN
from glang.errors import (
    InvalidArguments,
    InvalidOperation,
    TypeMismatch,
    WrongNumberOfArguments,
)
from glang.objects import (
    Array,
    BigInteger,
    Boolean,
    Float,
    Hash,
    Integer,
    NullValue,
    Object,
    String,
    Struct,
)

U64_MAX = 2**64 - 1
_INDENT = "  "


def _hash_key(key: Object) -> str:
    if isinstance(key, String):
        return key.value
    if isinstance(key, (Integer, BigInteger)):
        return str(key.value)
    if isinstance(key, Boolean):
        return "true" if key.value else "false"
    raise InvalidOperation(
        f"Hash key of type '{key.type_name()}' cannot be converted to JSON string key"
    )


def to_json(obj: Object) -> Any:
    """Convert a runtime value to plain JSON data (dict, list, str, ...)."""
    if isinstance(obj, Integer):
        return obj.value
    if isinstance(obj, BigInteger):
        if I64_MIN <= obj.value <= U64_MAX:
            return obj.value
        try:
            as_float = float(obj.value)
        except OverflowError:
            raise InvalidOperation(
                f"BigInteger {obj.value} converts to non-finite float"
            ) from None
        return as_float
    if isinstance(obj, Float):
        if math.isnan(obj.value):
            kind = "NaN"
        elif math.isinf(obj.value):
            kind = "infinity"
        else:
            return obj.value
        raise InvalidOperation(
            f"Cannot serialize {kind} to JSON (JSON doesn't support infinity or NaN)"
        )
    if isinstance(obj, Boolean):
        return obj.value
    if isinstance(obj, String):
        return obj.value
    if isinstance(obj, Array):
        return [to_json(item) for item in obj.elements]
    if isinstance(obj, Hash):
        return {_hash_key(k): to_json(v) for k, v in obj.pairs.items()}
    if isinstance(obj, Struct):
        return {name: to_json(v) for name, v in obj.fields.items()}
    if isinstance(obj, NullValue):
        return None
    raise InvalidOperation(
        f"Cannot serialize type '{obj.type_name()}' to JSON (unsupported type)"
    )


def from_json(value: Any) -> Object:
    """Convert plain JSON data to a runtime value."""
    if value is None:
        return NullValue()
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        if I64_MIN <= value <= I64_MAX:
            return Integer(value)
        if 0 <= value <= U64_MAX:
            return BigInteger(value)
        return Float(float(value))
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, str):
        return String(value)
    if isinstance(value, list):
        return Array([from_json(item) for item in value])
    if isinstance(value, dict):
        return Hash({String(k): from_json(v) for k, v in value.items()})
    raise TypeError(f"not JSON data: {type(value).__name__}")


def _format_number(value: float) -> str:
    """Shortest round-trip form: 1.0, 0.001, 1e20, 1.5e-7."""
    if value == 0.0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"
    sign = "-" if value < 0 else ""
    mantissa, _, exp_text = repr(abs(value)).partition("e")
    int_part, _, frac_part = mantissa.partition(".")
    digits = (int_part + frac_part).lstrip("0")
    exponent = int(exp_text or "0") - len(frac_part)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped
    length = len(digits)
    kk = length + exponent
    if 0 <= exponent and kk <= 16:
        text = digits + "0" * exponent + ".0"
    elif 0 < kk <= 16:
        text = f"{digits[:kk]}.{digits[kk:]}"
    elif -5 < kk <= 0:
        text = "0." + "0" * (-kk) + digits
    elif length == 1:
        text = f"{digits}e{kk - 1}"
    else:
        text = f"{digits[0]}.{digits[1:]}e{kk - 1}"
    return sign + text


def _encode(value: Any, pretty: bool, level: int = 0) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        items = [_encode(item, pretty, level + 1) for item in value]
        return _wrap("[", "]", items, pretty, level)
    if isinstance(value, dict):
        colon = ": " if pretty else ":"
        items = [
            json.dumps(key, ensure_ascii=False) + colon + _encode(value[key], pretty, level + 1)
            for key in sorted(value)
        ]
        return _wrap("{", "}", items, pretty, level)
    raise TypeError(f"not JSON data: {type(value).__name__}")


def _wrap(opening: str, closing: str, items: List[str], pretty: bool, level: int) -> str:
    if not items:
        return opening + closing
    if not pretty:
        return opening + ",".join(items) + closing
    inner = _INDENT * (level + 1)
    body = ",\n".join(inner + item for item in items)
    return f"{opening}\n{body}\n{_INDENT * level}{closing}"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid number {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError("number out of range")
    return value


def _parse_int(text: str) -> Any:
    value = int(text)
    if I64_MIN <= value <= U64_MAX:
        return value
    return _parse_float(text)


def _parse(text: str) -> Any:
    try:
        return json.loads(
            text,
            parse_float=_parse_float,
            parse_int=_parse_int,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as err:
        raise InvalidArguments(f"JSON parse error: {err}") from None


def _single_arg(args: List[Object]) -> Object:
    if len(args) != 1:
        raise WrongNumberOfArguments(1, 1, len(args))
    return args[0]


def _single_string(args: List[Object]) -> str:
    value = _single_arg(args)
    if not isinstance(value, String):
        raise TypeMismatch("string", value.type_name())
    return value.value


def serialize(args: List[Object]) -> Object:
    """Serialize one value to compact JSON text with sorted object keys."""
    return String(_encode(to_json(_single_arg(args)), pretty=False))


def deserialize(args: List[Object]) -> Object:
    """Parse JSON text into a runtime value."""
    return from_json(_parse(_single_string(args)))


def prettify(args: List[Object]) -> Object:
    """Re-format JSON text with two-space indentation."""
    return String(_encode(_parse(_single_string(args)), pretty=True))


def validate(args: List[Object]) -> Object:
    """Whether a string holds valid JSON."""
    text = _single_string(args)
    try:
        _parse(text)
    except InvalidArguments:
        return Boolean(False)
    return Boolean(True)