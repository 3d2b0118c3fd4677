"""Math functions of the standard library."""

from __future__ import annotations

import math
import random
from typing import Callable, List

from glang.converters import I64_MAX
from glang.errors import InvalidArguments, TypeMismatch, WrongNumberOfArguments
from glang.objects import Float, Integer, Object

_NUMERIC = "float or integer"


def _first(args: List[Object]) -> Object:
    if not args:
        raise WrongNumberOfArguments(1, 1, 0)
    return args[0]


def _as_float(value: Object, expected: str = _NUMERIC) -> float:
    if isinstance(value, Float):
        return value.value
    if isinstance(value, Integer):
        return float(value.value)
    raise TypeMismatch(expected, value.type_name())


def _only_float(args: List[Object]) -> float:
    value = _first(args)
    if not isinstance(value, Float):
        raise TypeMismatch("float", value.type_name())
    return value.value


def _nan_on_domain_error(func: Callable[[float], float], x: float) -> float:
    try:
        return func(x)
    except ValueError:
        return math.nan


def clamp(args: List[Object]) -> Object:
    """Clamp an integer between a minimum and a maximum."""
    if len(args) >= 3 and all(isinstance(a, Integer) for a in args[:3]):
        n, low, high = (a.value for a in args[:3])
        if low > high:
            raise InvalidArguments("min cannot be greater than max")
        return Integer(max(low, min(n, high)))
    raise TypeMismatch("integer, integer, integer", "invalid arguments")


def random_int(args: List[Object]) -> Object:
    """A random integer: 0..=10, 0..max, or min..=max."""
    if not args:
        return Integer(random.randint(0, 10))
    if len(args) == 1 and isinstance(args[0], Integer):
        upper = args[0].value
        if upper < 0:
            raise InvalidArguments("max must be non negative")
        if upper == 0:
            raise InvalidArguments("max must be greater than zero")
        return Integer(random.randrange(0, upper))
    if len(args) == 2 and isinstance(args[0], Integer) and isinstance(args[1], Integer):
        low, high = args[0].value, args[1].value
        if high < low:
            raise InvalidArguments("min must be lower than or equal to max")
        return Integer(random.randint(low, high))
    raise InvalidArguments("random() expects 0, 1, or 2 integer arguments")


def round_float(args: List[Object]) -> Object:
    """Round a float to the nearest whole number, halves away from zero."""
    x = _only_float(args)
    if not math.isfinite(x):
        return Float(x)
    whole = math.trunc(x)
    if abs(x - whole) >= 0.5:
        whole += 1 if x > 0 else -1
    return Float(math.copysign(float(whole), x))


def floor(args: List[Object]) -> Object:
    """Round a float down."""
    x = _only_float(args)
    if not math.isfinite(x):
        return Float(x)
    return Float(math.copysign(float(math.floor(x)), x))


def ceil(args: List[Object]) -> Object:
    """Round a float up."""
    x = _only_float(args)
    if not math.isfinite(x):
        return Float(x)
    return Float(math.copysign(float(math.ceil(x)), x))


def sqrt(args: List[Object]) -> Object:
    """Square root of a non-negative number."""
    x = _as_float(_first(args))
    if x < 0.0:
        raise InvalidArguments("sqrt argument must be non-negative")
    return Float(math.sqrt(x))


def sin(args: List[Object]) -> Object:
    """Sine of an angle in radians."""
    return Float(_nan_on_domain_error(math.sin, _as_float(_first(args))))


def cos(args: List[Object]) -> Object:
    """Cosine of an angle in radians."""
    return Float(_nan_on_domain_error(math.cos, _as_float(_first(args))))


def tan(args: List[Object]) -> Object:
    """Tangent of an angle in radians."""
    return Float(_nan_on_domain_error(math.tan, _as_float(_first(args))))


def log(args: List[Object]) -> Object:
    """Natural logarithm of a positive number."""
    x = _as_float(_first(args))
    if x <= 0.0:
        raise InvalidArguments("log argument must be positive")
    return Float(math.log(x))


def log10(args: List[Object]) -> Object:
    """Base-10 logarithm of a positive number."""
    x = _as_float(_first(args))
    if x <= 0.0:
        raise InvalidArguments("log10 argument must be positive")
    return Float(math.log10(x))


def absolute(args: List[Object]) -> Object:
    """Absolute value of an integer or float."""
    value = _first(args)
    if isinstance(value, Integer):
        result = abs(value.value)
        if result > I64_MAX:
            raise InvalidArguments("abs() result overflow")
        return Integer(result)
    if isinstance(value, Float):
        return Float(abs(value.value))
    raise TypeMismatch("integer or float", value.type_name())


def _float_min(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _float_max(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _pick(args: List[Object], int_pick, float_pick) -> Object:
    if len(args) >= 2:
        a, b = args[0], args[1]
        if isinstance(a, Integer) and isinstance(b, Integer):
            return Integer(int_pick(a.value, b.value))
        if isinstance(a, (Integer, Float)) and isinstance(b, (Integer, Float)):
            return Float(float_pick(float(a.value), float(b.value)))
    raise TypeMismatch("integer or float, integer or float", "invalid arguments")


def minimum(args: List[Object]) -> Object:
    """The smaller of two numbers; a float operand makes the result a float."""
    return _pick(args, min, _float_min)


def maximum(args: List[Object]) -> Object:
    """The larger of two numbers; a float operand makes the result a float."""
    return _pick(args, max, _float_max)


def pi() -> Object:
    """The constant pi."""
    return Float(math.pi)


def e() -> Object:
    """Euler's number."""
    return Float(math.e)