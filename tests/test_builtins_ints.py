import pytest

from glang.builtins.ints import abs_int, max_int, min_int, pow_int
from glang.errors import BuiltinError
from glang.objects import Float, Integer, String


def test_pow():
    assert pow_int([Integer(2), Integer(10)]) == Integer(1024)


def test_pow_zero_exponent_and_unit_bases():
    assert pow_int([Integer(7), Integer(0)]) == Integer(1)
    assert pow_int([Integer(1), Integer(10**6)]) == Integer(1)
    assert pow_int([Integer(0), Integer(5)]) == Integer(0)


def test_pow_largest_power_of_two_fits():
    assert pow_int([Integer(2), Integer(62)]).value == 2**62


def test_pow_overflow():
    with pytest.raises(BuiltinError) as exc:
        pow_int([Integer(2), Integer(63)])
    assert str(exc.value) == "pow() result overflow"
    with pytest.raises(BuiltinError) as exc:
        pow_int([Integer(3), Integer(1000)])
    assert str(exc.value) == "pow() result overflow"


def test_pow_negative_exponent():
    with pytest.raises(BuiltinError) as exc:
        pow_int([Integer(2), Integer(-1)])
    assert str(exc.value) == "pow() does not support negative exponents"


def test_pow_type_errors():
    with pytest.raises(BuiltinError) as exc:
        pow_int([String("2"), Integer(1)])
    assert str(exc.value) == "pow() expects integer, got string"
    with pytest.raises(BuiltinError) as exc:
        pow_int([])
    assert str(exc.value) == "pow() expects 2 arguments, got 1"


def test_abs():
    assert abs_int([Integer(-5)]) == Integer(5)
    assert abs_int([Integer(5)]) == Integer(5)


def test_abs_errors():
    with pytest.raises(BuiltinError) as exc:
        abs_int([Float(-1.0)])
    assert str(exc.value) == "abs() expects integer, got float"
    with pytest.raises(BuiltinError) as exc:
        abs_int([])
    assert str(exc.value) == "abs() expects 1 argument, got 0"


@pytest.mark.parametrize("a, b", [(3, 9), (9, 3), (-4, -4), (-10, 10)])
def test_min_max_pick_from_arguments(a, b):
    low = min_int([Integer(a), Integer(b)]).value
    high = max_int([Integer(a), Integer(b)]).value
    assert {low, high} <= {a, b}
    assert low <= high
    assert sorted([low, high]) == sorted([a, b])


def test_min_max_errors():
    with pytest.raises(BuiltinError) as exc:
        min_int([String("a"), Integer(1)])
    assert str(exc.value) == "min() expects integer, got string"
    with pytest.raises(BuiltinError) as exc:
        max_int([])
    assert str(exc.value) == "max() expects 2 arguments, got 1"