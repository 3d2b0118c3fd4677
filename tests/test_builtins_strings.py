import pytest

from glang.builtins.strings import (
    ends_with,
    replace,
    split,
    starts_with,
    to_lower,
    to_upper,
    trim,
)
from glang.errors import BuiltinError
from glang.objects import Array, Boolean, Integer, String


def test_case_conversion_round_trip():
    upper = to_upper([String("Hello World")])
    assert upper.value.isupper()
    assert to_lower([upper]) == to_lower([String("Hello World")])
    assert to_upper([to_lower([String("MiXeD")])]) == to_upper([String("MiXeD")])


def test_case_conversion_errors():
    with pytest.raises(BuiltinError, match=r"to_upper\(\) expects string, got integer"):
        to_upper([Integer(1)])
    with pytest.raises(BuiltinError, match=r"to_upper\(\) expects 1 argument, got 0"):
        to_upper([])
    with pytest.raises(BuiltinError, match=r"to_lower\(\) expects a string, got integer"):
        to_lower([Integer(1)])
    with pytest.raises(BuiltinError, match=r"to_lower\(\) expects 1 argument, got 0"):
        to_lower([])


def test_starts_and_ends_with():
    assert starts_with([String("glang"), String("gl")]) == Boolean(True)
    assert starts_with([String("glang"), String("ng")]) == Boolean(False)
    assert ends_with([String("glang"), String("ng")]) == Boolean(True)
    assert ends_with([String("glang"), String("gl")]) == Boolean(False)


def test_starts_with_errors():
    with pytest.raises(BuiltinError, match=r"starts_with\(\) expects string, got string"):
        starts_with([String("a"), Integer(1)])
    with pytest.raises(BuiltinError, match=r"starts_with\(\) expects 2 arguments, got 1"):
        starts_with([])
    with pytest.raises(BuiltinError, match=r"ends_with\(\) expects string, got array"):
        ends_with([Array([]), String("a")])


def test_replace():
    result = replace([String("a-b-c"), String("-"), String("+")])
    assert result == String("a+b+c")
    assert "-" not in result.value


def test_replace_errors():
    with pytest.raises(BuiltinError, match=r"replace\(\) expects string, got integer"):
        replace([Integer(1), String("a"), String("b")])
    with pytest.raises(BuiltinError, match=r"replace\(\) expects 3 arguments, got 3"):
        replace([])


def test_split_and_join_round_trip():
    parts = split([String("a,b,c"), String(",")])
    assert parts == Array([String("a"), String("b"), String("c")])
    assert ",".join(part.value for part in parts.elements) == "a,b,c"


def test_split_empty_delimiter():
    assert split([String("ab"), String("")]) == Array(
        [String(""), String("a"), String("b"), String("")]
    )


def test_split_errors():
    with pytest.raises(BuiltinError, match=r"split\(\) expects string, got integer"):
        split([Integer(3), String(",")])
    with pytest.raises(BuiltinError, match=r"split\(\) expects 2 arguments, got 1"):
        split([])


def test_trim():
    assert trim([String("  hi there\t\n")]) == String("hi there")
    with pytest.raises(BuiltinError, match=r"trim\(\) expects string, got integer"):
        trim([Integer(1)])
    with pytest.raises(BuiltinError, match=r"trim\(\) expects 1 argument, got 0"):
        trim([])