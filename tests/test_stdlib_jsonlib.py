import json
import math

import pytest

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
    BreakSignal,
    Float,
    Hash,
    Integer,
    NullValue,
    String,
    Struct,
)
from glang.stdlib import jsonlib


def _roundtrip(obj):
    return jsonlib.deserialize([jsonlib.serialize([obj])])


def test_serialize_sorts_keys_compactly():
    obj = Hash({String("b"): Integer(1), String("a"): Boolean(True)})
    assert jsonlib.serialize([obj]) == String('{"a":true,"b":1}')


def test_serialize_whole_float_keeps_fraction():
    assert jsonlib.serialize([Float(1.0)]) == String("1.0")


def test_serialize_large_float_exponent_form():
    text = jsonlib.serialize([Float(1e20)]).value
    assert text == "1e20"


@pytest.mark.parametrize(
    "value", [0.1, 1.0, 1e20, 1.5e-7, -2.5, 123456.789, 1e300, 5e-324, 0.001, 1e16]
)
def test_float_roundtrip(value):
    text = jsonlib.serialize([Float(value)]).value
    assert "+" not in text
    assert float(text) == value
    assert _roundtrip(Float(value)) == Float(value)


def test_nested_roundtrip():
    obj = Hash(
        {
            String("list"): Array([Integer(1), String("two"), NullValue()]),
            String("flag"): Boolean(False),
            String("inner"): Hash({String("x"): Float(2.5)}),
        }
    )
    assert _roundtrip(obj) == obj


def test_non_string_keys_become_strings():
    obj = Hash({Integer(1): Integer(10), Boolean(True): Integer(20)})
    back = _roundtrip(obj)
    assert back == Hash({String("1"): Integer(10), String("true"): Integer(20)})


def test_unicode_is_not_escaped():
    text = jsonlib.serialize([String("é\n")]).value
    assert "é" in text
    assert "\\n" in text
    assert _roundtrip(String("é\n")) == String("é\n")


def test_struct_serializes_its_fields():
    obj = Struct("Point", {"x": Integer(1), "y": Integer(2)})
    assert _roundtrip(obj) == Hash({String("x"): Integer(1), String("y"): Integer(2)})


def test_big_integers():
    assert _roundtrip(BigInteger(18446744073709551615)) == BigInteger(18446744073709551615)
    assert _roundtrip(BigInteger(9223372036854775807)) == Integer(9223372036854775807)
    assert _roundtrip(BigInteger(2**70)) == Float(float(2**70))


def test_huge_big_integer_rejected():
    with pytest.raises(InvalidOperation, match="non-finite float"):
        jsonlib.serialize([BigInteger(10**400)])


def test_non_finite_floats_rejected():
    with pytest.raises(InvalidOperation, match="NaN"):
        jsonlib.serialize([Float(math.nan)])
    with pytest.raises(InvalidOperation, match="infinity"):
        jsonlib.serialize([Float(math.inf)])


def test_unsupported_key_and_type():
    with pytest.raises(InvalidOperation, match="cannot be converted to JSON string key"):
        jsonlib.serialize([Hash({Float(1.0): Integer(1)})])
    with pytest.raises(InvalidOperation, match="unsupported type"):
        jsonlib.serialize([BreakSignal()])


def test_argument_count_checked():
    with pytest.raises(WrongNumberOfArguments):
        jsonlib.serialize([Integer(1), Integer(2)])
    with pytest.raises(WrongNumberOfArguments):
        jsonlib.deserialize([])


def test_deserialize_requires_string():
    with pytest.raises(TypeMismatch, match="expected string, got integer"):
        jsonlib.deserialize([Integer(1)])


@pytest.mark.parametrize("text", ["{", "NaN", "[1,]", "1e400", ""])
def test_deserialize_invalid_text(text):
    with pytest.raises(InvalidArguments, match="JSON parse error"):
        jsonlib.deserialize([String(text)])


def test_deserialize_large_unsigned_becomes_big_integer():
    assert jsonlib.deserialize([String("18446744073709551615")]) == BigInteger(
        18446744073709551615
    )


def test_validate():
    assert jsonlib.validate([String("[]")]) == Boolean(True)
    assert jsonlib.validate([String("{")]) == Boolean(False)
    with pytest.raises(TypeMismatch):
        jsonlib.validate([NullValue()])


def test_prettify_preserves_content_and_indents():
    source = '{"b":1,"a":[1,2],"c":{}}'
    pretty = jsonlib.prettify([String(source)]).value
    assert json.loads(pretty) == json.loads(source)
    lines = pretty.splitlines()
    assert lines[0] == "{"
    assert lines[-1] == "}"
    assert all(line.startswith("  ") for line in lines[1:-1])
    assert pretty.index('"a"') < pretty.index('"b"') < pretty.index('"c"')


def test_prettify_invalid_text():
    with pytest.raises(InvalidArguments, match="JSON parse error"):
        jsonlib.prettify([String("[")])


def test_to_json_and_from_json_roundtrip():
    data = {"k": [1, 2.5, True, None, "s"]}
    assert jsonlib.to_json(jsonlib.from_json(data)) == data
    assert jsonlib.from_json(data) == Hash(
        {
            String("k"): Array(
                [Integer(1), Float(2.5), Boolean(True), NullValue(), String("s")]
            )
        }
    )