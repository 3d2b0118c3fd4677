import pytest

from glang.errors import InvalidArguments, TypeMismatch, WrongNumberOfArguments
from glang.objects import Array, Integer, String
from glang.stdlib.text import string_join, string_repeat, string_reverse


def test_join_strings_with_separator():
    result = string_join([Array([String("a"), String("b")]), String("-")])
    assert result == String("a-b")


def test_join_empty_array_is_empty_string():
    result = string_join([Array([]), String(",")])
    assert len(result.value) == 0


def test_join_single_element_has_no_separator():
    result = string_join([Array([String("only")]), String("::")])
    assert result == String("only")


def test_join_rejects_non_string_element():
    with pytest.raises(TypeMismatch, match="expected string, got integer"):
        string_join([Array([String("a"), Integer(1)]), String(",")])


def test_join_rejects_wrong_argument_types():
    with pytest.raises(TypeMismatch, match="array, string"):
        string_join([String("a"), String(",")])


def test_join_rejects_missing_arguments():
    with pytest.raises(TypeMismatch):
        string_join([Array([])])


@pytest.mark.parametrize("text", ["hello", "héllo wörld", "", "a"])
def test_reverse_twice_is_identity(text):
    once = string_reverse([String(text)])
    assert string_reverse([once]) == String(text)
    assert len(once.value) == len(text)


def test_reverse_moves_last_character_first():
    result = string_reverse([String("xyz")])
    assert result.value[0] == "z"
    assert result.value[-1] == "x"


def test_reverse_type_mismatch():
    with pytest.raises(TypeMismatch, match="expected string, got integer"):
        string_reverse([Integer(3)])


def test_reverse_without_arguments():
    with pytest.raises(WrongNumberOfArguments):
        string_reverse([])


def test_repeat_length_and_content():
    result = string_repeat([String("ab"), Integer(4)])
    assert len(result.value) == 8
    assert result.value.count("ab") == 4


def test_repeat_zero_times_is_empty():
    assert len(string_repeat([String("ab"), Integer(0)]).value) == 0


def test_repeat_negative_count():
    with pytest.raises(InvalidArguments, match="repeat count must be non-negative"):
        string_repeat([String("ab"), Integer(-1)])


def test_repeat_type_mismatch():
    with pytest.raises(TypeMismatch, match="string, integer"):
        string_repeat([Integer(1), Integer(2)])