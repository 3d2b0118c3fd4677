import pytest

from glang.builtins.hashes import clear, has_key, keys, set_key, values
from glang.errors import BuiltinError
from glang.objects import Array, Boolean, Float, Hash, Integer, String


@pytest.fixture
def sample():
    return Hash({String("a"): Integer(1), Integer(2): Boolean(True)})


def test_set_key_returns_new_hash(sample):
    result = set_key([sample, String("c"), Integer(9)])
    assert result.pairs[String("c")] == Integer(9)
    assert String("c") not in sample.pairs
    assert len(result.pairs) == len(sample.pairs) + 1


def test_set_key_overwrites(sample):
    result = set_key([sample, String("a"), Integer(5)])
    assert result.pairs[String("a")] == Integer(5)
    assert len(result.pairs) == len(sample.pairs)


def test_set_key_errors(sample):
    with pytest.raises(BuiltinError, match="set\\(\\) key must be integer, boolean, or string, got float"):
        set_key([sample, Float(1.0), Integer(1)])
    with pytest.raises(BuiltinError, match=r"set\(\) expects hash, got array"):
        set_key([Array([]), String("a"), Integer(1)])
    with pytest.raises(BuiltinError, match=r"set\(\) expects hash, got hash"):
        set_key([sample, String("a")])
    with pytest.raises(BuiltinError, match=r"set\(\) expects 3 arguments, got 1"):
        set_key([])


def test_has_key(sample):
    assert has_key([sample, String("a")]) == Boolean(True)
    assert has_key([sample, Integer(2)]) == Boolean(True)
    assert has_key([sample, String("z")]) == Boolean(False)
    assert has_key([sample, Boolean(True)]) == Boolean(False)


def test_has_key_errors(sample):
    with pytest.raises(BuiltinError, match="has\\(\\) key must be integer, boolean, or string, got array"):
        has_key([sample, Array([])])
    with pytest.raises(BuiltinError, match=r"has\(\) expects hash, got string"):
        has_key([String("x"), String("a")])
    with pytest.raises(BuiltinError, match=r"has\(\) expects 2 arguments, got 1"):
        has_key([])


def test_keys_and_values_line_up(sample):
    key_list = keys([sample]).elements
    value_list = values([sample]).elements
    assert [sample.pairs[k] for k in key_list] == value_list
    assert set(key_list) == set(sample.pairs)


def test_clear(sample):
    assert clear([sample]) == Hash({})
    assert len(sample.pairs) == 2


@pytest.mark.parametrize("func,name", [(keys, "keys"), (values, "values"), (clear, "clear")])
def test_single_argument_errors(func, name):
    with pytest.raises(BuiltinError, match=rf"{name}\(\) expects hash, got integer"):
        func([Integer(1)])
    with pytest.raises(BuiltinError, match=rf"{name}\(\) expects 1 argument, got 0"):
        func([])