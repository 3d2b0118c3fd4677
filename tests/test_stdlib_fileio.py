import pytest

from glang.errors import InvalidOperation, TypeMismatch, WrongNumberOfArguments
from glang.objects import Boolean, Integer, NullValue, String
from glang.stdlib import fileio


def s(value):
    return String(str(value))


def names(array):
    return sorted(item.value for item in array.elements)


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "a.txt"
    assert fileio.write_file([s(target), String("hello\nworld")]) == NullValue()
    assert fileio.read_file([s(target)]) == String("hello\nworld")


def test_write_replaces_content(tmp_path):
    target = tmp_path / "a.txt"
    fileio.write_file([s(target), String("first")])
    fileio.write_file([s(target), String("second")])
    assert target.read_text() == "second"


def test_append_creates_and_appends(tmp_path):
    target = tmp_path / "log.txt"
    fileio.append_file([s(target), String("one")])
    fileio.append_file([s(target), String("two")])
    assert fileio.read_file([s(target)]) == String("onetwo")


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(InvalidOperation, match="Could not read from file"):
        fileio.read_file([s(tmp_path / "missing.txt")])


def test_delete_file(tmp_path):
    target = tmp_path / "gone.txt"
    target.write_text("x")
    assert fileio.delete_file([s(target)]) == NullValue()
    assert not target.exists()


def test_delete_missing_file_raises(tmp_path):
    with pytest.raises(InvalidOperation, match="Could not delete file"):
        fileio.delete_file([s(tmp_path / "nothing")])


def test_create_and_delete_nested_dir(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    fileio.create_dir([s(nested)])
    assert fileio.is_dir([s(nested)]) == Boolean(True)
    fileio.create_dir([s(nested)])
    fileio.delete_dir([s(tmp_path / "a")])
    assert fileio.exists([s(tmp_path / "a")]) == Boolean(False)


def test_delete_missing_dir_raises(tmp_path):
    with pytest.raises(InvalidOperation, match="Could not delete directory"):
        fileio.delete_dir([s(tmp_path / "nothing")])


def test_exists_is_file_is_dir(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x")
    assert fileio.exists([s(target)]) == Boolean(True)
    assert fileio.is_file([s(target)]) == Boolean(True)
    assert fileio.is_dir([s(target)]) == Boolean(False)
    assert fileio.is_file([s(tmp_path)]) == Boolean(False)
    assert fileio.exists([s(tmp_path / "no")]) == Boolean(False)


def test_list_dir(tmp_path):
    (tmp_path / "x.txt").write_text("1")
    (tmp_path / "y.txt").write_text("2")
    (tmp_path / "sub").mkdir()
    assert names(fileio.list_dir([s(tmp_path)])) == ["sub", "x.txt", "y.txt"]


def test_list_dir_on_file_raises(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x")
    with pytest.raises(InvalidOperation, match="is not a directory"):
        fileio.list_dir([s(target)])


@pytest.mark.parametrize(
    "func",
    [fileio.read_file, fileio.create_dir, fileio.delete_file, fileio.delete_dir,
     fileio.exists, fileio.is_file, fileio.is_dir, fileio.list_dir],
)
def test_path_functions_check_arguments(func):
    with pytest.raises(WrongNumberOfArguments):
        func([])
    with pytest.raises(TypeMismatch):
        func([Integer(3)])


@pytest.mark.parametrize("func", [fileio.write_file, fileio.append_file])
def test_content_functions_check_arguments(func, tmp_path):
    with pytest.raises(WrongNumberOfArguments):
        func([])
    with pytest.raises(TypeMismatch):
        func([Integer(1), String("x")])
    with pytest.raises(TypeMismatch):
        func([s(tmp_path / "f"), Integer(1)])
    with pytest.raises(TypeMismatch):
        func([s(tmp_path / "f")])
    assert not (tmp_path / "f").exists()


@pytest.mark.asyncio
async def test_async_write_read_append(tmp_path):
    target = tmp_path / "a.txt"
    assert await fileio.write_file_async([s(target), String("ab")]) == NullValue()
    await fileio.append_file_async([s(target), String("cd")])
    assert await fileio.read_file_async([s(target)]) == String("abcd")


@pytest.mark.asyncio
async def test_async_dirs_and_listing(tmp_path):
    nested = tmp_path / "d" / "e"
    await fileio.create_dir_async([s(nested)])
    (nested / "f.txt").write_text("x")
    listing = await fileio.list_dir_async([s(nested)])
    assert names(listing) == ["f.txt"]
    await fileio.delete_file_async([s(nested / "f.txt")])
    assert names(await fileio.list_dir_async([s(nested)])) == []
    await fileio.delete_dir_async([s(tmp_path / "d")])
    assert not (tmp_path / "d").exists()


@pytest.mark.asyncio
async def test_async_errors(tmp_path):
    with pytest.raises(InvalidOperation, match="Could not read from file"):
        await fileio.read_file_async([s(tmp_path / "missing")])
    with pytest.raises(InvalidOperation, match="is not a directory"):
        await fileio.list_dir_async([s(tmp_path / "missing")])
    with pytest.raises(WrongNumberOfArguments):
        await fileio.write_file_async([])
    with pytest.raises(TypeMismatch):
        await fileio.read_file_async([Integer(1)])


@pytest.mark.asyncio
async def test_async_append_into_missing_dir_raises(tmp_path):
    with pytest.raises(InvalidOperation, match="Could not open file"):
        await fileio.append_file_async([s(tmp_path / "no" / "f.txt"), String("x")])