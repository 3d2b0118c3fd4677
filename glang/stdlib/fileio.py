"""File-system functions of the standard library, in blocking, async and future forms."""

from __future__ import annotations

import asyncio
import os
import shutil
from pathlib import Path
from typing import List, Tuple

from glang.errors import InvalidOperation, TypeMismatch, WrongNumberOfArguments
from glang.objects import Array, Boolean, Future, NullValue, Object, String


def _os_message(err: OSError) -> str:
    if err.strerror and err.errno is not None:
        return f"{err.strerror} (os error {err.errno})"
    return str(err)


def _path_arg(args: List[Object]) -> str:
    if not args:
        raise WrongNumberOfArguments(1, 1, 0)
    value = args[0]
    if not isinstance(value, String):
        raise TypeMismatch("string", value.type_name())
    return value.value


def _path_and_content(args: List[Object]) -> Tuple[str, str]:
    if not args:
        raise WrongNumberOfArguments(2, 2, 0)
    first = args[0]
    second = args[1] if len(args) > 1 else None
    if isinstance(first, String) and isinstance(second, String):
        return first.value, second.value
    if isinstance(first, String) and second is not None:
        raise TypeMismatch("string", second.type_name())
    raise TypeMismatch("string", first.type_name())


def _read(path: str) -> Object:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return String(handle.read())
    except (OSError, UnicodeDecodeError) as err:
        message = _os_message(err) if isinstance(err, OSError) else str(err)
        raise InvalidOperation(f"Could not read from file: {message}") from None


def _create_dir(path: str) -> Object:
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as err:
        raise InvalidOperation(f"Could not create directory: {_os_message(err)}") from None
    return NullValue()


def _delete_file(path: str) -> Object:
    try:
        os.remove(path)
    except OSError as err:
        raise InvalidOperation(f"Could not delete file: {_os_message(err)}") from None
    return NullValue()


def _delete_dir(path: str) -> Object:
    try:
        shutil.rmtree(path)
    except OSError as err:
        raise InvalidOperation(f"Could not delete directory: {_os_message(err)}") from None
    return NullValue()


def _write(path: str, content: str) -> Object:
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as err:
        raise InvalidOperation(f"Could not write to file: {_os_message(err)}") from None
    return NullValue()


def _append(path: str, content: str, open_message: str) -> Object:
    try:
        handle = open(path, "a", encoding="utf-8", newline="")
    except OSError as err:
        raise InvalidOperation(f"{open_message}: {_os_message(err)}") from None
    with handle:
        try:
            handle.write(content)
        except OSError as err:
            raise InvalidOperation(
                f"Could not append to file: {_os_message(err)}"
            ) from None
    return NullValue()


def _utf8_name(name: str) -> bool:
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _list(path: str) -> Object:
    if not Path(path).is_dir():
        raise InvalidOperation(f"'{path}' is not a directory")
    try:
        with os.scandir(path) as entries:
            names = [entry.name for entry in entries]
    except OSError as err:
        raise InvalidOperation(_os_message(err)) from None
    return Array([String(name) for name in names if _utf8_name(name)])


def read_file(args: List[Object]) -> Object:
    """Read a whole text file."""
    return _read(_path_arg(args))


async def read_file_async(args: List[Object]) -> Object:
    """Read a whole text file without blocking the event loop."""
    path = _path_arg(args)
    return await asyncio.to_thread(_read, path)


def read_file_future(args: List[Object]) -> Object:
    """A future that reads a text file when awaited."""
    return Future(read_file_async(list(args)))


def create_dir(args: List[Object]) -> Object:
    """Create a directory and any missing parents."""
    return _create_dir(_path_arg(args))


async def create_dir_async(args: List[Object]) -> Object:
    """Create a directory and any missing parents without blocking."""
    path = _path_arg(args)
    return await asyncio.to_thread(_create_dir, path)


def create_dir_future(args: List[Object]) -> Object:
    """A future that creates a directory when awaited."""
    return Future(create_dir_async(list(args)))


def delete_file(args: List[Object]) -> Object:
    """Delete a file."""
    return _delete_file(_path_arg(args))


async def delete_file_async(args: List[Object]) -> Object:
    """Delete a file without blocking."""
    path = _path_arg(args)
    return await asyncio.to_thread(_delete_file, path)


def delete_file_future(args: List[Object]) -> Object:
    """A future that deletes a file when awaited."""
    return Future(delete_file_async(list(args)))


def delete_dir(args: List[Object]) -> Object:
    """Delete a directory and everything in it."""
    return _delete_dir(_path_arg(args))


async def delete_dir_async(args: List[Object]) -> Object:
    """Delete a directory and everything in it without blocking."""
    path = _path_arg(args)
    return await asyncio.to_thread(_delete_dir, path)


def delete_dir_future(args: List[Object]) -> Object:
    """A future that deletes a directory when awaited."""
    return Future(delete_dir_async(list(args)))


def write_file(args: List[Object]) -> Object:
    """Write text to a file, replacing what it held."""
    return _write(*_path_and_content(args))


async def write_file_async(args: List[Object]) -> Object:
    """Write text to a file without blocking."""
    path, content = _path_and_content(args)
    return await asyncio.to_thread(_write, path, content)


def write_file_future(args: List[Object]) -> Object:
    """A future that writes a file when awaited."""
    return Future(write_file_async(list(args)))


def append_file(args: List[Object]) -> Object:
    """Append text to a file, creating it if needed."""
    path, content = _path_and_content(args)
    return _append(path, content, "Could not append to file")


async def append_file_async(args: List[Object]) -> Object:
    """Append text to a file without blocking, creating it if needed."""
    path, content = _path_and_content(args)
    return await asyncio.to_thread(_append, path, content, "Could not open file")


def append_file_future(args: List[Object]) -> Object:
    """A future that appends to a file when awaited."""
    return Future(append_file_async(list(args)))


def exists(args: List[Object]) -> Object:
    """Whether the path exists."""
    return Boolean(Path(_path_arg(args)).exists())


def is_file(args: List[Object]) -> Object:
    """Whether the path is a regular file."""
    return Boolean(Path(_path_arg(args)).is_file())


def is_dir(args: List[Object]) -> Object:
    """Whether the path is a directory."""
    return Boolean(Path(_path_arg(args)).is_dir())


def list_dir(args: List[Object]) -> Object:
    """The names of the entries in a directory."""
    return _list(_path_arg(args))


async def list_dir_async(args: List[Object]) -> Object:
    """The names of the entries in a directory, read without blocking."""
    path = _path_arg(args)
    return await asyncio.to_thread(_list, path)


def list_dir_future(args: List[Object]) -> Object:
    """A future that lists a directory when awaited."""
    return Future(list_dir_async(list(args)))