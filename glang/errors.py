"""Error types reported by the parser and the runtime."""

from __future__ import annotations

from typing import Any


def _at(text: str, location: Any) -> str:
    return text if location is None else f"{text} at {location}"


class LangError(Exception):
    """Base of every error the language reports."""

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, str(self)))


# --- parser errors -------------------------------------------------------


class ParserError(LangError):
    """An error found while parsing source text."""

    location: Any = None


class UnexpectedToken(ParserError):
    def __init__(self, token: str, location: Any = None) -> None:
        super().__init__(token, location)
        self.token = token
        self.location = location

    def __str__(self) -> str:
        return _at(f"Unexpected token: {self.token}", self.location)


class ExpectedToken(ParserError):
    def __init__(self, expected: str, found: str, location: Any = None) -> None:
        super().__init__(expected, found, location)
        self.expected = expected
        self.found = found
        self.location = location

    def __str__(self) -> str:
        return _at(f"Expected '{self.expected}', found '{self.found}'", self.location)


class InvalidExpression(ParserError):
    def __init__(self, message: str, location: Any = None) -> None:
        super().__init__(message, location)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        return _at(f"Invalid expression: {self.message}", self.location)


class UnexpectedEOF(ParserError):
    def __init__(self, location: Any = None) -> None:
        super().__init__(location)
        self.location = location

    def __str__(self) -> str:
        return _at("Unexpected end of file", self.location)


class AwaitOutsideAsync(ParserError):
    def __init__(self, location: Any = None) -> None:
        super().__init__(location)
        self.location = location

    def __str__(self) -> str:
        return _at("Cannot use 'await' outside of an async function", self.location)


# --- runtime errors ------------------------------------------------------


class GlRuntimeError(LangError):
    """An error raised while a program runs."""


class TypeMismatch(GlRuntimeError):
    def __init__(self, expected: str, got: str) -> None:
        super().__init__(expected, got)
        self.expected = expected
        self.got = got

    def __str__(self) -> str:
        return f"Type mismatch: expected {self.expected}, got {self.got}"


class UndefinedVariable(GlRuntimeError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Undefined variable: '{self.name}'"


class InvalidOperation(GlRuntimeError):
    def __init__(self, operation: str) -> None:
        super().__init__(operation)
        self.operation = operation

    def __str__(self) -> str:
        return f"Invalid operation: {self.operation}"


class DivisionByZero(GlRuntimeError):
    def __str__(self) -> str:
        return "Invalid operation, Division by zero"


class ModuloByZero(GlRuntimeError):
    def __str__(self) -> str:
        return "Invalid operation, Modulo by zero"


class IndexOutOfBounds(GlRuntimeError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(index, length)
        self.index = index
        self.length = length

    def __str__(self) -> str:
        return f"Index {self.index} out of bounds for array of length {self.length}"


class WrongNumberOfArguments(GlRuntimeError):
    def __init__(self, min_args: int, max_args: int, got: int) -> None:
        super().__init__(min_args, max_args, got)
        self.min_args = min_args
        self.max_args = max_args
        self.got = got

    def __str__(self) -> str:
        if self.min_args != self.max_args:
            return (
                f"Wrong number of arguments: min {self.min_args}, "
                f"max: {self.max_args} got {self.got}"
            )
        return f"Wrong number of arguments: expected {self.min_args} got {self.got}"


class NotCallable(GlRuntimeError):
    def __init__(self, what: str) -> None:
        super().__init__(what)
        self.what = what

    def __str__(self) -> str:
        return f"{self.what} is not callable"


class NotHashable(GlRuntimeError):
    def __init__(self, what: str) -> None:
        super().__init__(what)
        self.what = what

    def __str__(self) -> str:
        return f"{self.what} is not hashable"


class NotIndexable(GlRuntimeError):
    def __init__(self, what: str) -> None:
        super().__init__(what)
        self.what = what

    def __str__(self) -> str:
        return f"{self.what} is not indexable"


class EmptyArray(GlRuntimeError):
    def __str__(self) -> str:
        return "Cannot perform operation on empty array"


class InvalidArguments(GlRuntimeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Invalid arguments: {self.message}"


class UncaughtException(GlRuntimeError):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Uncaught exception: {self.message}"


class BuiltinError(Exception):
    """Raised by a builtin function; the message is shown as it is."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def format_error(error: LangError) -> str:
    """Render an error with the prefix naming the stage that reported it."""
    if isinstance(error, ParserError):
        return f"Parser Error: {error}"
    if isinstance(error, GlRuntimeError):
        return f"Runtime Error: {error}"
    raise TypeError(f"cannot format {type(error).__name__} as a language error")