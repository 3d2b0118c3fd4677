# glang

The runtime layer of the G scripting language: the value model, scoped
environments, bytecode chunks, arithmetic and comparison rules, the builtin
functions and methods, and the standard library modules (strings, math,
JSON, time, file I/O, HTTP and process arguments). It has no dependencies
beyond the Python standard library.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Values

Every G expression evaluates to a subclass of `glang.objects.Object`:
`Integer`, `BigInteger`, `Float`, `Boolean`, `String`, `Array`, `Hash`,
`NullValue`, `Struct`, `Module`, `Function`, `AsyncFunction`, `Method`,
`Builtin`, `BuiltinStd`, `BuiltinStdAsync`, `Future`, and the control-flow
values `ReturnValue`, `ThrownValue`, `BreakSignal`, `ContinueSignal` and
`ErrorValue`. Each value reports its G type name through `type_name()` and
prints (`str()`) the way G prints it.

```python
from glang.objects import Integer, String, Array
from glang.operations import object_add

print(object_add(Integer(2), Integer(40)))          # 42
print(object_add(String("g"), String("-lang")))     # g-lang
print(Array([Integer(1), Integer(2)]).type_name())  # array
```

`glang.operations` provides `object_add`, `object_subtract`,
`object_multiply`, `object_divide`, `object_modulo` and the comparisons
`object_compare_gt`, `object_compare_gte`, `object_compare_lt` and
`object_compare_lte`. Integer results widen to `BigInteger` when they leave
the 64-bit range and narrow back to `Integer` when they fit; a `Float`
operand makes the result a float. Integer division and modulo truncate
toward zero. Division or modulo by zero raises `DivisionByZero`, operands of
the wrong type raise `TypeMismatch` (or `InvalidOperation` for `+`), and an
`ErrorValue` operand has its wrapped error raised.

`glang.converters` turns values into plain Python ones (`obj_to_bool`,
`obj_to_int`, `obj_to_float`, `to_bigint`), checks callability and
hashability (`obj_to_func`, `obj_to_hash`) and wraps integers
(`normalize_int`).

A `Future` wraps an awaitable; `await future.resolve()` runs it and returns
the result. Resolving the same future a second time raises
`InvalidOperation`.

## Errors

`glang.errors` defines the parser errors (`UnexpectedToken`,
`ExpectedToken`, `InvalidExpression`, `UnexpectedEOF`, `AwaitOutsideAsync`)
and the runtime errors (`TypeMismatch`, `UndefinedVariable`,
`InvalidOperation`, `DivisionByZero`, `ModuloByZero`, `IndexOutOfBounds`,
`WrongNumberOfArguments`, `NotCallable`, `NotHashable`, `NotIndexable`,
`EmptyArray`, `InvalidArguments`, `UncaughtException`), all exceptions.
`format_error(error)` prefixes the message with `Parser Error:` or
`Runtime Error:`.

## Builtins and methods

`glang.builtins.registry.get_builtins()` returns the global builtin
functions (`print`, `println`, `input`, `type`, `len`, `push`, `keys`, ...)
as `(name, Builtin)` pairs. A builtin function that fails raises
`glang.errors.BuiltinError` with its message.

`glang.builtins.methods.call_method(obj, name, args)` dispatches the
methods available on each value type, passing the value as the first
argument:

```python
from glang.builtins.methods import call_method
from glang.objects import String

print(call_method(String("hello"), "to_upper", []))  # HELLO
```

An unknown method raises `InvalidOperation`; a method that fails raises
`InvalidArguments` carrying the builtin's message. Values are never changed
in place: methods such as `push`, `set` or `remove` return a new value.

## Environments

`glang.environment.Environment` holds variables by name and by numbered
slot, with a parent chain for lexical scoping. `get(name, slot=None)` looks
in the slot first and then by name through the enclosing scopes;
`set(name, value, slot=None)` writes both the slot and the name, or, without
a slot, updates the scope that already holds the name.
`Environment.with_builtins()` makes a root scope holding every builtin
function.

## Bytecode chunks

`glang.chunk.Chunk` holds compiled code as bytes, its constant table and the
source line of every byte, with `add_constant`, `write_byte`,
`current_offset` and `patch_u16` for back-patching jump targets.

## Standard library

The `glang.stdlib` package holds the standard modules:

- `text`: `string_join`, `string_reverse`, `string_repeat`
- `mathlib`: `clamp`, `random_int`, rounding, roots, trigonometry,
  logarithms, `absolute`, `minimum`, `maximum`, `pi`, `e`
- `jsonlib`: `serialize` (compact, keys sorted), `deserialize`, `prettify`
  (two-space indent), `validate`, and `to_json` / `from_json` between values
  and plain Python data
- `timelib`: `now` (milliseconds since the epoch), `sleep` (a `Future`) and
  `sleep_async`
- `fileio`: reading, writing, appending, creating and deleting files and
  directories, `exists`, `is_file`, `is_dir`, `list_dir`; most operations
  come in a blocking form, an `_async` coroutine and a `_future` form
- `httplib`: `http_get`, `http_post`, `http_put`, `http_delete`, each
  returning a `Future` that yields a hash with `status` and `body`
- `sysenv`: `env_args`, the process's command-line arguments

Standard library functions take a list of values and raise runtime errors
from `glang.errors` when the arguments do not fit.

## What this package does not do

It has no lexer, parser, compiler or virtual machine, so it cannot run G
source text, and it provides no command-line program. Nothing here loads
modules from files or runs WebAssembly modules. It is the value model and
library that such an interpreter would use.