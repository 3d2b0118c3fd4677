"""Bytecode chunks: compiled code together with its constants and source lines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from glang.objects import Object

MAX_CONSTANTS = 0xFFFF
MAX_LINE = 0xFFFF


@dataclass
class Chunk:
    """A unit of compiled bytecode: a program, function body or block."""

    code: bytearray = field(default_factory=bytearray)
    constants: List[Object] = field(default_factory=list)
    lines: List[int] = field(default_factory=list)

    def add_constant(self, value: Object) -> int:
        """Append a constant and return its index; raise OverflowError when full."""
        if len(self.constants) >= MAX_CONSTANTS:
            raise OverflowError("constant pool is full")
        self.constants.append(value)
        return len(self.constants) - 1

    def write_byte(self, byte: int, line: int) -> None:
        """Append one byte of code, recording the source line it came from."""
        if not 0 <= line <= MAX_LINE:
            raise ValueError(f"line {line} does not fit in 16 bits")
        self.code.append(byte)
        self.lines.append(line)

    def current_offset(self) -> int:
        """The offset the next byte will be written at (a jump target)."""
        return len(self.code)

    def patch_u16(self, offset: int, value: int) -> None:
        """Overwrite two bytes at ``offset`` with ``value`` in big-endian order."""
        if not 0 <= offset <= len(self.code) - 2:
            raise IndexError(
                f"cannot patch two bytes at offset {offset} in code of length {len(self.code)}"
            )
        self.code[offset : offset + 2] = value.to_bytes(2, "big")

    patch_u16_at = patch_u16

    def __len__(self) -> int:
        return len(self.code)