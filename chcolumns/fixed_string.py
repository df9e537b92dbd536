"""FixedString columns: byte strings padded or cut to one length."""

from __future__ import annotations

from typing import BinaryIO, Iterable, Union

from chcolumns.column_data import ColumnData, read_exact

StrLike = Union[str, bytes, bytearray, memoryview]


def _as_bytes(value: StrLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"value should be a string ({value!r})")


class FixedStringColumn(ColumnData):
    """A column whose every value occupies exactly ``str_len`` bytes."""

    def __init__(self, str_len: int, values: Iterable[StrLike] = ()) -> None:
        if str_len < 1:
            raise ValueError(f"string length must be positive ({str_len})")
        self.str_len = str_len
        self._buffer = bytearray()
        for value in values:
            self.push(value)

    @classmethod
    def load(cls, reader: BinaryIO, size: int, str_len: int) -> "FixedStringColumn":
        column = cls(str_len)
        column._buffer = bytearray(read_exact(reader, size * str_len))
        return column

    def sql_type(self) -> str:
        return f"FixedString({self.str_len})"

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        out.write(bytes(self._buffer[start * self.str_len:end * self.str_len]))

    def __len__(self) -> int:
        return len(self._buffer) // self.str_len

    def push(self, value: StrLike) -> None:
        data = _as_bytes(value)[: self.str_len]
        self._buffer += data.ljust(self.str_len, b"\x00")

    def at(self, index: int) -> bytes:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for length {len(self)}")
        shift = index * self.str_len
        return bytes(self._buffer[shift:shift + self.str_len])

    def get_string(self, index: int) -> bytes:
        """The stored bytes of row ``index``, padding included."""
        return self.at(index)

    def get_timezone(self) -> None:
        return None