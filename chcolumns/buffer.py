"""A growable sequence of fixed-width numbers with a little-endian byte form."""

from __future__ import annotations

import sys
from array import array
from typing import Any, Callable, Iterable, Iterator, Union


class TypedList:
    """Fixed-width numeric values stored contiguously, keyed by an array typecode."""

    __slots__ = ("_data",)

    def __init__(self, typecode: str, values: Iterable[Any] = ()) -> None:
        self._data = array(typecode, values)

    @property
    def typecode(self) -> str:
        return self._data.typecode

    @property
    def itemsize(self) -> int:
        return self._data.itemsize

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, key: Union[int, slice]) -> Any:
        if isinstance(key, slice):
            return TypedList(self.typecode, self._data[key])
        return self._data[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedList):
            return NotImplemented
        return self.typecode == other.typecode and self._data == other._data

    def __repr__(self) -> str:
        return f"TypedList({self.typecode!r}, {list(self._data)!r})"

    def at(self, index: int) -> Any:
        """Return the value at ``index``; negative indexes are rejected."""
        if not 0 <= index < len(self._data):
            raise IndexError(f"index {index} out of range for length {len(self._data)}")
        return self._data[index]

    def push(self, value: Any) -> None:
        self._data.append(value)

    def extend(self, values: Iterable[Any]) -> None:
        self._data.extend(values)

    def resize(self, new_len: int, value: Any) -> None:
        """Truncate to ``new_len`` or pad with ``value`` up to it."""
        if new_len < 0:
            raise ValueError(f"length must not be negative ({new_len})")
        current = len(self._data)
        if new_len <= current:
            del self._data[new_len:]
        else:
            self._data.extend([value] * (new_len - current))

    def map(self, typecode: str, func: Callable[[Any], Any]) -> "TypedList":
        """Return a new list of ``typecode`` holding ``func`` of every value."""
        return TypedList(typecode, (func(value) for value in self._data))

    def copy(self) -> "TypedList":
        return TypedList(self.typecode, self._data)

    def to_bytes(self) -> bytes:
        """The values as little-endian bytes."""
        if sys.byteorder == "little":
            return self._data.tobytes()
        swapped = array(self.typecode, self._data)
        swapped.byteswap()
        return swapped.tobytes()

    @classmethod
    def from_bytes(cls, typecode: str, data: bytes) -> "TypedList":
        """Build a list from little-endian bytes."""
        items = array(typecode)
        if len(data) % items.itemsize:
            raise ValueError(
                f"{len(data)} bytes is not a multiple of the item size {items.itemsize}"
            )
        items.frombytes(data)
        if sys.byteorder != "little":
            items.byteswap()
        result = cls.__new__(cls)
        result._data = items
        return result