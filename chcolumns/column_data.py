"""The common interface of column storage and shared reading helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import tzinfo
from typing import Any, BinaryIO, Iterator, Optional


class ColumnData(ABC):
    """Storage for the values of one column.

    ``save`` writes the rows ``start:end`` in wire format to a binary stream
    (anything with a ``write`` method); ``at`` returns a single row as a
    Python value.
    """

    @abstractmethod
    def sql_type(self) -> str:
        """The column's type name, e.g. ``"FixedString(8)"``."""

    @abstractmethod
    def save(self, out: BinaryIO, start: int, end: int) -> None:
        """Write rows ``start:end`` to ``out``."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of rows."""

    @abstractmethod
    def push(self, value: Any) -> None:
        """Append one row."""

    @abstractmethod
    def at(self, index: int) -> Any:
        """Return the row at ``index``."""

    @abstractmethod
    def get_timezone(self) -> Optional[tzinfo]:
        """The timezone of the column's values, if it has one."""

    def cast_to(self, target: str) -> Optional["ColumnData"]:
        """Return a view of this column as ``target``, or None if impossible."""
        return None

    def __iter__(self) -> Iterator[Any]:
        return (self.at(index) for index in range(len(self)))


def read_exact(reader: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``reader`` or raise EOFError."""
    if size < 0:
        raise ValueError(f"cannot read a negative number of bytes ({size})")
    buffer = bytearray()
    while len(buffer) < size:
        part = reader.read(size - len(buffer))
        if not part:
            raise EOFError(f"expected {size} bytes, got {len(buffer)}")
        buffer += part
    return bytes(buffer)