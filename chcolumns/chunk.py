"""A read-only window over a contiguous range of another column's rows."""

from __future__ import annotations

from datetime import tzinfo
from typing import Any, BinaryIO, Optional

from chcolumns.column_data import ColumnData


class ChunkColumn(ColumnData):
    """The rows ``start:end`` of ``data``, seen as a column of their own."""

    def __init__(self, data: ColumnData, start: int, end: int) -> None:
        if not 0 <= start <= end:
            raise ValueError(f"invalid chunk range {start}..{end}")
        self.data = data
        self.start = start
        self.end = end

    def sql_type(self) -> str:
        return self.data.sql_type()

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        self.data.save(out, self.start + start, min(self.end, self.start + end))

    def __len__(self) -> int:
        return self.end - self.start

    def push(self, value: Any) -> None:
        raise TypeError("cannot append to a chunk of another column")

    def at(self, index: int) -> Any:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for length {len(self)}")
        return self.data.at(index + self.start)

    def get_timezone(self) -> Optional[tzinfo]:
        return self.data.get_timezone()