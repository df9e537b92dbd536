"""A read-only column made by joining several columns of the same type."""

from __future__ import annotations

from datetime import tzinfo
from itertools import accumulate
from typing import Any, BinaryIO, Iterable, List, Optional, Sequence, Tuple

from chcolumns.column_data import ColumnData


def build_index(sizes: Iterable[int]) -> List[int]:
    """Cumulative start positions of chunks of the given sizes, plus the total."""
    return [0, *accumulate(sizes)]


def find_chunk(index: Sequence[int], ix: int) -> int:
    """The number of the chunk holding row ``ix``, or 0 if none does."""
    if not index:
        raise ValueError("index should not be empty")
    lo = 0
    hi = len(index) - 1
    while lo < hi:
        mid = lo + (hi - lo) // 2
        if index[lo] == index[lo + 1]:
            lo += 1
            continue
        if ix < index[mid]:
            hi = mid
        elif ix >= index[mid + 1]:
            lo = mid + 1
        else:
            return mid
    return 0


class ConcatColumn(ColumnData):
    """Several columns of one type read as a single column."""

    def __init__(self, columns: Iterable[ColumnData]) -> None:
        chunks = tuple(columns)
        if not chunks:
            raise ValueError("data should not be empty.")
        first_type = chunks[0].sql_type()
        for column in chunks[1:]:
            if column.sql_type() != first_type:
                raise ValueError(
                    "all columns should have the same type "
                    f"({first_type!r} != {column.sql_type()!r})."
                )
        self._columns = chunks
        self._index = build_index(len(column) for column in chunks)

    def sql_type(self) -> str:
        return self._columns[0].sql_type()

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        raise TypeError("a concatenated column cannot be saved directly")

    def __len__(self) -> int:
        return self._index[-1]

    def push(self, value: Any) -> None:
        raise TypeError("cannot append to a concatenated column")

    def at(self, index: int) -> Any:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for length {len(self)}")
        chunk = find_chunk(self._index, index)
        return self._columns[chunk].at(index - self._index[chunk])

    def chunks(self) -> Tuple[ColumnData, ...]:
        """The joined columns, in order."""
        return self._columns

    def get_timezone(self) -> Optional[tzinfo]:
        return self._columns[0].get_timezone()