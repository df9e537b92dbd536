"""Array columns: a flat inner column split into rows by cumulative offsets."""

from __future__ import annotations

from datetime import tzinfo
from typing import Any, BinaryIO, Callable, Iterable, List, Optional, Sequence

from chcolumns.buffer import TypedList
from chcolumns.column_data import ColumnData, read_exact

_PREFIX = "Array("


class ArrayColumn(ColumnData):
    """Rows of variable-length lists over one inner column."""

    def __init__(self, inner: ColumnData, offsets: Iterable[int] = ()) -> None:
        self.inner = inner
        self.offsets = TypedList("Q", offsets)

    @classmethod
    def load(
        cls,
        reader: BinaryIO,
        rows: int,
        load_inner: Callable[[BinaryIO, int], ColumnData],
    ) -> "ArrayColumn":
        """Read ``rows`` offsets, then the inner column via ``load_inner(reader, size)``."""
        offsets = TypedList.from_bytes("Q", read_exact(reader, rows * 8))
        size = offsets.at(rows - 1) if rows else 0
        column = cls(load_inner(reader, size))
        column.offsets = offsets
        return column

    def sql_type(self) -> str:
        return f"{_PREFIX}{self.inner.sql_type()})"

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        window = self.offsets[start:end]
        out.write(window.to_bytes())
        last = window.at(len(window) - 1) if len(window) else 0
        self.inner.save(out, 0, last)

    def __len__(self) -> int:
        return len(self.offsets)

    def push(self, value: Sequence[Any]) -> None:
        if not isinstance(value, (list, tuple)):
            raise TypeError(f"value should be an array ({value!r})")
        previous = self.offsets.at(len(self.offsets) - 1) if len(self.offsets) else 0
        self.offsets.push(previous + len(value))
        for item in value:
            self.inner.push(item)

    def at(self, index: int) -> List[Any]:
        start = self.offsets.at(index - 1) if index > 0 else 0
        end = self.offsets.at(index)
        return [self.inner.at(i) for i in range(start, end)]

    def cast_to(self, target: str) -> Optional["ArrayColumn"]:
        if not (target.startswith(_PREFIX) and target.endswith(")")):
            return None
        inner = self.inner.cast_to(target[len(_PREFIX):-1])
        if inner is None:
            return None
        return ArrayColumn(inner, self.offsets.copy())

    def get_timezone(self) -> Optional[tzinfo]:
        return self.inner.get_timezone()