import struct
from datetime import timedelta, timezone
from io import BytesIO

import pytest

from chcolumns.column_data import ColumnData
from chcolumns.concat import ConcatColumn, build_index, find_chunk
from chcolumns.datetime64 import DateTime64Column
from chcolumns.fixed_string import FixedStringColumn

FIRST = "13298a5f-6a10-4fbe-9644-807f7ebf82cc"
SECOND = "df0e62bb-c0db-4728-a558-821f8e8da38c"


class _UInt32Column(ColumnData):
    def __init__(self, values=()):
        self._values = list(values)

    def sql_type(self):
        return "UInt32"

    def save(self, out, start, end):
        out.write(struct.pack(f"<{end - start}I", *self._values[start:end]))

    def __len__(self):
        return len(self._values)

    def push(self, value):
        self._values.append(value)

    def at(self, index):
        return self._values[index]

    def get_timezone(self):
        return None


def make_string_column():
    return FixedStringColumn(36, [FIRST, SECOND])


def make_num_column():
    return _UInt32Column([1, 2])


def test_build_index():
    assert build_index([2, 3, 4]) == [0, 2, 5, 9]


def test_find_chunk():
    index = [0, 2, 5, 9]
    assert find_chunk(index, 0) == 0
    assert find_chunk(index, 1) == 0
    assert find_chunk(index, 2) == 1
    assert find_chunk(index, 3) == 1
    assert find_chunk(index, 4) == 1
    assert find_chunk(index, 5) == 2
    assert find_chunk(index, 6) == 2
    assert find_chunk(index, 7) == 2
    assert find_chunk([0], 7) == 0


def test_find_chunk2():
    index = [0, 0, 5]
    assert find_chunk(index, 0) == 1
    assert find_chunk(index, 1) == 1
    assert find_chunk(index, 2) == 1
    assert find_chunk(index, 3) == 1
    assert find_chunk(index, 4) == 1
    assert find_chunk(index, 5) == 0


def test_find_chunk5():
    index = [0, 0, 3, 6, 9, 12, 15, 18, 21, 24, 27, 30, 33, 36, 39, 42,
             45, 48, 51, 54, 57, 60, 63, 66, 69]
    for i in range(69):
        assert find_chunk(index, i) == 1 + i // 3


def test_find_chunk_empty_index():
    with pytest.raises(ValueError):
        find_chunk([], 0)


def test_concat_column():
    actual = ConcatColumn([make_string_column(), make_string_column()])
    assert actual.at(0).decode() == FIRST
    assert actual.at(1).decode() == SECOND
    assert actual.at(2).decode() == FIRST
    assert actual.at(3).decode() == SECOND
    assert len(actual) == 4


def test_concat_num_column():
    actual = ConcatColumn([make_num_column(), make_num_column()])
    assert actual.at(0) == 1
    assert actual.at(1) == 2
    assert actual.at(2) == 1
    assert actual.at(3) == 2
    assert len(actual) == 4


def test_concat_skips_empty_chunks():
    actual = ConcatColumn([_UInt32Column(), _UInt32Column([1, 2]), _UInt32Column([3, 4, 5])])
    assert list(actual) == [1, 2, 3, 4, 5]


def test_concat_out_of_range():
    actual = ConcatColumn([make_num_column()])
    with pytest.raises(IndexError):
        actual.at(2)


def test_concat_requires_columns():
    with pytest.raises(ValueError):
        ConcatColumn([])


def test_concat_requires_same_type():
    with pytest.raises(ValueError):
        ConcatColumn([make_num_column(), make_string_column()])


def test_concat_is_read_only():
    actual = ConcatColumn([make_num_column()])
    with pytest.raises(TypeError):
        actual.push(3)
    with pytest.raises(TypeError):
        actual.save(BytesIO(), 0, 1)
    assert len(actual) == 2


def test_chunks_and_type():
    first, second = make_num_column(), make_num_column()
    actual = ConcatColumn([first, second])
    assert actual.chunks() == (first, second)
    assert actual.sql_type() == "UInt32"


def test_timezone_from_first_chunk():
    tz = timezone(timedelta(hours=-5))
    actual = ConcatColumn([DateTime64Column(3, tz), DateTime64Column(3, tz)])
    assert actual.get_timezone() is tz