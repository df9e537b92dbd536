from datetime import timedelta, timezone
from io import BytesIO

import pytest

from chcolumns.chunk import ChunkColumn
from chcolumns.datetime64 import DateTime64Column
from chcolumns.fixed_string import FixedStringColumn


@pytest.fixture
def base():
    return FixedStringColumn(3, ["aaa", "bbb", "ccc", "ddd"])


def _saved(column, start, end):
    out = BytesIO()
    column.save(out, start, end)
    return out.getvalue()


def test_len_and_at(base):
    chunk = ChunkColumn(base, 1, 3)
    assert len(chunk) == 2
    assert chunk.at(0) == base.at(1)
    assert chunk.at(1) == base.at(2)
    assert list(chunk) == [b"bbb", b"ccc"]


def test_at_out_of_range(base):
    chunk = ChunkColumn(base, 1, 3)
    with pytest.raises(IndexError):
        chunk.at(2)


def test_sql_type_delegates(base):
    assert ChunkColumn(base, 0, 2).sql_type() == base.sql_type()


def test_save_shifts_range(base):
    chunk = ChunkColumn(base, 1, 3)
    assert _saved(chunk, 0, 1) == _saved(base, 1, 2)


def test_save_clamps_to_chunk_end(base):
    chunk = ChunkColumn(base, 1, 3)
    assert _saved(chunk, 0, 10) == _saved(base, 1, 3)


def test_push_rejected(base):
    chunk = ChunkColumn(base, 0, 1)
    with pytest.raises(TypeError):
        chunk.push("eee")
    assert len(chunk) == 1


def test_invalid_range(base):
    with pytest.raises(ValueError):
        ChunkColumn(base, 3, 1)


def test_timezone_delegates():
    tz = timezone(timedelta(hours=3))
    column = DateTime64Column(3, tz)
    assert ChunkColumn(column, 0, 0).get_timezone() is tz
    assert ChunkColumn(FixedStringColumn(2), 0, 0).get_timezone() is None