import io

import pytest

from chcolumns.fixed_string import FixedStringColumn


def test_sql_type():
    assert FixedStringColumn(4).sql_type() == "FixedString(4)"


def test_short_value_is_padded_with_zeros():
    column = FixedStringColumn(4, [b"ab"])
    value = column.at(0)
    assert len(value) == 4
    assert value.rstrip(b"\x00") == b"ab"
    assert set(value[2:]) == {0}


def test_long_value_is_truncated():
    column = FixedStringColumn(3, [b"abcdef"])
    assert column.at(0) == b"abcdef"[:3]


def test_text_is_utf8_encoded():
    column = FixedStringColumn(8, ["hé"])
    assert column.at(0).rstrip(b"\x00") == "hé".encode("utf-8")


def test_len_counts_rows():
    column = FixedStringColumn(2, [b"a", b"b", b"c"])
    assert len(column) == 3
    assert [v.rstrip(b"\x00") for v in column] == [b"a", b"b", b"c"]


def test_load_splits_into_rows():
    column = FixedStringColumn.load(io.BytesIO(b"abcdefgh"), 2, 4)
    assert column.at(0) == b"abcd"
    assert column.at(1) == b"efgh"


def test_save_and_load_round_trip():
    column = FixedStringColumn(5, [b"one", b"three", b"two"])
    out = io.BytesIO()
    column.save(out, 0, len(column))
    loaded = FixedStringColumn.load(io.BytesIO(out.getvalue()), 3, 5)
    assert list(loaded) == list(column)


def test_save_range_writes_only_those_rows():
    column = FixedStringColumn(2, [b"aa", b"bb", b"cc"])
    out = io.BytesIO()
    column.save(out, 1, 2)
    assert out.getvalue() == b"bb"


def test_get_string_matches_at():
    column = FixedStringColumn(3, [b"xy", b"z"])
    assert [column.get_string(i) for i in range(2)] == list(column)


def test_timezone_is_none():
    assert FixedStringColumn(1).get_timezone() is None


def test_index_out_of_range():
    column = FixedStringColumn(2, [b"aa"])
    with pytest.raises(IndexError):
        column.at(1)
    with pytest.raises(IndexError):
        column.at(-1)


def test_push_rejects_non_string():
    with pytest.raises(TypeError):
        FixedStringColumn(2).push(5)


def test_zero_length_rejected():
    with pytest.raises(ValueError):
        FixedStringColumn(0)


def test_load_short_stream_raises():
    with pytest.raises(EOFError):
        FixedStringColumn.load(io.BytesIO(b"abc"), 1, 4)