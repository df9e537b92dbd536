import random

import pytest

from chcolumns.buffer import TypedList


def test_push_and_len():
    items = TypedList("q")
    for i in range(100_500):
        assert len(items) == i
        items.push(i)


def test_push_and_get():
    rng = random.Random(7)
    items = TypedList("d")
    expected = [0.0] * 100

    for count in range(100):
        assert len(items) == count
        for i, value in enumerate(expected[:count]):
            assert abs(items.at(i) - value) < 1e-12
        k = rng.random()
        items.push(k)
        expected[count] = k


def test_at_out_of_range():
    items = TypedList("q", [1, 2])
    with pytest.raises(IndexError):
        items.at(2)
    with pytest.raises(IndexError):
        items.at(-1)


def test_resize_grows_and_shrinks():
    items = TypedList("Q", [5])
    items.resize(3, 0)
    assert list(items) == [5, 0, 0]
    items.resize(1, 0)
    assert list(items) == [5]


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        TypedList("Q").resize(-1, 0)


def test_map_changes_type():
    items = TypedList("H", [1, 2, 3])
    mapped = items.map("q", lambda v: -v)
    assert mapped == TypedList("q", [-1, -2, -3])
    assert mapped.typecode == "q"


def test_bytes_are_little_endian():
    assert TypedList("H", [1]).to_bytes() == b"\x01\x00"
    assert TypedList("q", [-1]).to_bytes() == b"\xff" * 8


def test_bytes_round_trip():
    items = TypedList("q", [0, -3, 2**40, -(2**62)])
    restored = TypedList.from_bytes("q", items.to_bytes())
    assert restored == items


def test_from_bytes_rejects_partial_item():
    with pytest.raises(ValueError):
        TypedList.from_bytes("Q", b"\x00" * 7)


def test_slice_returns_typed_list():
    items = TypedList("Q", [1, 2, 3, 4])
    assert items[1:3] == TypedList("Q", [2, 3])
    assert items[0] == 1


def test_unsigned_rejects_negative():
    with pytest.raises(OverflowError):
        TypedList("Q").push(-1)