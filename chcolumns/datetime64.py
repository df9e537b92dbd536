"""DateTime64 columns: timestamps as signed integers at a decimal precision."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import BinaryIO, Iterable

from chcolumns.buffer import TypedList
from chcolumns.column_data import ColumnData, read_exact

DEFAULT_TZ: tzinfo = timezone.utc

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NAIVE_EPOCH = datetime(1970, 1, 1)
_NANOS_PER_SECOND = 1_000_000_000
_MAX_PRECISION = 9
_IGNORED_PRECISION = 19


def _scale(precision: int) -> int:
    if not 0 <= precision <= _MAX_PRECISION:
        raise ValueError(f"unsupported DateTime64 precision {precision}")
    return 10 ** (_MAX_PRECISION - precision)


def _to_nanos(value: int, precision: int) -> int:
    if precision >= _IGNORED_PRECISION:
        return 0
    return value * _scale(precision)


def _offset(nanos: int) -> timedelta:
    seconds, rest = divmod(nanos, _NANOS_PER_SECOND)
    return timedelta(seconds=seconds, microseconds=rest // 1000)


def from_datetime(time: datetime, precision: int) -> int:
    """Encode an aware datetime as ticks of ``10**-precision`` seconds."""
    if time.tzinfo is None or time.utcoffset() is None:
        raise ValueError("datetime must be timezone-aware")
    delta = time - _EPOCH
    nanos = (delta.days * 86_400 + delta.seconds) * _NANOS_PER_SECOND
    nanos += delta.microseconds * 1000
    scale = _scale(precision)
    ticks = abs(nanos) // scale
    return ticks if nanos >= 0 else -ticks


def to_datetime(value: int, precision: int, tz: tzinfo) -> datetime:
    """Decode ticks into a datetime in ``tz``."""
    return (_EPOCH + _offset(_to_nanos(value, precision))).astimezone(tz)


def to_naive_datetime(value: int, precision: int) -> datetime:
    """Decode ticks into a naive datetime relative to the epoch."""
    return _NAIVE_EPOCH + _offset(_to_nanos(value, precision))


def _timezone_name(tz: tzinfo) -> str:
    key = getattr(tz, "key", None)
    if key:
        return key
    return tz.tzname(None) or str(tz)


class DateTime64Column(ColumnData):
    """A column of timestamps stored as 64-bit ticks."""

    def __init__(
        self, precision: int, tz: tzinfo = DEFAULT_TZ, values: Iterable[datetime] = ()
    ) -> None:
        self.precision = precision
        self.tz = tz
        self._data = TypedList("q")
        for value in values:
            self.push(value)

    @classmethod
    def load(cls, reader: BinaryIO, size: int, precision: int, tz: tzinfo) -> "DateTime64Column":
        column = cls(precision, tz)
        column._data = TypedList.from_bytes("q", read_exact(reader, size * 8))
        return column

    def sql_type(self) -> str:
        return f"DateTime64({self.precision}, '{_timezone_name(self.tz)}')"

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        out.write(self._data[start:end].to_bytes())

    def __len__(self) -> int:
        return len(self._data)

    def push(self, value: datetime) -> None:
        if not isinstance(value, datetime):
            raise TypeError(f"value should be a datetime ({value!r})")
        self._data.push(from_datetime(value.astimezone(self.tz), self.precision))

    def ticks(self, index: int) -> int:
        """The raw stored value of row ``index``."""
        return self._data.at(index)

    def at(self, index: int) -> datetime:
        return to_datetime(self._data.at(index), self.precision, self.tz)

    def get_timezone(self) -> tzinfo:
        return self.tz