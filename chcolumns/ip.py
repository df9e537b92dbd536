"""Fixed-width columns of IPv4 addresses, IPv6 addresses and UUIDs."""

from __future__ import annotations

import uuid
from datetime import tzinfo
from ipaddress import IPv4Address, IPv6Address
from typing import Any, BinaryIO, ClassVar, Iterable, Optional

from chcolumns.column_data import ColumnData, read_exact


class _FixedWidthColumn(ColumnData):
    """Shared storage for columns whose rows all take SIZE bytes."""

    SIZE: ClassVar[int]
    TYPE_NAME: ClassVar[str]
    # Address and identifier columns carry no timezone of their own.
    TIMEZONE: ClassVar[Optional[tzinfo]] = None

    def _fill(self, values: Iterable[Any]) -> None:
        self._inner = bytearray()
        for value in values:
            self._inner += self._encode(value)

    def _save_range(self, out: BinaryIO, start: int, end: int) -> None:
        out.write(bytes(self._inner[start * self.SIZE:end * self.SIZE]))

    def __len__(self) -> int:
        return len(self._inner) // self.SIZE

    def _raw_at(self, index: int) -> bytes:
        if not 0 <= index < len(self):
            raise IndexError(f"index {index} out of range for length {len(self)}")
        shift = index * self.SIZE
        return bytes(self._inner[shift:shift + self.SIZE])


def _ipv4_encode(value: Any) -> bytes:
    if isinstance(value, IPv4Address):
        address = value
    elif isinstance(value, (str, int)) and not isinstance(value, bool):
        address = IPv4Address(value)
    else:
        raise TypeError(f"value should be an IPv4 address ({value!r})")
    return address.packed[::-1]


def _ipv6_encode(value: Any) -> bytes:
    if isinstance(value, IPv6Address):
        address = value
    elif isinstance(value, (str, int)) and not isinstance(value, bool):
        address = IPv6Address(value)
    else:
        raise TypeError(f"value should be an IPv6 address ({value!r})")
    return address.packed


def _uuid_encode(value: Any) -> bytes:
    if isinstance(value, uuid.UUID):
        ident = value
    elif isinstance(value, str):
        ident = uuid.UUID(value)
    else:
        raise TypeError(f"value should be a UUID ({value!r})")
    raw = ident.bytes
    return raw[:8][::-1] + raw[8:][::-1]


class Ipv4Column(_FixedWidthColumn):
    """IPv4 addresses, stored as little-endian 32-bit numbers."""

    SIZE = 4
    TYPE_NAME = "IPv4"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._fill(values)

    @classmethod
    def load(cls, reader: BinaryIO, size: int) -> Ipv4Column:
        column = cls()
        column._inner = bytearray(read_exact(reader, size * cls.SIZE))
        return column

    def sql_type(self) -> str:
        return self.TYPE_NAME

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        self._save_range(out, start, end)

    def push(self, value: Any) -> None:
        self._inner += self._encode(value)

    def at(self, index: int) -> IPv4Address:
        return IPv4Address(self._raw_at(index)[::-1])

    def get_timezone(self) -> Optional[tzinfo]:
        return self.TIMEZONE

    def _encode(self, value: Any) -> bytes:
        return _ipv4_encode(value)


class Ipv6Column(_FixedWidthColumn):
    """IPv6 addresses, stored in network byte order."""

    SIZE = 16
    TYPE_NAME = "IPv6"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._fill(values)

    @classmethod
    def load(cls, reader: BinaryIO, size: int) -> Ipv6Column:
        column = cls()
        column._inner = bytearray(read_exact(reader, size * cls.SIZE))
        return column

    def sql_type(self) -> str:
        return self.TYPE_NAME

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        self._save_range(out, start, end)

    def push(self, value: Any) -> None:
        self._inner += self._encode(value)

    def at(self, index: int) -> IPv6Address:
        return IPv6Address(self._raw_at(index))

    def get_timezone(self) -> Optional[tzinfo]:
        return self.TIMEZONE

    def _encode(self, value: Any) -> bytes:
        return _ipv6_encode(value)


class UuidColumn(_FixedWidthColumn):
    """UUIDs, stored as two little-endian 64-bit halves."""

    SIZE = 16
    TYPE_NAME = "UUID"

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._fill(values)

    @classmethod
    def load(cls, reader: BinaryIO, size: int) -> UuidColumn:
        column = cls()
        column._inner = bytearray(read_exact(reader, size * cls.SIZE))
        return column

    def sql_type(self) -> str:
        return self.TYPE_NAME

    def save(self, out: BinaryIO, start: int, end: int) -> None:
        self._save_range(out, start, end)

    def push(self, value: Any) -> None:
        self._inner += self._encode(value)

    def at(self, index: int) -> uuid.UUID:
        raw = self._raw_at(index)
        return uuid.UUID(bytes=raw[:8][::-1] + raw[8:][::-1])

    def get_timezone(self) -> Optional[tzinfo]:
        return self.TIMEZONE

    def _encode(self, value: Any) -> bytes:
        return _uuid_encode(value)