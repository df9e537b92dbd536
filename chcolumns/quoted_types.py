"""Parsers for column type names whose parameters include quoted strings."""

from __future__ import annotations

from typing import List, Optional, Tuple

_I16_MIN = -(1 << 15)
_I16_MAX = (1 << 15) - 1
_U32_MAX = (1 << 32) - 1
_NON_SPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


class _Mismatch(Exception):
    """The input does not follow the grammar."""


class _Cursor:
    """A position in a type name with the small set of moves the grammar needs."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> Optional[str]:
        return None if self.at_end else self.text[self.pos]

    def spaces(self) -> bool:
        """Skip whitespace; report whether any was skipped."""
        start = self.pos
        while not self.at_end:
            char = self.text[self.pos]
            if not char.isspace() or char in _NON_SPACE_SEPARATORS:
                break
            self.pos += 1
        return self.pos > start

    def token(self, char: str) -> None:
        if self.peek() != char:
            raise _Mismatch
        self.pos += 1

    def keyword(self, word: str) -> None:
        if not self.text.startswith(word, self.pos):
            raise _Mismatch
        self.pos += len(word)

    def quoted(self) -> str:
        """A single-quoted word; a backslash takes the next character literally."""
        self.token("'")
        chars: List[str] = []
        while True:
            char = self.peek()
            if char is None:
                raise _Mismatch
            if char == "'":
                self.pos += 1
                return "".join(chars)
            if char == "\\":
                self.pos += 1
                escaped = self.peek()
                if escaped is None:
                    raise _Mismatch
                chars.append(escaped)
            else:
                chars.append(char)
            self.pos += 1

    def digits(self) -> str:
        start = self.pos
        while not self.at_end and "0" <= self.text[self.pos] <= "9":
            self.pos += 1
        if self.pos == start:
            raise _Mismatch
        return self.text[start:self.pos]

    def integer(self) -> int:
        negative = self.peek() == "-"
        if negative:
            self.pos += 1
        value = int(self.digits())
        return -value if negative else value


def _parse_enum(keyword: str, source: str) -> Optional[List[Tuple[str, int]]]:
    cursor = _Cursor(source)
    try:
        cursor.spaces()
        cursor.keyword(keyword)
        cursor.spaces()
        cursor.token("(")
        cursor.spaces()
        items: List[Tuple[str, int]] = []
        while True:
            cursor.spaces()
            name = cursor.quoted()
            cursor.spaces()
            cursor.token("=")
            cursor.spaces()
            value = cursor.integer()
            if not _I16_MIN <= value <= _I16_MAX:
                raise _Mismatch
            cursor.spaces()
            items.append((name, value))
            if cursor.peek() != ",":
                break
            cursor.pos += 1
        cursor.token(")")
    except _Mismatch:
        return None
    if not cursor.at_end:
        return None
    return items


def _wrap_i8(value: int) -> int:
    return (value + 128) % 256 - 128


def parse_enum8(source: str) -> Optional[List[Tuple[str, int]]]:
    """The name/value pairs of ``Enum8('a' = 1, ...)``, or None.

    Values are read as 16-bit integers and then wrapped to 8 bits.
    """
    items = _parse_enum("Enum8", source)
    if items is None:
        return None
    return [(name, _wrap_i8(value)) for name, value in items]


def parse_enum16(source: str) -> Optional[List[Tuple[str, int]]]:
    """The name/value pairs of ``Enum16('a' = 1, ...)``, or None."""
    return _parse_enum("Enum16", source)


def parse_date_time(source: str) -> Optional[Tuple[Optional[str]]]:
    """Parse ``DateTime`` or ``Timestamp`` with an optional quoted timezone.

    Returns None when ``source`` is not such a type; otherwise a one-element
    tuple holding the timezone name, or None when no timezone is given.
    """
    cursor = _Cursor(source)
    try:
        cursor.spaces()
        if source.startswith("DateTime", cursor.pos):
            cursor.keyword("DateTime")
        else:
            cursor.keyword("Timestamp")
        timezone: Optional[str] = None
        skipped = cursor.spaces()
        if cursor.peek() == "(":
            cursor.pos += 1
            cursor.spaces()
            timezone = cursor.quoted()
            cursor.spaces()
            cursor.token(")")
            cursor.spaces()
        elif skipped:
            raise _Mismatch
    except _Mismatch:
        return None
    if not cursor.at_end:
        return None
    return (timezone,)


def parse_date_time64(source: str) -> Optional[Tuple[int, Optional[str]]]:
    """Precision and optional timezone of ``DateTime64(P[, 'tz'])``, or None."""
    cursor = _Cursor(source)
    try:
        cursor.spaces()
        cursor.keyword("DateTime64")
        cursor.spaces()
        cursor.token("(")
        cursor.spaces()
        cursor.spaces()
        precision = int(cursor.digits())
        if precision > _U32_MAX:
            raise _Mismatch
        cursor.spaces()
        timezone: Optional[str] = None
        if cursor.peek() == ",":
            cursor.pos += 1
            cursor.spaces()
            timezone = cursor.quoted()
        cursor.spaces()
        cursor.spaces()
        cursor.token(")")
    except _Mismatch:
        return None
    if not cursor.at_end:
        return None
    return precision, timezone