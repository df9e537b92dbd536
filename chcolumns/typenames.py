"""Parsers for column type names that take bare (unquoted) parameters."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional, Tuple

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U8_MAX = 255


class NoBits(Enum):
    """The width of a decimal's underlying integer."""

    N32 = 32
    N64 = 64

    @classmethod
    def from_precision(cls, precision: int) -> Optional["NoBits"]:
        """The narrowest width holding ``precision`` digits, or None if too wide."""
        if precision <= 9:
            return cls.N32
        if precision <= 18:
            return cls.N64
        return None

    @property
    def default_precision(self) -> int:
        return 9 if self is NoBits.N32 else 18


class SimpleAggFunc(Enum):
    """Functions allowed in a SimpleAggregateFunction column type."""

    ANY = "any"
    ANY_LAST = "anyLast"
    MIN = "min"
    MAX = "max"
    SUM = "sum"
    SUM_WITH_OVERFLOW = "sumWithOverflow"
    GROUP_BIT_AND = "groupBitAnd"
    GROUP_BIT_OR = "groupBitOr"
    GROUP_BIT_XOR = "groupBitXor"
    GROUP_ARRAY_ARRAY = "groupArrayArray"
    GROUP_UNIQ_ARRAY_ARRAY = "groupUniqArrayArray"
    SUM_MAP = "sumMap"
    MIN_MAP = "minMap"
    MAX_MAP = "maxMap"
    ARG_MIN = "argMin"
    ARG_MAX = "argMax"

    def __str__(self) -> str:
        return self.value


def _parse_unsigned(text: str, limit: Optional[int] = None) -> Optional[int]:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    if limit is not None and value > limit:
        return None
    return value


def parse_fixed_string(source: str) -> Optional[int]:
    """The length of ``FixedString(N)``, or None."""
    if not source.startswith("FixedString"):
        return None
    return _parse_unsigned(source[12:-1])


def parse_nullable_type(source: str) -> Optional[str]:
    """The inner type of ``Nullable(T)``; nested Nullable is rejected."""
    if not source.startswith("Nullable"):
        return None
    inner = source[9:-1]
    if inner.startswith("Nullable"):
        return None
    return inner


def parse_array_type(source: str) -> Optional[str]:
    """The inner type of ``Array(T)``, or None."""
    if not source.startswith("Array"):
        return None
    return source[6:-1]


def parse_map_type(source: str) -> Optional[Tuple[str, str]]:
    """The key and value types of ``Map(K, V)``, split at the first comma."""
    if not source.startswith("Map"):
        return None
    body = source[4:-1]
    comma = body.find(",")
    if comma < 0:
        return None
    return body[:comma].strip(), body[comma + 1:].strip()


def parse_simple_agg_func(source: str) -> Optional[Tuple[SimpleAggFunc, str]]:
    """The function and type of ``SimpleAggregateFunction(func, T)``, or None."""
    if not source.startswith("SimpleAggregateFunction(") or not source.endswith(")"):
        return None
    args = source[23:].strip("()")
    comma = args.find(",")
    if comma < 0:
        return None
    try:
        func = SimpleAggFunc(args[:comma].strip())
    except ValueError:
        return None
    return func, args[comma + 1:].strip()


def parse_decimal(source: str) -> Optional[Tuple[int, int, NoBits]]:
    """Precision, scale and width of ``Decimal(P, S)``, ``Decimal32(S)`` or ``Decimal64(S)``."""
    if len(source) < 12 or not source.startswith("Decimal"):
        return None

    nobits: Optional[NoBits] = None
    open_at: Optional[int] = None
    close_at: Optional[int] = None

    for idx, char in enumerate(source):
        if char == "(":
            prefix = source[:idx]
            if prefix == "Decimal32":
                nobits = NoBits.N32
            elif prefix == "Decimal64":
                nobits = NoBits.N64
            elif prefix != "Decimal":
                return None
            open_at = idx
        if char == ")":
            close_at = idx

    if open_at is None or close_at is None:
        return None
    params = source[open_at + 1:close_at]

    precision: Optional[int] = None
    scale: Optional[int] = None
    if nobits is not None:
        scale = _parse_unsigned(params, _U8_MAX)
    else:
        cells = [cell.strip() for cell in params.split(",")]
        if len(cells) > 2:
            return None
        precision = _parse_unsigned(cells[0], _U8_MAX)
        if len(cells) == 2:
            scale = _parse_unsigned(cells[1], _U8_MAX)

    if nobits is None:
        if precision is None or scale is None or scale > precision:
            return None
        bits = NoBits.from_precision(precision)
        return None if bits is None else (precision, scale, bits)
    if precision is None and scale is not None:
        return nobits.default_precision, scale, nobits
    return None


def parse_low_cardinality(source: str) -> Optional[str]:
    """The inner type of ``LowCardinality(T)``, trimmed, or None."""
    if not source.startswith("LowCardinality"):
        return None
    lo = 14
    hi = len(source) - 1
    while lo < len(source) and source[lo] != "(":
        lo += 1
    while hi > lo and source[hi] != ")":
        hi -= 1
    if lo >= hi:
        return None
    return source[lo + 1:hi].strip()