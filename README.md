# chcolumns

In-memory columns for the ClickHouse native block format, and parsers for ClickHouse type names. The package has no dependencies outside the standard library.

## Columns

Every column follows the `chcolumns.column_data.ColumnData` interface. That interface has these members:

- `sql_type()` returns the column's type name as a string.
- `push(value)` appends a row.
- `at(index)` returns a row.
- `save(out, start, end)` writes rows `start:end` in wire format to a binary stream.
- `get_timezone()` returns the column's timezone, if it has one.
- `cast_to(target)` returns a view of the column as another type, or `None`.
- `len(column)` gives the number of rows, and iterating over a column yields its rows.

The columns provided are:

- **`chcolumns.fixed_string.FixedStringColumn(str_len, values=())`** holds byte strings of exactly `str_len` bytes. Longer values are cut and shorter ones are padded with zero bytes. It accepts `str` (encoded as UTF-8) or bytes-like values. `get_string(index)` returns the stored bytes of a row.
- **`chcolumns.datetime64.DateTime64Column(precision, tz=UTC, values=())`** holds aware datetimes. Each one is stored as a signed 64-bit count of `10**-precision` seconds. `ticks(index)` returns the raw stored value of a row. `sql_type()` gives `DateTime64(P, 'zone')`.
- **`chcolumns.array.ArrayColumn(inner, offsets=())`** holds variable-length lists. It stores them as one flat inner column plus cumulative `UInt64` offsets. `cast_to("Array(T)")` works when the inner column can itself be cast to `T`.
- **`chcolumns.ip.Ipv4Column`, `Ipv6Column` and `UuidColumn`** hold `ipaddress.IPv4Address`, `ipaddress.IPv6Address` and `uuid.UUID` values. They also accept the equivalent strings, and integers for the address types. Their bytes follow the wire byte order:
  - IPv4 is stored as a little-endian 32-bit number.
  - IPv6 is stored in network order.
  - A UUID is stored as two byte-reversed 8-byte halves.
- **`chcolumns.chunk.ChunkColumn(data, start, end)`** is a read-only window on the rows `start:end` of another column. `save` writes through to the underlying column. `push` raises `TypeError`.
- **`chcolumns.concat.ConcatColumn(columns)`** reads several columns of the same type as one. `chunks()` returns the joined columns.
  - Building one from no columns raises `ValueError`.
  - Building one from columns of mixed types also raises `ValueError`.
  - Both `push` and `save` raise `TypeError`.

Columns that read from a stream have a `load` class method. These are `FixedStringColumn`, `DateTime64Column`, `ArrayColumn` and the IP/UUID columns. `load` reads the number of rows given and raises `EOFError` on short input. `ArrayColumn.load(reader, rows, load_inner)` reads the offsets first. It then calls `load_inner(reader, size)` to read the inner column.

## Helpers

- **`chcolumns.buffer.TypedList(typecode, values=())`** is a growable list of fixed-width numbers. It is keyed by an `array` typecode and provides these methods:
  - `at`, `push`, `extend`, `resize`, `map(typecode, func)` and `copy`.
  - Slicing.
  - `to_bytes()` and `TypedList.from_bytes(typecode, data)`, which convert to and from little-endian bytes.
- **`chcolumns.column_data.read_exact(reader, size)`** reads exactly `size` bytes or raises `EOFError`.
- **`chcolumns.datetime64`** converts between datetimes and tick counts:
  - `from_datetime(time, precision)` turns an aware datetime into ticks.
  - `to_datetime(value, precision, tz)` turns ticks into a datetime in `tz`.
  - `to_naive_datetime(value, precision)` turns ticks into a naive datetime.

## Type-name parsers

Each parser returns `None` when the name does not match.

| Function | Returns |
| --- | --- |
| `typenames.parse_nullable_type("Nullable(Int8)")` | `"Int8"` (nested `Nullable` gives `None`) |
| `typenames.parse_array_type("Array(UInt8)")` | `"UInt8"` |
| `typenames.parse_map_type("Map(UInt8, Map(UInt8,UInt8))")` | `("UInt8", "Map(UInt8,UInt8)")` |
| `typenames.parse_fixed_string("FixedString(8)")` | `8` |
| `typenames.parse_decimal("Decimal(9, 4)")` | `(9, 4, NoBits.N32)` |
| `typenames.parse_decimal("Decimal64(9)")` | `(18, 9, NoBits.N64)` |
| `typenames.parse_simple_agg_func("SimpleAggregateFunction( sum , Double )")` | `(SimpleAggFunc.SUM, "Double")` |
| `typenames.parse_low_cardinality("LowCardinality ( String )")` | `"String"` |
| `quoted_types.parse_enum8("Enum8 ('a' = 1, 'b' = 2)")` | `[("a", 1), ("b", 2)]` |
| `quoted_types.parse_enum16("Enum16('a_' = -128, 'b&' = 0)")` | `[("a_", -128), ("b&", 0)]` |
| `quoted_types.parse_date_time(" DateTime ( 'Europe/Moscow' )")` | `("Europe/Moscow",)` |
| `quoted_types.parse_date_time(" DateTime")` | `(None,)` |
| `quoted_types.parse_date_time64(" DateTime64 ( 3 , 'Europe/Moscow' )")` | `(3, "Europe/Moscow")` |

`typenames.NoBits` is the width of a decimal's underlying integer. `NoBits.from_precision(p)` gives `N32` up to 9 digits, `N64` up to 18 digits, and `None` above that. `typenames.SimpleAggFunc` lists the functions that `SimpleAggregateFunction` accepts.

## Example

```python
import io
from datetime import datetime, timezone

from chcolumns.datetime64 import from_datetime, to_datetime
from chcolumns.fixed_string import FixedStringColumn
from chcolumns.typenames import NoBits, parse_decimal
from chcolumns.quoted_types import parse_enum8

col = FixedStringColumn(4, [b"ab", b"abcdef"])
assert col.at(0) == b"ab\x00\x00"
assert col.at(1) == b"abcd"

out = io.BytesIO()
col.save(out, 0, 2)
restored = FixedStringColumn.load(io.BytesIO(out.getvalue()), 2, 4)
assert restored.at(1) == b"abcd"

stamp = from_datetime(datetime(2019, 1, 1, tzinfo=timezone.utc), 3)
assert stamp == 1_546_300_800_000
assert to_datetime(stamp, 3, timezone.utc) == datetime(2019, 1, 1, tzinfo=timezone.utc)

assert parse_decimal("Decimal(9, 4)") == (9, 4, NoBits.N32)
assert parse_enum8("Enum8 ('a' = 1, 'b' = 2)") == [("a", 1), ("b", 2)]
```

## What it does not do

- No factory turns a type name into a column. The parsers only take names apart.
- There are no columns for these types:
  - the plain numeric types
  - `String`
  - `Date`/`DateTime`
  - `Nullable`
  - `Decimal`
  - `Enum`
  - `Map`
  - `LowCardinality`
  - `SimpleAggregateFunction`
- There is no block reading or writing, and no connection to a server.

## Running the tests

```
pip install -e .[test]
pytest
```