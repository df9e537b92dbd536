"""In-memory columns and type-name parsers for the ClickHouse native block format."""

__version__ = "0.1.0"