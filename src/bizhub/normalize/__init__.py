"""Total normalizers for loosely typed listing fields."""

from .price import extract_price, format_currency, format_price, parse_number
from .temporal import InstantKind, RawInstant, format_uploaded_at, to_datetime, to_timestamp

__all__ = [
    "extract_price",
    "format_currency",
    "format_price",
    "parse_number",
    "InstantKind",
    "RawInstant",
    "format_uploaded_at",
    "to_datetime",
    "to_timestamp",
]
