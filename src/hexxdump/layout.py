"""Row chunking and address-column sizing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Row:
    """One output row: the offset of its first byte and the bytes it covers."""

    offset: int
    data: bytes


def min_hex_digits_for(value: int) -> int:
    """Number of hex digits needed to print ``value`` (at least 1)."""
    digits = 1
    limit = 16
    while value >= limit:
        limit *= 16
        digits += 1
    return digits


def address_width_for(length: int, minimum: int) -> int:
    """Width of the address column for an input of ``length`` bytes.

    The last offset's digit count is rounded up to an even number, so
    addresses always cover whole bytes, then widened to ``minimum``.
    """
    digits = min_hex_digits_for(max(0, length - 1))
    even_digits = (digits + 1) // 2 * 2
    return max(even_digits, minimum)


def row_count(length: int, bytes_per_row: int) -> int:
    if length == 0:
        return 0
    if bytes_per_row == 0:
        return 1
    return -(-length // bytes_per_row)


def iter_rows(data: bytes, bytes_per_row: int) -> Iterator[Row]:
    """Split ``data`` into rows of ``bytes_per_row`` bytes.

    A ``bytes_per_row`` of 0 yields the whole input as a single row.
    Empty input yields no rows.
    """
    if not data:
        return
    if bytes_per_row == 0:
        yield Row(offset=0, data=data)
        return
    for offset in range(0, len(data), bytes_per_row):
        yield Row(offset=offset, data=data[offset : offset + bytes_per_row])
