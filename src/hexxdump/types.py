"""Shared type definitions for hexxdump."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, Union

# Anything ``bytes()`` accepts except an int length.
BytesInput = Union[bytes, bytearray, memoryview, Iterable[int]]


class ByteSink(Protocol):
    """Destination for rendered output, such as a binary file or ``io.BytesIO``."""

    def write(self, data: bytes, /) -> int | None:
        """Write ``data`` and return the number of bytes written."""
        ...
