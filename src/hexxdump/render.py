"""Hex dump renderer."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

from hexxdump.charset import byte_to_char
from hexxdump.config import DEFAULT, Config
from hexxdump.layout import Row, address_width_for, iter_rows, row_count
from hexxdump.types import ByteSink, BytesInput

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
PAD = "   "
COLUMN_GAP = "  "


def _as_bytes(data: BytesInput) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (str, int)):
        raise TypeError(f"expected a bytes-like object or iterable of ints, got {type(data).__name__}")
    return bytes(data)


class Hexxdump:
    """Renders bytes as rows of address, hex values and characters.

    A ``Hexxdump`` holds nothing but its ``Config``, so one instance can be
    reused for any number of dumps.
    """

    def __init__(self, config: Config = DEFAULT) -> None:
        if not isinstance(config, Config):
            raise TypeError(f"config must be a Config, got {type(config).__name__}")
        self._config = config

    @classmethod
    def with_config(cls, config: Config) -> Hexxdump:
        return cls(config)

    @property
    def config(self) -> Config:
        return self._config

    def __repr__(self) -> str:
        return f"Hexxdump({self._config!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hexxdump):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash(self._config)

    # ─── Public dump operations ─────────────────────────────────────────────

    def get_hexdump(self, data: BytesInput) -> str:
        """Return the hex dump of ``data`` as a string, one newline-terminated line per row."""
        return "".join(self.iter_lines(data))

    def hexdump_to(self, output: ByteSink, data: BytesInput) -> int:
        """Write the hex dump of ``data`` to ``output`` as UTF-8.

        Args:
            output: Binary sink with a ``write(bytes)`` method.
            data: Bytes to dump.

        Returns:
            The number of bytes written.

        Raises:
            OSError: Whatever ``output.write`` raises, unchanged.
        """
        written = 0
        for line in self.iter_lines(data):
            encoded = line.encode(ENCODING)
            n = output.write(encoded)
            written += len(encoded) if n is None else n
        logger.debug("wrote %d bytes", written)
        return written

    def hexdump(self, data: BytesInput) -> None:
        """Write the hex dump of ``data`` to stdout, ignoring write errors."""
        data = _as_bytes(data)
        stdout = sys.stdout
        if stdout is None:
            return
        buffer = getattr(stdout, "buffer", None)
        try:
            if buffer is None:
                # text-only stream, e.g. a replaced sys.stdout
                for line in self.iter_lines(data):
                    stdout.write(line)
                return
            stdout.flush()
            self.hexdump_to(buffer, data)
            buffer.flush()
        except (OSError, ValueError) as e:
            # ValueError: stdout already closed
            logger.debug("discarding stdout write error: %s", e)

    def iter_lines(self, data: BytesInput) -> Iterator[str]:
        """Yield each formatted row, including its trailing newline."""
        data = _as_bytes(data)
        cfg = self._config
        width = address_width_for(len(data), cfg.address_width)
        logger.debug(
            "dumping %d bytes in %d rows, bytes_per_row=%d, address_width=%d",
            len(data),
            row_count(len(data), cfg.bytes_per_row),
            cfg.bytes_per_row,
            width,
        )
        for row in iter_rows(data, cfg.bytes_per_row):
            yield self._format_row(row, width) + "\n"

    # ─── Column helpers ─────────────────────────────────────────────────────

    def byte_to_char(self, byte: int) -> str:
        """Return the character-column representation of a single byte."""
        return byte_to_char(byte, self._config)

    def get_hex_values(self, data: BytesInput) -> str:
        """Space-separated two-digit hex values, as in the middle column of a single-row dump."""
        return " ".join(f"{b:02x}" for b in _as_bytes(data))

    def get_characters(self, data: BytesInput) -> str:
        """Mapped characters, as in the right column of a single-row dump."""
        return "".join(byte_to_char(b, self._config) for b in _as_bytes(data))

    def _format_row(self, row: Row, address_width: int) -> str:
        cfg = self._config
        columns: list[str] = []
        if cfg.show_hex_values:
            hex_values = self.get_hex_values(row.data)
            if cfg.bytes_per_row:
                hex_values += PAD * max(0, cfg.bytes_per_row - len(row.data))
            columns.append(hex_values)
        if cfg.show_characters:
            columns.append(self.get_characters(row.data))
        body = COLUMN_GAP.join(columns)
        if cfg.show_address:
            return f"{row.offset:0{address_width}x}: {body}"
        return body


DEFAULT_HEXXDUMP = Hexxdump(DEFAULT)


def hexdump(data: BytesInput) -> None:
    """Write the hex dump of ``data`` to stdout with the default configuration."""
    DEFAULT_HEXXDUMP.hexdump(data)


def hexdump_to(output: ByteSink, data: BytesInput) -> int:
    """Write the hex dump of ``data`` to ``output`` with the default configuration."""
    return DEFAULT_HEXXDUMP.hexdump_to(output, data)


def get_hexdump(data: BytesInput) -> str:
    """Return the hex dump of ``data`` with the default configuration."""
    return DEFAULT_HEXXDUMP.get_hexdump(data)
