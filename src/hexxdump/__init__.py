"""hexxdump: configurable hex dumps of byte sequences."""

from hexxdump.charset import byte_to_char
from hexxdump.config import DEFAULT, Config
from hexxdump.render import DEFAULT_HEXXDUMP, Hexxdump, get_hexdump, hexdump, hexdump_to

__all__ = [
    "DEFAULT",
    "DEFAULT_HEXXDUMP",
    "Config",
    "Hexxdump",
    "byte_to_char",
    "get_hexdump",
    "hexdump",
    "hexdump_to",
]
