"""Byte to display-character mapping for the character column."""

from __future__ import annotations

from hexxdump.config import Config

# U+2400..U+241F, indexed by control byte value 0x00..0x1F
CONTROL_PICTURES: tuple[str, ...] = (
    "␀", "␁", "␂", "␃", "␄", "␅", "␆", "␇",
    "␈", "␉", "␊", "␋", "␌", "␍", "␎", "␏",
    "␐", "␑", "␒", "␓", "␔", "␕", "␖", "␗",
    "␘", "␙", "␚", "␛", "␜", "␝", "␞", "␟",
)  # fmt: skip
SPACE_PICTURE = "␠"
DELETE_PICTURE = "␡"

DELETE = 0x7F
SPACE = 0x20


def is_ascii_graphic(byte: int) -> bool:
    return 0x21 <= byte <= 0x7E


def is_ascii_control(byte: int) -> bool:
    return byte < 0x20 or byte == DELETE


def byte_to_char(byte: int, config: Config) -> str:
    """Return the single character shown for ``byte`` in the character column.

    Printable ASCII maps to itself and space to a space. ASCII control bytes
    map to their Control Pictures glyph when ``config.use_control_pictures``
    is set. Everything else, including all bytes >= 0x80, maps to
    ``config.substitute_character``.
    """
    if is_ascii_graphic(byte):
        return chr(byte)
    if byte == SPACE:
        return SPACE_PICTURE if config.use_control_picture_for_space else " "
    if config.use_control_pictures and is_ascii_control(byte):
        if byte == DELETE:
            return DELETE_PICTURE
        return CONTROL_PICTURES[byte]
    return config.substitute_character
