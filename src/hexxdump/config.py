"""Display options for hex dumps.

A ``Config`` is an immutable value. Each ``with_*`` call returns a new
``Config`` with one field changed, so configurations can be chained and
shared freely::

    >>> from hexxdump.config import Config
    >>> Config.new().with_bytes_per_row(8).with_address_width(2).into_hexxdump().get_hexdump(b"Hello")
    '00: 48 65 6c 6c 6f           Hello\\n'
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hexxdump.render import Hexxdump

_WIDTH_FIELDS = ("bytes_per_row", "address_width")
_FLAG_FIELDS = (
    "show_address",
    "show_hex_values",
    "show_characters",
    "use_control_pictures",
    "use_control_picture_for_space",
)


@dataclass(frozen=True)
class Config:
    """Configuration for a hex dump.

    ``bytes_per_row`` of 0 puts the whole input on a single row.
    ``address_width`` is a minimum; wider addresses are used when the input
    needs them.
    """

    bytes_per_row: int = 16
    address_width: int = 4
    show_address: bool = True
    show_hex_values: bool = True
    show_characters: bool = True
    use_control_pictures: bool = False
    use_control_picture_for_space: bool = False
    substitute_character: str = "."

    def __post_init__(self) -> None:
        for name in _WIDTH_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        for name in _FLAG_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise TypeError(f"{name} must be a bool, got {type(value).__name__}")
        ch = self.substitute_character
        if not isinstance(ch, str):
            raise TypeError(f"substitute_character must be a str, got {type(ch).__name__}")
        if len(ch) != 1:
            raise ValueError(f"substitute_character must be a single character, got {ch!r}")

    @classmethod
    def new(cls) -> Config:
        return cls()

    def with_bytes_per_row(self, bytes_per_row: int) -> Config:
        return replace(self, bytes_per_row=bytes_per_row)

    def with_address_width(self, address_width: int) -> Config:
        return replace(self, address_width=address_width)

    def with_show_address(self, show_address: bool) -> Config:
        return replace(self, show_address=show_address)

    def with_show_hex_values(self, show_hex_values: bool) -> Config:
        return replace(self, show_hex_values=show_hex_values)

    def with_show_characters(self, show_characters: bool) -> Config:
        return replace(self, show_characters=show_characters)

    def with_control_pictures(self, use_control_pictures: bool) -> Config:
        return replace(self, use_control_pictures=use_control_pictures)

    def with_control_picture_for_space(self, use_control_picture_for_space: bool) -> Config:
        """Render the space byte as ``␠`` instead of a literal space."""
        return replace(self, use_control_picture_for_space=use_control_picture_for_space)

    def with_full_control_pictures(self) -> Config:
        """Control pictures for control bytes and for the space byte."""
        return replace(self, use_control_pictures=True, use_control_picture_for_space=True)

    def without_control_pictures(self) -> Config:
        return replace(self, use_control_pictures=False, use_control_picture_for_space=False)

    def with_substitute_character(self, substitute_character: str) -> Config:
        return replace(self, substitute_character=substitute_character)

    def replace(self, **changes: object) -> Config:
        """Return a copy with several fields changed at once.

        Raises:
            TypeError: If a name is not a Config field.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise TypeError(f"Unknown Config field(s): {', '.join(unknown)}")
        return replace(self, **changes)

    def into_hexxdump(self) -> Hexxdump:
        """Build a renderer that owns this configuration."""
        from hexxdump.render import Hexxdump

        return Hexxdump(self)


DEFAULT = Config()
