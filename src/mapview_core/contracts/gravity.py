"""Gravity bitmasks used to anchor map chrome (compass, logo, attribution).

Values match the platform layout constants so records stay interchangeable
with layouts produced elsewhere. The importer and the record treat gravity as
an opaque int; only the helpers here know the names.
"""

from __future__ import annotations

from .errors import ValidationError


class Gravity:
    """Anchor flags; combine with ``|``."""

    NO_GRAVITY = 0x00
    LEFT = 0x03
    RIGHT = 0x05
    TOP = 0x30
    BOTTOM = 0x50
    CENTER_HORIZONTAL = 0x01
    CENTER_VERTICAL = 0x10
    CENTER = 0x11
    FILL = 0x77
    START = 0x00800003
    END = 0x00800005


_NAMED = {
    "no_gravity": Gravity.NO_GRAVITY,
    "left": Gravity.LEFT,
    "right": Gravity.RIGHT,
    "top": Gravity.TOP,
    "bottom": Gravity.BOTTOM,
    "center_horizontal": Gravity.CENTER_HORIZONTAL,
    "center_vertical": Gravity.CENTER_VERTICAL,
    "center": Gravity.CENTER,
    "fill": Gravity.FILL,
    "start": Gravity.START,
    "end": Gravity.END,
}


def parse_gravity(text: str) -> int:
    """Parse ``"top|end"`` style flag names (or a plain integer) into a bitmask."""
    raw = text.strip()
    if not raw:
        raise ValidationError("gravity must not be empty")
    try:
        return int(raw, 0)
    except ValueError:
        pass
    value = 0
    for part in raw.split("|"):
        name = part.strip().lower()
        if name not in _NAMED:
            raise ValidationError(f"unknown gravity flag '{part.strip()}'")
        value |= _NAMED[name]
    return value
