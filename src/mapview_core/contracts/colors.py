from __future__ import annotations

TRANSPARENT = 0
NO_TINT = -1


def to_signed32(value: int) -> int:
    """Fold an unsigned ARGB int (e.g. 0xFF00FF00) into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def argb(alpha: int, red: int, green: int, blue: int) -> int:
    return to_signed32(((alpha & 0xFF) << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF))


# Default accuracy-ring tint when the theme does not provide a primary color.
DEFAULT_PRIMARY_COLOR = to_signed32(0xFF1E8CAB)
