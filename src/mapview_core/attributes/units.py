from __future__ import annotations

"""Parsing of attribute strings (dimensions, colors, booleans) and dp -> px conversion."""

from typing import Sequence
import math
import re

import numpy as np

from ..contracts.colors import to_signed32
from ..contracts.errors import ValidationError

_DIMENSION_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z]*)\s*$")
_DENSITY_INDEPENDENT = {"", "dp", "dip", "sp"}


def check_density(density: float) -> float:
    try:
        value = float(density)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"density must be a number, got {density!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(f"density must be a positive finite number, got {density!r}")
    return value


def parse_dimension(text: str, density: float = 1.0) -> float:
    """Return a dimension string in density-independent units.

    ``"16dp"``/``"16dip"``/``"16sp"``/``"16"`` give 16.0. ``"24px"`` is divided by
    ``density`` so that a later ``to_pixels`` yields 24 device pixels again.
    """
    m = _DIMENSION_RE.match(text)
    if not m:
        raise ValidationError(f"invalid dimension '{text}'")
    value = float(m.group(1))
    unit = m.group(2).lower()
    if unit in _DENSITY_INDEPENDENT:
        return value
    if unit == "px":
        return value / check_density(density)
    raise ValidationError(f"unsupported dimension unit '{unit}' in '{text}'")


def parse_color(text: str) -> int:
    """Parse ``#RGB``, ``#ARGB``, ``#RRGGBB`` or ``#AARRGGBB`` into a signed ARGB int."""
    raw = text.strip()
    if not raw.startswith("#"):
        raise ValidationError(f"color must start with '#': '{text}'")
    digits = raw[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) == 6:
        digits = "FF" + digits
    if len(digits) != 8:
        raise ValidationError(f"invalid color '{text}'")
    try:
        value = int(digits, 16)
    except ValueError as exc:
        raise ValidationError(f"invalid color '{text}'") from exc
    return to_signed32(value)


def parse_bool(text: str) -> bool:
    raw = text.strip().lower()
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise ValidationError(f"invalid boolean '{text}'")


def to_pixels(values: Sequence[float], density: float) -> tuple[int, ...]:
    """Scale dp values by ``density`` and round half up to whole device pixels."""
    scaled = np.asarray(values, dtype=np.float64) * check_density(density)
    return tuple(int(v) for v in np.floor(scaled + 0.5))
